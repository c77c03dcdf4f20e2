import logging
from typing import List, Optional, Tuple

from .config import InflectorConfig
from .irregulars import IRREGULAR_NOUNS

logger = logging.getLogger('Inflector')

VOWELS = ('a', 'e', 'i', 'o', 'u')


def _ends_with(word: str, suffix: str) -> bool:
    # Compare on the original positions, casefold() may change the length of a string
    return len(word) >= len(suffix) and word[-len(suffix):].casefold() == suffix


def _is_consonant_at(word: str, index: int) -> bool:
    return len(word) >= -index and word[index].casefold() not in VOWELS


class Inflector:
    """
    Converts English nouns between singular and plural.

    The built-in ``IRREGULAR_NOUNS`` are scanned first, then the pairs
    supplied by the host through ``config``. Words are compared
    case-insensitively, while the rule based conversions keep the casing of
    the word they receive. A conversion that does not apply returns ``None``.
    """

    def __init__(self, config: Optional[InflectorConfig] = None, log_rules=False):
        self.config = config or InflectorConfig()
        self.log_rules = log_rules

    def irregulars(self) -> List[Tuple[str, str]]:
        """
        Return the irregular (singular, plural) pairs in lookup order.
        """
        return list(IRREGULAR_NOUNS) + self.config.extension_irregulars()

    def irregular(self, word: str) -> Optional[Tuple[str, str]]:
        """
        Find the irregular pair containing ``word`` as singular or plural.

        :param word: The word to look up, in any case.
        :return: The first matching (singular, plural) pair, or ``None``.
        """
        word = word.casefold()

        for singular, plural in IRREGULAR_NOUNS:
            if word == singular or word == plural:
                return singular, plural

        for singular, plural in self.config.extension_irregulars():
            if word == singular or word == plural:
                self._log_rule(word, 'host irregular', (singular, plural))
                return singular, plural

        return None

    def is_irregular(self, word: str) -> bool:
        return self.irregular(word) is not None

    def is_plural(self, word: str) -> bool:
        """
        Determine if a word is plural.

        Irregular nouns with identical forms, like "sheep", are always plural.

        :param word: The word to check.
        :return: True if the word is plural, False otherwise.
        """
        word = word.casefold()
        pair = self.irregular(word)

        if pair is not None and word != pair[0]:
            return True
        if pair is not None and word == pair[1]:
            return True

        return word.endswith('s')

    def is_singular(self, word: str) -> bool:
        return not self.is_plural(word)

    def to_singular(self, word: str, is_irregular: Optional[bool] = None) -> Optional[str]:
        """
        Convert a plural word to its singular form.

        :param word: The word to singularize.
        :param is_irregular: Skip the irregular lookup and use this value instead.
        :return: The singular form, or ``None`` if no transformation applies.
        """
        if is_irregular is None:
            is_irregular = self.is_irregular(word)

        if is_irregular or not _ends_with(word, 's'):
            return self.to_singular_irregular(word)

        # categories -> category, stories -> story
        if _ends_with(word, 'ies') and _is_consonant_at(word, -4):
            self._log_rule(word, 'ies -> y', word[:-3] + 'y')
            return word[:-3] + 'y'

        self._log_rule(word, 'strip s', word[:-1])
        return word[:-1]

    def to_singular_irregular(self, word: str) -> Optional[str]:
        """
        Return the singular form of the irregular word ``word``.

        ``None`` is returned when ``word`` is not irregular, or when it is
        already the singular of a pair with distinct forms.
        """
        pair = self.irregular(word)
        if pair is None:
            return None

        singular, plural = pair
        if word.casefold() == singular and singular != plural:
            return None

        return singular

    def to_plural(self, word: str, is_irregular: Optional[bool] = None) -> Optional[str]:
        """
        Convert a singular word to its plural form.

        Words that are already plural are returned unchanged.

        :param word: The word to pluralize.
        :param is_irregular: Skip the irregular lookup and use this value instead.
        :return: The plural form, or ``None`` if no transformation applies.
        """
        if is_irregular is None:
            is_irregular = self.is_irregular(word)

        if is_irregular:
            return self.to_plural_irregular(word)

        # category -> categories, story -> stories, but day -> days
        if _ends_with(word, 'y') and _is_consonant_at(word, -2):
            self._log_rule(word, 'y -> ies', word[:-1] + 'ies')
            return word[:-1] + 'ies'

        if self.is_singular(word):
            self._log_rule(word, 'append s', word + 's')
            return word + 's'

        return word

    def to_plural_irregular(self, word: str) -> Optional[str]:
        """
        Return the plural form of the irregular word ``word``, or ``None``.
        """
        pair = self.irregular(word)
        if pair is None:
            return None

        return pair[1]

    def _log_rule(self, word, rule, result):
        if not self.log_rules:
            return

        logger.debug(f'{word!r}: {rule} -> {result!r}')
