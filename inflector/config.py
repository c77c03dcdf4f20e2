from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .exceptions import InvalidConfiguration, InvalidIrregularPair

IrregularPair = Tuple[str, str]


class InflectorConfig:
    """
    Host supplied settings of an ``Inflector``.

    The extension pairs are either a fixed sequence or a callable returning
    the current sequence. A callable is invoked on every lookup, so the host
    can change its configuration at runtime without rebuilding the inflector.
    """

    def __init__(self,
                 irregulars: Optional[Sequence[IrregularPair]] = None,
                 irregulars_source: Optional[Callable[[], Sequence[IrregularPair]]] = None):
        if irregulars is not None and irregulars_source is not None:
            raise InvalidConfiguration('Specify either "irregulars" or "irregulars_source", not both.')
        if irregulars_source is not None and not callable(irregulars_source):
            raise InvalidConfiguration(f'"irregulars_source" must be callable, got {type(irregulars_source).__name__}.')

        if irregulars is not None:
            irregulars = tuple(irregulars)
            irregulars_source = lambda: irregulars

        self._irregulars_source = irregulars_source

    @classmethod
    def from_dict(cls, config: Dict) -> 'InflectorConfig':
        """
        Create the configuration from a host configuration mapping.

        Only the ``inflector_irregulars`` key is used, every other key is ignored.
        """
        return cls(irregulars=config.get('inflector_irregulars') or ())

    def extension_irregulars(self) -> List[IrregularPair]:
        """
        Return the host supplied irregular pairs, lowercased.

        :raises InvalidIrregularPair: If an entry is not a pair of non-empty strings.
        """
        if self._irregulars_source is None:
            return []

        pairs = []
        for entry in self._irregulars_source() or ():
            if (not isinstance(entry, (tuple, list)) or len(entry) != 2
                    or not all(isinstance(form, str) and form for form in entry)):
                raise InvalidIrregularPair(f'Irregular nouns must be (singular, plural) string pairs, got {entry!r}.')
            pairs.append((entry[0].casefold(), entry[1].casefold()))

        return pairs
