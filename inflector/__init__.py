from .config import InflectorConfig
from .exceptions import InvalidConfiguration, InvalidIrregularPair
from .inflector import Inflector, logger
from .irregulars import IRREGULAR_NOUNS
from .naming import TableNames, table_names
from .string_utils import from_underscores

# Functions bound to an inflector without host supplied irregular nouns
_default = Inflector()

irregulars = _default.irregulars
irregular = _default.irregular
is_irregular = _default.is_irregular
is_plural = _default.is_plural
is_singular = _default.is_singular
to_singular = _default.to_singular
to_singular_irregular = _default.to_singular_irregular
to_plural = _default.to_plural
to_plural_irregular = _default.to_plural_irregular
