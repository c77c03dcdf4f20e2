from typing import NamedTuple, Optional

from .inflector import Inflector
from .string_utils import from_underscores


class TableNames(NamedTuple):
    singular: str
    plural: str
    camel: str


def table_names(name: str, inflector: Optional[Inflector] = None) -> TableNames:
    """
    Derive the model and table names of a table or model name.

    :param name: A table name, singular or plural, like ``'car_makers'``.
    :param inflector: The inflector to use, with the default irregular nouns if omitted.
    :return: The singular, plural and CamelCase (of the singular) names,
             like ``TableNames('car_maker', 'car_makers', 'CarMaker')``.
    """
    inflector = inflector or Inflector()

    singular = inflector.to_singular(name) or name  # in case the table names are plural
    plural = inflector.to_plural(singular) or singular
    return TableNames(singular, plural, from_underscores(singular))
