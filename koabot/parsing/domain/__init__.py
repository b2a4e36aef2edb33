"""
Домен Parsing: исключения и интерфейсы.
"""

from .exceptions import (
    ParsingError,
    ParsingConfigurationError,
    ItemLineError,
    EmptyLineError,
    TooFewFieldsError,
    MissingProductError,
    InvalidQuantityError,
    QuantityPrecisionError,
    InvalidUnitError,
    UnrecognizedFormatError,
    ItemBatchError,
    EmptyBatchError,
)
from .interfaces import LineFields, IUnitNormalizer, ILineGrammar, IItemLineParser, IItemBatchParser

__all__ = [
    "ParsingError",
    "ParsingConfigurationError",
    "ItemLineError",
    "EmptyLineError",
    "TooFewFieldsError",
    "MissingProductError",
    "InvalidQuantityError",
    "QuantityPrecisionError",
    "InvalidUnitError",
    "UnrecognizedFormatError",
    "ItemBatchError",
    "EmptyBatchError",
    "LineFields",
    "IUnitNormalizer",
    "ILineGrammar",
    "IItemLineParser",
    "IItemBatchParser",
]
