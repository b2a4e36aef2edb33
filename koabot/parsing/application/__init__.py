"""
Application слой домена Parsing: парсеры и фабрика.
"""

from .item_line_parser import ItemLineParser
from .batch_parser import ItemBatchParser
from .factory import ParsingComponentFactory

__all__ = [
    "ItemLineParser",
    "ItemBatchParser",
    "ParsingComponentFactory",
]
