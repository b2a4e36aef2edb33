"""
Домен Parsing: разбор строк товаров из сообщений бота.

Архитектура:
- Классификатор формата (разделители / свободный текст)
- Грамматики: SeparatedGrammar, ProductFirstGrammar, QuantityFirstGrammar
- Нормализаторы: количество (запятая или точка), единицы (ud, kg, L)

Вход: строка сообщения пользователя
Выход: contracts.ParsedItemLine / contracts.ItemBatch
"""

from typing import Optional

from contracts.item_line_dto import ItemBatch, ParsedItemLine, Unit
from koabot.parsing.application import ItemBatchParser, ItemLineParser, ParsingComponentFactory
from koabot.parsing.domain.exceptions import (
    ParsingError,
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
from koabot.parsing.extraction import normalize_unit, parse_decimal

_default_parser: Optional[ItemLineParser] = None


def get_default_parser() -> ItemLineParser:
    """Парсер для DEFAULT_LOCALE, создается при первом обращении."""
    global _default_parser
    if _default_parser is None:
        _default_parser = ParsingComponentFactory.create_item_line_parser()
    return _default_parser


def parse_item_line(line: str) -> ParsedItemLine:
    """
    Разбирает одну строку товара.

    Raises:
        ItemLineError: подкласс с сообщением для пользователя
    """
    return get_default_parser().parse(line)


def parse_item_lines(
    text: str,
    *,
    allow_reason_directive: bool = False,
    max_decimal_places: Optional[int] = None,
) -> ItemBatch:
    """
    Разбирает многострочное сообщение, первая ошибка прерывает партию.

    Raises:
        ItemBatchError, EmptyBatchError
    """
    batch_parser = ItemBatchParser(
        line_parser=get_default_parser(),
        allow_reason_directive=allow_reason_directive,
        max_decimal_places=max_decimal_places,
    )
    return batch_parser.parse(text)


__all__ = [
    "parse_item_line",
    "parse_item_lines",
    "get_default_parser",
    "parse_decimal",
    "normalize_unit",
    "ParsedItemLine",
    "ItemBatch",
    "Unit",
    "ItemLineParser",
    "ItemBatchParser",
    "ParsingComponentFactory",
    "ParsingError",
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
]
