"""
Item Line Parser - Разбор одной строки товара.

ЦКП: ParsedItemLine из строки свободного ввода или ItemLineError с сообщением для пользователя.

SRP: Только диспетчеризация по грамматикам и валидация полей. Хранение,
диалог и накопление списка - у вызывающего кода.
"""

from typing import List, Sequence

from loguru import logger

from contracts.item_line_dto import ParsedItemLine
from ..domain.exceptions import (
    EmptyLineError,
    InvalidQuantityError,
    InvalidUnitError,
    MissingProductError,
    TooFewFieldsError,
    UnrecognizedFormatError,
)
from ..domain.interfaces import IItemLineParser, ILineGrammar, IUnitNormalizer, LineFields
from ..extraction.decimal_parser import DecimalParser
from ..extraction.line_classifier import LineClassifier, LineFormat


class ItemLineParser(IItemLineParser):
    """
    Парсер строки товара.

    Порядок: классификатор выбирает формат, затем грамматики формата
    пробуются по порядку, первая совпавшая дает поля. Поля проверяются в
    порядке название -> количество -> единица.
    """

    def __init__(
        self,
        classifier: LineClassifier,
        separated_grammar: ILineGrammar,
        natural_grammars: Sequence[ILineGrammar],
        decimal_parser: DecimalParser,
        unit_normalizer: IUnitNormalizer,
    ):
        """
        Args:
            classifier: Классификатор формата строки
            separated_grammar: Грамматика формата с разделителями
            natural_grammars: Упорядоченные грамматики свободного формата
            decimal_parser: Нормализатор количества
            unit_normalizer: Нормализатор единиц
        """
        self.classifier = classifier
        self.separated_grammar = separated_grammar
        self.natural_grammars: List[ILineGrammar] = list(natural_grammars)
        self.decimal_parser = decimal_parser
        self.unit_normalizer = unit_normalizer

    def parse(self, line: str) -> ParsedItemLine:
        text = line.strip() if line else ""
        if not text:
            raise EmptyLineError(line=line)

        line_format = self.classifier.classify(text)
        if line_format is LineFormat.SEPARATED:
            fields = self.separated_grammar.try_match(text)
            if fields is None:
                raise TooFewFieldsError(line=text)
            grammar_name = self.separated_grammar.name
        else:
            fields, grammar_name = self._match_natural(text)

        if fields is None:
            raise UnrecognizedFormatError(line=text)

        logger.debug(f"[ItemLineParser] '{text}' -> {grammar_name}: {fields}")
        return self.build(fields, text)

    def _match_natural(self, text: str):
        for grammar in self.natural_grammars:
            fields = grammar.try_match(text)
            if fields is not None:
                return fields, grammar.name
        return None, None

    def build(self, fields: LineFields, line: str) -> ParsedItemLine:
        """
        Нормализует и проверяет поля.

        Raises:
            MissingProductError, InvalidQuantityError, InvalidUnitError
        """
        product = fields.product.strip()
        if not product:
            raise MissingProductError(line=line)

        if fields.plain_quantity and not self.decimal_parser.is_plain_number(fields.quantity):
            raise InvalidQuantityError(token=fields.quantity, line=line)

        quantity = self.decimal_parser.parse(fields.quantity)
        if quantity is None:
            raise InvalidQuantityError(token=fields.quantity, line=line)

        unit = self.unit_normalizer.normalize(fields.unit)
        if unit is None:
            raise InvalidUnitError(token=fields.unit, line=line)

        return ParsedItemLine(
            ref=fields.ref,
            product=product,
            quantity=quantity,
            unit=unit,
            reason=fields.reason,
        )
