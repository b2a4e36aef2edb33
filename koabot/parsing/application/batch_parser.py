"""
Batch Parser - Разбор многострочного сообщения со списком товаров.

ЦКП: ItemBatch (товары в порядке ввода + общая причина). Первая строка с
ошибкой прерывает всю партию, частичного результата нет.
"""

import re
from typing import List, Optional, Tuple

from loguru import logger

from config.settings import REASON_DIRECTIVE
from contracts.item_line_dto import ItemBatch, ParsedItemLine
from ..domain.exceptions import EmptyBatchError, ItemBatchError, ItemLineError, QuantityPrecisionError
from ..domain.interfaces import IItemBatchParser, IItemLineParser
from ..extraction.decimal_parser import has_max_decimal_places


class ItemBatchParser(IItemBatchParser):
    """
    Парсер сообщения: одна строка - один товар.

    Строка-директива "motivo: ..." (списание) задает причину для всей партии.
    """

    def __init__(
        self,
        line_parser: IItemLineParser,
        allow_reason_directive: bool = False,
        max_decimal_places: Optional[int] = None,
        reason_directive: str = REASON_DIRECTIVE,
    ):
        """
        Args:
            line_parser: Парсер одной строки
            allow_reason_directive: Искать строку "motivo:" с причиной для партии
            max_decimal_places: Ограничение точности количества (None - без ограничения)
            reason_directive: Префикс строки-директивы
        """
        self.line_parser = line_parser
        self.allow_reason_directive = allow_reason_directive
        self.max_decimal_places = max_decimal_places
        self.directive_pattern = re.compile(re.escape(reason_directive) + r'\s*(.*)', re.IGNORECASE)

    def parse(self, text: str) -> ItemBatch:
        lines = self.split_lines(text)

        reason = None
        if self.allow_reason_directive:
            lines, reason = self._extract_reason(lines)

        items: List[ParsedItemLine] = []
        for line_number, line in lines:
            try:
                item = self.line_parser.parse(line)
                self._check_precision(item, line)
            except ItemLineError as e:
                logger.debug(f"[ItemBatchParser] Строка {line_number} отклонена: {e.message}")
                raise ItemBatchError(line_number=line_number, line=line.strip(), cause=e) from e
            items.append(item)

        if not items:
            raise EmptyBatchError()

        logger.debug(f"[ItemBatchParser] Разобрано товаров: {len(items)}, причина: {reason!r}")
        return ItemBatch(items=items, reason=reason)

    @staticmethod
    def split_lines(text: str) -> List[Tuple[int, str]]:
        """Непустые строки с номерами (с 1, как видит пользователь)."""
        return [
            (number, line)
            for number, line in enumerate((text or "").splitlines(), start=1)
            if line.strip()
        ]

    def _extract_reason(self, lines: List[Tuple[int, str]]) -> Tuple[List[Tuple[int, str]], Optional[str]]:
        reason = None
        item_lines = []
        for number, line in lines:
            match = self.directive_pattern.search(line)
            if match is None:
                item_lines.append((number, line))
                continue
            # Берется первая директива, остальные просто не считаются товарами
            if reason is None:
                reason = match.group(1).strip() or None
        return item_lines, reason

    def _check_precision(self, item: ParsedItemLine, line: str):
        if self.max_decimal_places is None:
            return
        if not has_max_decimal_places(item.quantity, self.max_decimal_places):
            raise QuantityPrecisionError(
                token=f"{item.quantity}",
                max_decimal_places=self.max_decimal_places,
                line=line,
            )
