"""
Грамматика формата с разделителями.

"REF; nombre; cantidad; unidad[; motivo]", также "|" и "," как разделители.
"""

import re
from typing import List, Optional

from loguru import logger

from config.settings import FIELD_SEPARATORS, MIN_SEPARATED_FIELDS, UNKNOWN_REF
from ..domain.interfaces import ILineGrammar, IUnitNormalizer, LineFields


class SeparatedGrammar(ILineGrammar):
    """
    Позиционный разбор по количеству полей.

    ЦКП: LineFields или None, если полей меньше трех (ошибку выдает парсер).
    """

    name = "separated"

    def __init__(self, unit_normalizer: IUnitNormalizer, separators: str = FIELD_SEPARATORS):
        """
        Args:
            unit_normalizer: Нужен, чтобы отличить единицу от причины в 4-м поле
            separators: Символы-разделители полей
        """
        self.unit_normalizer = unit_normalizer
        self.split_pattern = re.compile(f"[{re.escape(separators)}]")

    def split(self, line: str) -> List[str]:
        # Пустые поля отбрасываются: ведущая ";" означает "REF не указан"
        return [part.strip() for part in self.split_pattern.split(line) if part.strip()]

    def try_match(self, line: str) -> Optional[LineFields]:
        parts = self.split(line)

        if len(parts) < MIN_SEPARATED_FIELDS:
            return None

        # 5+ полей: ref; product; quantity; unit; причина из всех остальных
        if len(parts) >= 5:
            return LineFields(
                ref=parts[0] or UNKNOWN_REF,
                product=parts[1],
                quantity=parts[2],
                unit=parts[3],
                reason=" ".join(parts[4:]).strip() or None,
            )

        # 4 поля: ref; product; quantity; unit ИЛИ product; quantity; unit; reason
        if len(parts) == 4:
            if self.unit_normalizer.normalize(parts[3]) is not None:
                return LineFields(ref=parts[0] or UNKNOWN_REF, product=parts[1], quantity=parts[2], unit=parts[3])

            logger.debug(f"[SeparatedGrammar] 4-е поле не единица, считаем причиной: '{parts[3]}'")
            return LineFields(ref=UNKNOWN_REF, product=parts[0], quantity=parts[1], unit=parts[2], reason=parts[3])

        return LineFields(ref=UNKNOWN_REF, product=parts[0], quantity=parts[1], unit=parts[2])
