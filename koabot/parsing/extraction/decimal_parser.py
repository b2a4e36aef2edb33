import math
import re
from decimal import Decimal
from typing import Optional

from loguru import logger

# Количество в свободном формате: цифры и не более одного разделителя (10, 2,5, 0.25)
PLAIN_NUMBER_PATTERN = r'[0-9]+[,.]?[0-9]*'


class DecimalParser:
    """
    Элемент-функция: Преобразует токен количества в число.

    Принимает запятую или точку как десятичный разделитель ("2,5" == "2.5").
    ЦКП: Конечное число (float) или None. Диапазон не проверяется.
    """

    def __init__(self):
        # Обычная десятичная запись, опционально с экспонентой: 10, 2.5, .5, -3, 1e3
        self.number_pattern = re.compile(r'^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$')
        self.plain_pattern = re.compile(rf'^{PLAIN_NUMBER_PATTERN}$')

    def is_plain_number(self, token: str) -> bool:
        """Без знака, экспоненты и ведущей точки: "-5", "1e3", ".5" не проходят."""
        return bool(token) and self.plain_pattern.match(token.strip()) is not None

    def parse(self, token: str) -> Optional[float]:
        """
        ЦКП: Число или None (решение об ошибке принимает вызывающий код).
        """
        if token is None:
            return None

        normalized = token.replace(',', '.', 1).strip()
        if not normalized:
            return None

        # float() принимает "inf", "nan" и "1_000" - такие токены не количество
        if not self.number_pattern.match(normalized):
            logger.debug(f"[DecimalParser] Не число: '{token}'")
            return None

        value = float(normalized)
        if not math.isfinite(value):
            return None
        return value


def decimal_places(value: float) -> int:
    """Количество значащих знаков после запятой (0.250 -> 2, 10.0 -> 0)."""
    exponent = Decimal(repr(value)).normalize().as_tuple().exponent
    return max(0, -exponent)


def has_max_decimal_places(value: float, places: int) -> bool:
    return decimal_places(value) <= places


_default_parser = DecimalParser()


def parse_decimal(token: str) -> Optional[float]:
    return _default_parser.parse(token)
