"""
Грамматики свободного формата (без разделителей).

- Pattern A: "nombre cantidad unidad [motivo]" (Pechuga de pollo 0.25 kg)
- Pattern B: "cantidad unidad nombre [motivo]" (0,25 kg Pechuga de pollo)

Диагностические варианты тех же грамматик с ослабленным токеном количества или
единицы идут после строгих. Они не меняют разбор корректных строк, а только
позволяют сообщить пользователю, какое поле неверно ("Tomate abc kg").
Все грамматики помечают поля plain_quantity: токен вроде "-5" или "1e3",
пойманный диагностикой, отвергается при валидации.
"""

import re
from typing import List, Optional

from config.settings import UNKNOWN_REF
from ..domain.interfaces import ILineGrammar, LineFields
from ..extraction.decimal_parser import PLAIN_NUMBER_PATTERN
from ..extraction.ref_detector import TrailingReasonSplitter, split_ref

QUANTITY_PATTERN = PLAIN_NUMBER_PATTERN
ANY_TOKEN_PATTERN = r'\S+'


def unit_alternation(unit_words: List[str]) -> str:
    words = sorted(unit_words, key=len, reverse=True)
    return "(?:" + "|".join(re.escape(w) for w in words) + ")"


class ProductFirstGrammar(ILineGrammar):
    """
    Pattern A: название, количество, единица, опционально причина.

    Все, что до количества - название (с возможным REF-кодом в начале),
    все, что после единицы - причина.
    """

    name = "product_first"

    def __init__(self, unit_words: List[str], quantity_pattern: str = QUANTITY_PATTERN,
                 unit_pattern: Optional[str] = None, name: Optional[str] = None):
        unit_pattern = unit_pattern or unit_alternation(unit_words)
        self.pattern = re.compile(
            rf'^(.+?)\s+({quantity_pattern})\s+({unit_pattern})(?:\s+(.+))?$',
            re.IGNORECASE,
        )
        if name:
            self.name = name

    def try_match(self, line: str) -> Optional[LineFields]:
        match = self.pattern.match(line)
        if not match:
            return None

        product_part, quantity, unit, reason = match.groups()
        ref, product = split_ref(product_part)
        return LineFields(
            ref=ref,
            product=product,
            quantity=quantity,
            unit=unit,
            reason=reason.strip() if reason else None,
            plain_quantity=True,
        )


class QuantityFirstGrammar(ILineGrammar):
    """
    Pattern B: количество, единица, затем [REF] название [причина].

    Причина отделяется эвристикой последнего слова (TrailingReasonSplitter).
    Без остатка ("10 kg") название пустое - ошибку выдаст валидация.
    """

    name = "quantity_first"

    def __init__(self, unit_words: List[str], reason_splitter: TrailingReasonSplitter,
                 unit_pattern: Optional[str] = None, rest_required: bool = False,
                 name: Optional[str] = None):
        unit_pattern = unit_pattern or unit_alternation(unit_words)
        rest = r'\s+(.+)' if rest_required else r'(?:\s+(.+))?'
        self.pattern = re.compile(rf'^({QUANTITY_PATTERN})\s+({unit_pattern}){rest}$', re.IGNORECASE)
        self.reason_splitter = reason_splitter
        if name:
            self.name = name

    def try_match(self, line: str) -> Optional[LineFields]:
        match = self.pattern.match(line)
        if not match:
            return None

        quantity, unit, rest = match.groups()
        if not rest or not rest.strip():
            return LineFields(ref=UNKNOWN_REF, product="", quantity=quantity, unit=unit, plain_quantity=True)

        ref, product_and_reason = split_ref(rest)
        product, reason = self.reason_splitter.split(product_and_reason)
        return LineFields(
            ref=ref, product=product, quantity=quantity, unit=unit, reason=reason, plain_quantity=True,
        )


def build_natural_grammars(unit_words: List[str], reason_splitter: TrailingReasonSplitter) -> List[ILineGrammar]:
    """
    Упорядоченный список грамматик свободного формата. Побеждает первая совпавшая.
    """
    return [
        ProductFirstGrammar(unit_words),
        QuantityFirstGrammar(unit_words, reason_splitter),
        # Диагностика: "Tomate abc kg" -> неверное количество
        ProductFirstGrammar(unit_words, quantity_pattern=ANY_TOKEN_PATTERN, name="product_first_any_quantity"),
        # Диагностика: "Tomate 10 invalid" -> неверная единица
        ProductFirstGrammar(unit_words, unit_pattern=ANY_TOKEN_PATTERN, name="product_first_any_unit"),
        # Диагностика: "10 cajas Tomate" -> неверная единица
        QuantityFirstGrammar(
            unit_words,
            reason_splitter,
            unit_pattern=ANY_TOKEN_PATTERN,
            rest_required=True,
            name="quantity_first_any_unit",
        ),
    ]
