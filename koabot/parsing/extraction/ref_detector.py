"""
Эвристики свободного формата: REF-код в начале и причина в конце.

Обе эвристики приблизительные и вынесены в отдельные предикаты, чтобы их
можно было тестировать и заменять, не трогая грамматики.

Известное ложное срабатывание: короткое слово заглавными буквами в начале
("PAN Pan burger", "AOVE Virgen extra") считается REF-кодом.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from config.settings import (
    UNKNOWN_REF,
    REF_CODE_MIN_LENGTH,
    REF_CODE_MAX_LENGTH,
    REF_CODE_SHORT_LENGTH,
    TRAILING_REASON_MAX_LENGTH,
)

REF_PREFIX_PATTERN = re.compile(
    rf'^([A-Z0-9]{{{REF_CODE_MIN_LENGTH},{REF_CODE_MAX_LENGTH}}})\s+(.+)$'
)


def looks_like_ref_code(token: str) -> bool:
    """Код, а не слово: есть цифра, либо короткий и весь в верхнем регистре."""
    has_digit = any('0' <= ch <= '9' for ch in token)
    is_short_upper = len(token) <= REF_CODE_SHORT_LENGTH and token == token.upper()
    return has_digit or is_short_upper


def split_ref(text: str) -> Tuple[str, str]:
    """
    Отделяет REF-код от начала текста.

    Returns:
        (ref, остаток). Если кода нет - ("UNKNOWN", весь текст).
    """
    text = text.strip()
    match = REF_PREFIX_PATTERN.match(text)
    if match and looks_like_ref_code(match.group(1)):
        return match.group(1), match.group(2).strip()
    return UNKNOWN_REF, text


def looks_like_trailing_reason(word: str, previous_word: Optional[str] = None,
                               connectors: Iterable[str] = ()) -> bool:
    """
    Последнее слово - причина ("quemado"), а не часть названия?

    Короткое, в нижнем регистре, не начинается с цифры, и перед ним не стоит
    служебное слово ("Pechuga de pollo").
    """
    if not word or len(word) > TRAILING_REASON_MAX_LENGTH:
        return False
    if word != word.lower() or word[0].isdigit():
        return False
    if previous_word is not None and previous_word.lower() in set(connectors):
        return False
    return True


@dataclass
class TrailingReasonSplitter:
    """Делит "название [причина]" по последнему слову."""

    connectors: Tuple[str, ...] = ()

    def split(self, text: str) -> Tuple[str, Optional[str]]:
        words = text.split()
        if len(words) > 1 and looks_like_trailing_reason(words[-1], words[-2], self.connectors):
            return " ".join(words[:-1]), words[-1]
        return text.strip(), None
