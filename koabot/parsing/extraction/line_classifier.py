from enum import Enum

from loguru import logger

from config.settings import FIELD_SEPARATORS
from ..domain.exceptions import EmptyLineError


class LineFormat(Enum):
    SEPARATED = "separated"
    NATURAL = "natural"


def is_decimal_comma(line: str, index: int) -> bool:
    """
    Запятая на позиции index - десятичный разделитель?

    Да, если вся обрезанная часть строки до нее состоит только из цифр, а
    обрезанная часть после начинается с цифры ("0,25 kg Pechuga", "10, 5 kg").
    "Tomate 2,5 kg" и "Tomate, 10 kg" - разделители полей.
    """
    before = line[:index].strip()
    after = line[index + 1:].strip()
    return _is_ascii_digits(before) and _is_ascii_digits(after[:1])


def _is_ascii_digits(text: str) -> bool:
    return bool(text) and all('0' <= ch <= '9' for ch in text)


class LineClassifier:
    """
    Элемент-функция: Определяет формат строки товара.

    ЦКП: LineFormat - какой экстрактор разбирает строку. Классификатор тотален:
    любая непустая строка получает ровно один формат.
    """

    def __init__(self, separators: str = FIELD_SEPARATORS):
        self.separators = separators

    def classify(self, line: str) -> LineFormat:
        text = line.strip() if line else ""
        if not text:
            raise EmptyLineError(line=line)

        # 1. Ведущая ";" - пустой REF в формате с разделителями
        if text.startswith(';'):
            return LineFormat.SEPARATED

        # 2. ";" или "|" никогда не бывают десятичным разделителем
        if ';' in text or '|' in text:
            return LineFormat.SEPARATED

        separator_count = sum(1 for ch in text if ch in self.separators)

        # 3. Две и больше запятых - минимум три поля
        if separator_count >= 2:
            return LineFormat.SEPARATED

        # 4. Одна запятая: десятичная ("2,5") или разделитель полей
        if separator_count == 1:
            index = text.index(',')
            if is_decimal_comma(text, index):
                logger.debug(f"[LineClassifier] Десятичная запятая: '{text}'")
                return LineFormat.NATURAL
            return LineFormat.SEPARATED

        return LineFormat.NATURAL
