"""
Интерфейсы (абстрактные классы) для домена Parsing.

Домен Parsing отвечает за:
1. Определение формата строки (разделители / свободный текст)
2. Извлечение полей по грамматикам
3. Нормализацию количества и единиц
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from contracts.item_line_dto import ItemBatch, ParsedItemLine, Unit


@dataclass(frozen=True)
class LineFields:
    """
    Сырые поля строки, найденные грамматикой (до нормализации).

    ref уже разрешен (код или "UNKNOWN"), остальные поля - исходные токены.
    plain_quantity: количество должно быть записано только цифрами с одним
    разделителем (свободный формат), знак и экспонента недопустимы.
    """
    ref: str
    product: str
    quantity: str
    unit: str
    reason: Optional[str] = None
    plain_quantity: bool = False


class IUnitNormalizer(ABC):
    """Интерфейс нормализатора единиц измерения."""

    @abstractmethod
    def normalize(self, raw: str) -> Optional[Unit]:
        """
        Приводит слово единицы к каноническому коду.

        Args:
            raw: Токен из строки ("kilos", "Lt", "ud")

        Returns:
            Unit или None, если слово неизвестно
        """
        pass

    @property
    @abstractmethod
    def unit_words(self) -> List[str]:
        """Все принимаемые слова единиц (для построения грамматик)."""
        pass


class ILineGrammar(ABC):
    """Интерфейс грамматики строки товара."""

    name: str = "grammar"

    @abstractmethod
    def try_match(self, line: str) -> Optional[LineFields]:
        """
        Пытается разобрать строку.

        Args:
            line: Обрезанная непустая строка

        Returns:
            LineFields или None, если строка не в этом формате
        """
        pass


class IItemLineParser(ABC):
    """Интерфейс парсера одной строки товара."""

    @abstractmethod
    def parse(self, line: str) -> ParsedItemLine:
        """
        Разбирает строку в ParsedItemLine.

        Raises:
            ItemLineError: строку не удалось разобрать
        """
        pass


class IItemBatchParser(ABC):
    """Интерфейс парсера многострочного сообщения."""

    @abstractmethod
    def parse(self, text: str) -> ItemBatch:
        """
        Разбирает все непустые строки сообщения.

        Raises:
            ItemBatchError: первая строка с ошибкой
            EmptyBatchError: нет ни одной строки товара
        """
        pass
