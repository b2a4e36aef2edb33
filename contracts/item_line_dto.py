"""
DTO контракт: Parsing -> Conversation (бот).

Результат разбора одной строки товара и партии строк.
Передается в слой диалога, который копит список и отправляет его в хранилище.
"""

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.settings import UNKNOWN_REF


class Unit(str, Enum):
    """Закрытый набор единиц измерения."""

    UD = "ud"
    KG = "kg"
    L = "L"


class ParsedItemLine(BaseModel):
    """
    Товарная строка после разбора: REF, название, количество, единица, причина.
    """

    ref: str = Field(UNKNOWN_REF, description='Код товара или "UNKNOWN"')
    product: str = Field(..., description="Название товара")
    quantity: float = Field(..., description="Количество (любое конечное число)")
    unit: Unit = Field(..., description="Единица измерения: ud, kg, L")
    reason: Optional[str] = Field(None, description="Причина (списание), если указана")

    model_config = ConfigDict(frozen=True)

    @field_validator("ref")
    @classmethod
    def validate_ref(cls, v: str) -> str:
        v = v.strip()
        return v or UNKNOWN_REF

    @field_validator("product")
    @classmethod
    def validate_product(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("product must not be empty")
        return v

    @field_validator("quantity")
    @classmethod
    def validate_quantity(cls, v: float) -> float:
        # Ноль и отрицательные значения допустимы, диапазон проверяет вызывающий код
        if not math.isfinite(v):
            raise ValueError("quantity must be a finite number")
        return v

    @field_validator("reason")
    @classmethod
    def validate_reason(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None

    def to_summary_line(self) -> str:
        """Строка для сводки подтверждения: "REF - продукт (10 kg)"."""
        quantity = int(self.quantity) if self.quantity.is_integer() else self.quantity
        return f"{self.ref} - {self.product} ({quantity} {self.unit.value})"


class ItemBatch(BaseModel):
    """
    Партия товаров из многострочного сообщения.
    """

    items: list[ParsedItemLine] = Field(default_factory=list, description="Товары в порядке ввода")
    reason: Optional[str] = Field(None, description='Причина для всей партии (строка "motivo:")')

    model_config = ConfigDict(frozen=True)
