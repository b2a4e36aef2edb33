"""
DTO для конфигурации локали парсинга.

Содержит словари, специфичные для языка:
- Синонимы единиц измерения (kilo, litros, unidades...)
- Служебные слова внутри названий товаров (de, con...)

Использует Pydantic для валидации структуры конфигурации.
"""

from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from contracts.item_line_dto import Unit


class LocaleConfig(BaseModel):
    """
    Конфигурация локали парсинга строк товаров.

    Загружается из YAML файла (locales/<code>/parsing.yaml).
    """
    locale_code: str = Field(..., description='Код локали (es_ES)')
    units: Dict[Unit, List[str]] = Field(..., description='Каноническая единица -> принимаемые слова')
    product_connectors: List[str] = Field(
        default_factory=list,
        description='Служебные слова, после которых последнее слово остается частью названия'
    )

    @field_validator('locale_code')
    @classmethod
    def validate_code(cls, v):
        """Валидация формата кода локали (xx_XX)."""
        parts = v.split('_')
        if len(parts) != 2 or len(parts[0]) != 2 or len(parts[1]) != 2:
            raise ValueError(f'Код локали должен быть в формате "xx_XX" (например, es_ES), получено: {v}')
        return v

    @field_validator('units')
    @classmethod
    def validate_units(cls, v):
        missing = [unit.value for unit in Unit if unit not in v]
        if missing:
            raise ValueError(f'Не заданы синонимы для единиц: {missing}')

        seen: Dict[str, Unit] = {}
        normalized: Dict[Unit, List[str]] = {}
        for unit, words in v.items():
            clean = []
            for word in words:
                word = str(word).strip().lower()
                if not word:
                    continue
                if word in seen and seen[word] != unit:
                    raise ValueError(f'Слово "{word}" указано для двух единиц: {seen[word].value}, {unit.value}')
                seen[word] = unit
                clean.append(word)
            if not clean:
                raise ValueError(f'Пустой список синонимов для единицы {unit.value}')
            normalized[unit] = clean
        return normalized

    @field_validator('product_connectors')
    @classmethod
    def validate_connectors(cls, v):
        return [w.strip().lower() for w in v if w.strip()]
