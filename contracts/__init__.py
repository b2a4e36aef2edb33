"""
Контракты DTO проекта Koabot.

Все контракты используют Pydantic v2 для валидации.

Контракты:
- Parsing -> Conversation: ParsedItemLine, ItemBatch (item_line_dto.py)
"""

from .item_line_dto import ItemBatch, ParsedItemLine, Unit

__all__ = [
    "Unit",
    "ParsedItemLine",
    "ItemBatch",
]
