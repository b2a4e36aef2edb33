"""
Extraction модуль: атомарные элементы разбора строки товара.

Экспортирует классификатор формата, нормализаторы и эвристики для использования в грамматиках.
"""

from .decimal_parser import (
    DecimalParser,
    PLAIN_NUMBER_PATTERN,
    parse_decimal,
    decimal_places,
    has_max_decimal_places,
)
from .unit_normalizer import UnitNormalizer, normalize_unit, DEFAULT_UNIT_SYNONYMS
from .line_classifier import LineClassifier, LineFormat, is_decimal_comma
from .ref_detector import split_ref, looks_like_ref_code, looks_like_trailing_reason, TrailingReasonSplitter

__all__ = [
    "DecimalParser",
    "PLAIN_NUMBER_PATTERN",
    "parse_decimal",
    "decimal_places",
    "has_max_decimal_places",
    "UnitNormalizer",
    "normalize_unit",
    "DEFAULT_UNIT_SYNONYMS",
    "LineClassifier",
    "LineFormat",
    "is_decimal_comma",
    "split_ref",
    "looks_like_ref_code",
    "looks_like_trailing_reason",
    "TrailingReasonSplitter",
]
