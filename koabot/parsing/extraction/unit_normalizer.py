from typing import Dict, List, Optional, TYPE_CHECKING

from loguru import logger

from contracts.item_line_dto import Unit
from ..domain.interfaces import IUnitNormalizer

if TYPE_CHECKING:
    from ..locales.locale_config import LocaleConfig


DEFAULT_UNIT_SYNONYMS: Dict[Unit, List[str]] = {
    Unit.UD: ["ud", "unidad", "unidades"],
    Unit.KG: ["kg", "kilo", "kilos"],
    Unit.L: ["l", "lt", "litro", "litros"],
}


class UnitNormalizer(IUnitNormalizer):
    """
    Элемент-функция: Приводит слово единицы к каноническому коду (ud, kg, L).

    Поддерживает LocaleConfig для словаря синонимов.
    """

    def __init__(self, locale_config: Optional['LocaleConfig'] = None):
        """
        Args:
            locale_config: Конфигурация локали (опционально)
        """
        self.locale_config = locale_config

        if locale_config and locale_config.units:
            synonyms = locale_config.units
            logger.debug(f"[UnitNormalizer] Используем синонимы единиц из {locale_config.locale_code}")
        elif locale_config:
            synonyms = DEFAULT_UNIT_SYNONYMS
            logger.warning(
                f"[UnitNormalizer] В {locale_config.locale_code} нет единиц, используем fallback синонимы"
            )
        else:
            synonyms = DEFAULT_UNIT_SYNONYMS
            logger.debug("[UnitNormalizer] Используем fallback синонимы единиц")

        self._lookup: Dict[str, Unit] = {}
        for unit, words in synonyms.items():
            for word in words:
                self._lookup[word.strip().lower()] = unit

    def normalize(self, raw: str) -> Optional[Unit]:
        """
        ЦКП: Unit или None.
        """
        if raw is None:
            return None
        return self._lookup.get(raw.strip().lower())

    @property
    def unit_words(self) -> List[str]:
        # Длинные слова первыми, чтобы "litros" не обрезался до "l"
        return sorted(self._lookup, key=len, reverse=True)


_default_normalizer = UnitNormalizer()


def normalize_unit(raw: str) -> Optional[Unit]:
    return _default_normalizer.normalize(raw)
