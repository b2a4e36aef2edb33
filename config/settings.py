"""
Настройки проекта Koabot (парсинг строк товаров).

Все значения - константы модуля, импортируются там, где нужны.
"""

from pathlib import Path

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE_DIR = PROJECT_ROOT / "koabot"
LOCALES_DIR = PACKAGE_DIR / "parsing" / "locales"

# =============================================================================
# НАСТРОЙКИ ЛОКАЛИ
# =============================================================================
# Единственная поддерживаемая локаль (испанские единицы и десятичная запятая)
DEFAULT_LOCALE = "es_ES"

# =============================================================================
# НАСТРОЙКИ ПАРСИНГА
# =============================================================================
# Значение REF, если код товара не указан (колонка в хранилище всегда заполнена)
UNKNOWN_REF = "UNKNOWN"

# Символы-разделители полей
FIELD_SEPARATORS = ";|,"

# Минимум полей в формате с разделителями: продукт + количество + единица
MIN_SEPARATED_FIELDS = 3

# Эвристика REF-кода: длина токена и порог "короткого" кода без цифр
REF_CODE_MIN_LENGTH = 2
REF_CODE_MAX_LENGTH = 10
REF_CODE_SHORT_LENGTH = 6

# Эвристика причины в конце строки (формат "количество единица продукт")
TRAILING_REASON_MAX_LENGTH = 8

# =============================================================================
# НАСТРОЙКИ ПАКЕТНОГО РАЗБОРА
# =============================================================================
# Строка-директива с причиной для всей партии (списание)
REASON_DIRECTIVE = "motivo:"

# Ограничение точности количества на стороне API (списание)
QUANTITY_MAX_DECIMAL_PLACES = 3


# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config():
    """Проверяет корректность конфигурации."""
    errors = []

    locale_file = LOCALES_DIR / DEFAULT_LOCALE / "parsing.yaml"
    if not locale_file.exists():
        errors.append(f"Файл локали не найден: {locale_file}")

    if REF_CODE_MIN_LENGTH > REF_CODE_SHORT_LENGTH or REF_CODE_SHORT_LENGTH > REF_CODE_MAX_LENGTH:
        errors.append(
            "Длины REF-кода должны удовлетворять "
            "REF_CODE_MIN_LENGTH <= REF_CODE_SHORT_LENGTH <= REF_CODE_MAX_LENGTH"
        )

    if errors:
        raise ValueError("\n".join(errors))

    return True
