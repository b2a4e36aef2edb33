"""
Config Loader для конфигураций локалей парсинга.

ЦКП: Загрузка LocaleConfig для локали из YAML с кешированием.
"""

import yaml
from pathlib import Path
from typing import ClassVar, Dict, Optional

from loguru import logger
from pydantic import ValidationError

from config.settings import DEFAULT_LOCALE, LOCALES_DIR
from ..domain.exceptions import ParsingConfigurationError
from .locale_config import LocaleConfig


class ConfigLoader:
    """
    Загрузчик конфигураций локалей.

    Файлы лежат в <config_dir>/<locale_code>/parsing.yaml.
    """

    _cache: ClassVar[Dict[str, LocaleConfig]] = {}

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else LOCALES_DIR

    def load(self, locale_code: str = DEFAULT_LOCALE) -> LocaleConfig:
        """
        Загружает конфигурацию локали.

        Raises:
            ParsingConfigurationError: файл не найден или не прошел валидацию
        """
        config_file = self.config_dir / locale_code / "parsing.yaml"
        cache_key = str(config_file)
        if cache_key in self._cache:
            return self._cache[cache_key]

        if not config_file.exists():
            raise ParsingConfigurationError(
                f"[ConfigLoader] Конфиг для {locale_code} не найден: {config_file}",
                component="ConfigLoader",
            )

        with open(config_file, 'r', encoding='utf-8') as f:
            try:
                config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ParsingConfigurationError(
                    f"[ConfigLoader] Некорректный YAML: {config_file}",
                    component="ConfigLoader",
                    original_error=e,
                ) from e

        config_data.setdefault("locale_code", locale_code)
        try:
            locale_config = LocaleConfig(**config_data)
        except ValidationError as e:
            raise ParsingConfigurationError(
                f"[ConfigLoader] Ошибка валидации {config_file}",
                component="ConfigLoader",
                original_error=e,
            ) from e

        self._cache[cache_key] = locale_config
        logger.debug(
            f"[ConfigLoader] Загружен LocaleConfig для {locale_code}: "
            f"{sum(len(words) for words in locale_config.units.values())} слов единиц, "
            f"{len(locale_config.product_connectors)} служебных слов"
        )
        return locale_config

    @classmethod
    def clear_cache(cls):
        cls._cache.clear()
