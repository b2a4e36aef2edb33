"""
Фабрика для создания компонентов домена Parsing.

Предоставляет удобные методы для создания и конфигурации
всех компонентов разбора строк товаров через единый интерфейс.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from config.settings import DEFAULT_LOCALE
from ..domain.interfaces import IItemBatchParser, IItemLineParser, IUnitNormalizer
from ..extraction.decimal_parser import DecimalParser
from ..extraction.line_classifier import LineClassifier
from ..extraction.ref_detector import TrailingReasonSplitter
from ..extraction.unit_normalizer import UnitNormalizer
from ..grammars.natural import build_natural_grammars
from ..grammars.separated import SeparatedGrammar
from ..locales.config_loader import ConfigLoader
from ..locales.locale_config import LocaleConfig
from .batch_parser import ItemBatchParser
from .item_line_parser import ItemLineParser


class ParsingComponentFactory:
    """
    Фабрика для создания компонентов домена Parsing.

    Собирает классификатор, грамматики и нормализаторы для одной локали.
    """

    @staticmethod
    def load_locale(locale_code: str = DEFAULT_LOCALE, config_dir: Optional[Path] = None) -> LocaleConfig:
        """
        Загружает конфигурацию локали.

        Returns:
            LocaleConfig из locales/<code>/parsing.yaml
        """
        logger.debug(f"[Parsing] Загрузка локали {locale_code}")
        return ConfigLoader(config_dir).load(locale_code)

    @staticmethod
    def create_unit_normalizer(locale_config: Optional[LocaleConfig] = None) -> IUnitNormalizer:
        """
        Создает нормализатор единиц.

        Returns:
            Нормализатор, реализующий интерфейс IUnitNormalizer
        """
        return UnitNormalizer(locale_config)

    @staticmethod
    def create_item_line_parser(
        locale_code: str = DEFAULT_LOCALE,
        config_dir: Optional[Path] = None,
    ) -> IItemLineParser:
        """
        Создает парсер строки товара.

        Args:
            locale_code: Код локали (словарь единиц и служебных слов)
            config_dir: Директория с локалями (по умолчанию LOCALES_DIR)

        Returns:
            Парсер, реализующий интерфейс IItemLineParser
        """
        logger.debug("[Parsing] Создание парсера строк товаров")
        locale_config = ParsingComponentFactory.load_locale(locale_code, config_dir)

        unit_normalizer = ParsingComponentFactory.create_unit_normalizer(locale_config)
        reason_splitter = TrailingReasonSplitter(connectors=tuple(locale_config.product_connectors))

        return ItemLineParser(
            classifier=LineClassifier(),
            separated_grammar=SeparatedGrammar(unit_normalizer),
            natural_grammars=build_natural_grammars(unit_normalizer.unit_words, reason_splitter),
            decimal_parser=DecimalParser(),
            unit_normalizer=unit_normalizer,
        )

    @staticmethod
    def create_batch_parser(
        line_parser: Optional[IItemLineParser] = None,
        allow_reason_directive: bool = False,
        max_decimal_places: Optional[int] = None,
    ) -> IItemBatchParser:
        """
        Создает парсер многострочного сообщения.

        Args:
            line_parser: Парсер строки (по умолчанию для DEFAULT_LOCALE)
            allow_reason_directive: Разрешить строку "motivo:" (списание)
            max_decimal_places: Ограничение точности количества

        Returns:
            Парсер, реализующий интерфейс IItemBatchParser
        """
        logger.debug("[Parsing] Создание парсера партии")
        return ItemBatchParser(
            line_parser=line_parser or ParsingComponentFactory.create_item_line_parser(),
            allow_reason_directive=allow_reason_directive,
            max_decimal_places=max_decimal_places,
        )
