"""
Локали парсинга: словари единиц и служебных слов.
"""

from .locale_config import LocaleConfig
from .config_loader import ConfigLoader

__all__ = ["LocaleConfig", "ConfigLoader"]
