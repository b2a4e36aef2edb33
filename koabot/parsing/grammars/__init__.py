"""
Грамматики строк товаров.

Каждая грамматика реализует ILineGrammar.try_match и независимо тестируется.
"""

from .separated import SeparatedGrammar
from .natural import ProductFirstGrammar, QuantityFirstGrammar, build_natural_grammars

__all__ = [
    "SeparatedGrammar",
    "ProductFirstGrammar",
    "QuantityFirstGrammar",
    "build_natural_grammars",
]
