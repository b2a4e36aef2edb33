"""
Unit-тесты для грамматик свободного формата.

ЦКП: Каждая грамматика отдельно + порядок списка (строгие раньше диагностических).
"""

import pytest

from koabot.parsing.domain.interfaces import LineFields
from koabot.parsing.extraction.ref_detector import TrailingReasonSplitter
from koabot.parsing.extraction.unit_normalizer import UnitNormalizer
from koabot.parsing.grammars.natural import (
    ProductFirstGrammar,
    QuantityFirstGrammar,
    build_natural_grammars,
    unit_alternation,
)


@pytest.fixture
def unit_words():
    return UnitNormalizer().unit_words


@pytest.fixture
def splitter():
    return TrailingReasonSplitter(connectors=("de", "del", "con"))


class TestProductFirst:

    @pytest.fixture
    def grammar(self, unit_words):
        return ProductFirstGrammar(unit_words)

    def test_match(self, grammar):
        assert grammar.try_match("Pechuga de pollo 0.25 kg") == LineFields(
            ref="UNKNOWN", product="Pechuga de pollo", quantity="0.25", unit="kg", plain_quantity=True
        )

    def test_ref_and_reason(self, grammar):
        assert grammar.try_match("PAN010 Pan burger 12 ud quemado y roto") == LineFields(
            ref="PAN010", product="Pan burger", quantity="12", unit="ud", reason="quemado y roto",
            plain_quantity=True,
        )

    def test_unit_must_be_a_whole_word(self, grammar):
        assert grammar.try_match("Tomate 10 lechugas") is None

    def test_requires_product(self, grammar):
        assert grammar.try_match("10 kg") is None

    def test_quantity_first_line_does_not_match(self, grammar):
        assert grammar.try_match("0,25 kg Pechuga de pollo") is None


class TestQuantityFirst:

    @pytest.fixture
    def grammar(self, unit_words, splitter):
        return QuantityFirstGrammar(unit_words, splitter)

    def test_match(self, grammar):
        assert grammar.try_match("0,25 kg Pechuga de pollo") == LineFields(
            ref="UNKNOWN", product="Pechuga de pollo", quantity="0,25", unit="kg", plain_quantity=True
        )

    def test_reason_from_last_word(self, grammar):
        assert grammar.try_match("12 ud Pan burger quemado") == LineFields(
            ref="UNKNOWN", product="Pan burger", quantity="12", unit="ud", reason="quemado",
            plain_quantity=True,
        )

    def test_ref_after_unit(self, grammar):
        fields = grammar.try_match("12 ud PAN010 Pan Burger")
        assert fields.ref == "PAN010"
        assert fields.product == "Pan Burger"

    def test_missing_rest_gives_empty_product(self, grammar):
        assert grammar.try_match("10 kg") == LineFields(
            ref="UNKNOWN", product="", quantity="10", unit="kg", plain_quantity=True
        )

    def test_rest_required_variant(self, unit_words, splitter):
        grammar = QuantityFirstGrammar(unit_words, splitter, rest_required=True)
        assert grammar.try_match("10 kg") is None


class TestGrammarOrder:

    @pytest.fixture
    def grammars(self, unit_words, splitter):
        return build_natural_grammars(unit_words, splitter)

    def first_match(self, grammars, line):
        for grammar in grammars:
            fields = grammar.try_match(line)
            if fields is not None:
                return grammar.name, fields
        return None, None

    def test_product_first_before_quantity_first(self, grammars):
        name, _ = self.first_match(grammars, "Tomate 10 kg")
        assert name == "product_first"

    def test_quantity_first(self, grammars):
        name, _ = self.first_match(grammars, "10 kg Tomate")
        assert name == "quantity_first"

    def test_bad_quantity_diagnostic(self, grammars):
        name, fields = self.first_match(grammars, "Tomate abc kg")
        assert name == "product_first_any_quantity"
        assert fields.quantity == "abc"
        assert fields.plain_quantity

    def test_signed_quantity_reaches_diagnostic(self, grammars):
        name, fields = self.first_match(grammars, "Tomate -5 kg")
        assert name == "product_first_any_quantity"
        assert fields.quantity == "-5"
        assert fields.plain_quantity

    def test_bad_unit_diagnostic(self, grammars):
        name, fields = self.first_match(grammars, "Tomate 10 invalid")
        assert name == "product_first_any_unit"
        assert fields.unit == "invalid"

    def test_bad_unit_quantity_first_diagnostic(self, grammars):
        name, fields = self.first_match(grammars, "10 cajas Tomate")
        assert name == "quantity_first_any_unit"
        assert fields.unit == "cajas"

    @pytest.mark.parametrize("line", ["invalid format", "Tomate", "10", "Tomate abc"])
    def test_no_grammar_matches(self, grammars, line):
        assert self.first_match(grammars, line) == (None, None)


def test_unit_alternation_escapes_words():
    assert unit_alternation(["kg", "l."]) == r"(?:kg|l\.)"
