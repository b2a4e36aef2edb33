"""
Unit-тесты для эвристик REF-кода и причины в конце строки.

Обе эвристики приблизительные, тесты фиксируют и известные ложные срабатывания.
"""

import pytest

from koabot.parsing.extraction.ref_detector import (
    TrailingReasonSplitter,
    looks_like_ref_code,
    looks_like_trailing_reason,
    split_ref,
)


class TestSplitRef:

    @pytest.mark.parametrize("text, ref, rest", [
        ("PAN010 Pan burger", "PAN010", "Pan burger"),
        ("ABC123 Tomate", "ABC123", "Tomate"),
        ("12 Tomates", "12", "Tomates"),
        ("ABC Tomate", "ABC", "Tomate"),
    ])
    def test_code_is_stripped(self, text, ref, rest):
        assert split_ref(text) == (ref, rest)

    @pytest.mark.parametrize("text", [
        "Pechuga de pollo",
        "Pan burger",
        "TOMATES frescos",  # 7 букв без цифр - слово, не код
        "ABC123",           # нет текста после кода
        "abc123 Tomate",    # нижний регистр
        "A Tomate",         # короче двух символов
        "ABCDEFGHIJ1 Tomate",  # длиннее десяти символов
    ])
    def test_no_code(self, text):
        assert split_ref(text) == ("UNKNOWN", text)

    def test_known_false_positive_short_uppercase_product(self):
        # Короткое название заглавными считается кодом - поведение сохранено
        assert split_ref("AOVE Virgen extra") == ("AOVE", "Virgen extra")

    def test_looks_like_ref_code(self):
        assert looks_like_ref_code("PAN010")
        assert looks_like_ref_code("ABCDEF")
        assert looks_like_ref_code("ABCDEFG1")
        assert not looks_like_ref_code("ABCDEFG")


class TestTrailingReason:

    @pytest.fixture
    def splitter(self):
        return TrailingReasonSplitter(connectors=("de", "con"))

    def test_short_lowercase_word_is_reason(self, splitter):
        assert splitter.split("Pan burger quemado") == ("Pan burger", "quemado")

    def test_word_after_connector_stays_in_product(self, splitter):
        assert splitter.split("Pechuga de pollo") == ("Pechuga de pollo", None)

    def test_single_word_is_product(self, splitter):
        assert splitter.split("tomate") == ("tomate", None)

    def test_long_word_is_product(self, splitter):
        assert splitter.split("Pan caducados") == ("Pan caducados", None)
        assert splitter.split("Pan estropeado") == ("Pan estropeado", None)

    def test_capitalized_word_is_product(self, splitter):
        assert splitter.split("Pan Burger") == ("Pan Burger", None)

    def test_word_starting_with_digit_is_product(self, splitter):
        assert splitter.split("Pan 2x") == ("Pan 2x", None)

    def test_known_false_positive_lowercase_product_word(self, splitter):
        # "cherry" - часть названия, но выглядит как причина
        assert splitter.split("Tomate cherry") == ("Tomate", "cherry")

    def test_predicate_without_connectors(self):
        assert looks_like_trailing_reason("pollo", "de")
        assert not looks_like_trailing_reason("pollo", "de", connectors=["de"])
        assert not looks_like_trailing_reason("")
