"""
Tests for the pure helpers: formatting utilities, value extraction and the
mod-11 check-digit engine.

Run: pytest tests/ -v
"""

from __future__ import annotations

import pytest

from brdoc_validator.constants import (
    CNPJ_FIRST_MULTIPLIERS,
    CPF_FIRST_MULTIPLIERS,
    CPF_SECOND_MULTIPLIERS,
)
from brdoc_validator.models import ErrorKind, Invalid, Valid
from brdoc_validator.utils import (
    are_all_chars_same,
    calculate_check_digit,
    char_to_base36_value,
    invalid_result,
    remove_non_alphanumeric,
    remove_non_digits,
    string_to_base36_values,
    string_to_digit_array,
    strip_document_formatting,
    valid_result,
)


# ═══════════════════════════════════════════════════════════════════════
# CHECK-DIGIT ENGINE
# ═══════════════════════════════════════════════════════════════════════


class TestCalculateCheckDigit:
    def test_cpf_first_digit(self):
        assert calculate_check_digit([1, 1, 1, 4, 4, 4, 7, 7, 7], CPF_FIRST_MULTIPLIERS) == 3

    def test_cpf_second_digit(self):
        values = [1, 1, 1, 4, 4, 4, 7, 7, 7, 3]
        assert calculate_check_digit(values, CPF_SECOND_MULTIPLIERS) == 5

    def test_remainder_two_gives_nine(self):
        # Sum is 2 -> remainder 2 -> 11 - 2
        assert calculate_check_digit([0, 0, 0, 0, 0, 0, 0, 0, 1], CPF_FIRST_MULTIPLIERS) == 9

    @pytest.mark.parametrize(
        "values,multipliers",
        [
            ([0] * 9, CPF_FIRST_MULTIPLIERS),  # remainder 0
            ([1], [1]),  # remainder 1
            ([1], [12]),  # 12 % 11 == 1
        ],
        ids=["remainder_zero", "remainder_one", "remainder_one_wrapped"],
    )
    def test_remainder_below_two_gives_zero(self, values, multipliers):
        assert calculate_check_digit(values, multipliers) == 0

    def test_empty_sequences(self):
        assert calculate_check_digit([], []) == 0

    def test_base36_values(self):
        values = string_to_base36_values("1A23B45C678D")
        assert calculate_check_digit(values, CNPJ_FIRST_MULTIPLIERS) == 4

    def test_accepts_tuples_and_ranges(self):
        assert calculate_check_digit((1, 1, 1, 4, 4, 4, 7, 7, 7), range(10, 1, -1)) == 3


# ═══════════════════════════════════════════════════════════════════════
# VALUE EXTRACTION
# ═══════════════════════════════════════════════════════════════════════


class TestValueExtraction:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("12345", (1, 2, 3, 4, 5)),
            ("7", (7,)),
            ("00100", (0, 0, 1, 0, 0)),
            ("", ()),
        ],
    )
    def test_string_to_digit_array(self, token, expected):
        assert string_to_digit_array(token) == expected

    @pytest.mark.parametrize(
        "char,expected",
        [("0", 0), ("9", 9), ("A", 10), ("a", 10), ("Z", 35), ("z", 35)],
    )
    def test_char_to_base36_value(self, char, expected):
        assert char_to_base36_value(char) == expected

    def test_base36_values_are_case_insensitive(self):
        assert string_to_base36_values("1a23B") == (1, 10, 2, 3, 11)
        assert string_to_base36_values("1A23b") == string_to_base36_values("1a23B")

    def test_base36_matches_decimal_for_digits(self):
        assert string_to_base36_values("11222333000181") == string_to_digit_array(
            "11222333000181"
        )


# ═══════════════════════════════════════════════════════════════════════
# FORMATTING UTILITIES
# ═══════════════════════════════════════════════════════════════════════


class TestFormattingUtilities:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("123.456.789-01", "12345678901"),
            ("12.345.678/0001-90", "12345678000190"),
            ("1a. 2b\t-3/", "1a2b3"),
            ("a*b", "a*b"),  # only separators are removed
            ("", ""),
        ],
    )
    def test_strip_document_formatting(self, raw, expected):
        assert strip_document_formatting(raw) == expected

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("123.456.789-01", "12345678901"),
            ("12.345.678/0001-90", "12345678000190"),
            ("abc123def456", "123456"),
            ("abcdef", ""),
            ("12345678901", "12345678901"),
        ],
    )
    def test_remove_non_digits(self, raw, expected):
        assert remove_non_digits(raw) == expected

    def test_remove_non_digits_ignores_unicode_digits(self):
        # Arabic-Indic digits are not ASCII decimal digits
        assert remove_non_digits("١٢٣45") == "45"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("1a.23B-4/5 c", "1a23B45c"),
            ("!!!", ""),
            ("ÁB1", "B1"),
        ],
    )
    def test_remove_non_alphanumeric_keeps_case(self, raw, expected):
        assert remove_non_alphanumeric(raw) == expected

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("11111111111", True),
            ("12345678901", False),
            ("5", True),
            ("12", False),
            ("AAAA", True),
            ("", False),
        ],
    )
    def test_are_all_chars_same(self, token, expected):
        assert are_all_chars_same(token) is expected


# ═══════════════════════════════════════════════════════════════════════
# RESULT HELPERS
# ═══════════════════════════════════════════════════════════════════════


class TestResultHelpers:
    def test_valid_result(self):
        result = valid_result()
        assert isinstance(result, Valid)
        assert result.is_valid is True
        assert result.error is None
        assert bool(result) is True

    def test_invalid_result(self):
        result = invalid_result(ErrorKind.EMPTY_INPUT, "Input cannot be empty")
        assert isinstance(result, Invalid)
        assert result.is_valid is False
        assert result.kind == ErrorKind.EMPTY_INPUT
        assert result.error == "Input cannot be empty"
        assert bool(result) is False
