"""
Pure string and number helpers shared by the CPF and CNPJ validators.

Three groups live here:
  - Formatting utilities: strip separators, filter characters, detect
    degenerate (all-same-character) tokens.
  - Value extraction: turn a cleaned token into per-position integers.
  - The check-digit engine: the single mod-11 primitive used for both
    check digits of both document types.

None of these functions raise for any ``str`` input. The value extractors
assume the caller already guarded the character set.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .constants import DIGIT_ZERO, MIN_REMAINDER_FOR_ZERO, MODULO_DIVISOR
from .models import ErrorKind, FormatOptions, Invalid, Valid

_DOCUMENT_FORMATTING = re.compile(r"[.\-/\s]")
_NON_DIGIT = re.compile(r"[^0-9]")
_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


# ─── Formatting Utilities ────────────────────────────────────────────


def strip_document_formatting(value: str) -> str:
    """Remove periods, hyphens, slashes and whitespace. Letters and digits stay."""
    return _DOCUMENT_FORMATTING.sub("", value)


def remove_non_digits(value: str) -> str:
    """Keep only ASCII decimal digits."""
    return _NON_DIGIT.sub("", value)


def remove_non_alphanumeric(value: str) -> str:
    """Keep only ASCII letters and digits. Case is left untouched."""
    return _NON_ALPHANUMERIC.sub("", value)


def are_all_chars_same(value: str) -> bool:
    """True for a non-empty token made of one repeated character.

    "11111111111" -> True, "5" -> True, "12" -> False, "" -> False.
    """
    if not value:
        return False
    return value.count(value[0]) == len(value)


# ─── Value Extraction ────────────────────────────────────────────────


def string_to_digit_array(value: str) -> tuple[int, ...]:
    """Map "00100" -> (0, 0, 1, 0, 0). Digits only."""
    return tuple(int(ch) for ch in value)


def char_to_base36_value(char: str) -> int:
    """Digit -> 0..9, letter (any case) -> 10..35."""
    return int(char, 36)


def string_to_base36_values(value: str) -> tuple[int, ...]:
    """Map an alphanumeric token to base-36 values: "1A" -> (1, 10)."""
    return tuple(char_to_base36_value(ch) for ch in value.upper())


# ─── Check-Digit Engine ──────────────────────────────────────────────


def calculate_check_digit(
    values: Sequence[int], multipliers: Sequence[int]
) -> int:
    """Compute one mod-11 verification digit.

    The weighted sum of ``values`` by ``multipliers`` is reduced modulo 11.
    A remainder below 2 yields 0; otherwise the digit is ``11 - remainder``.
    Both sequences must have the same length (not checked here). Empty
    sequences give 0.

    Example:
        >>> calculate_check_digit([1, 1, 1, 4, 4, 4, 7, 7, 7], range(10, 1, -1))
        3
    """
    total = sum(value * weight for value, weight in zip(values, multipliers))
    remainder = total % MODULO_DIVISOR

    if remainder < MIN_REMAINDER_FOR_ZERO:
        return DIGIT_ZERO
    return MODULO_DIVISOR - remainder


# ─── Result Helpers ──────────────────────────────────────────────────


def valid_result() -> Valid:
    return Valid()


def invalid_result(kind: ErrorKind, error: str) -> Invalid:
    return Invalid(kind=kind, error=error)


def should_validate_first(options: FormatOptions | None, validate: bool) -> bool:
    """True when a format/mask call asked for strict validation beforehand."""
    return validate or (options is not None and options.validate)
