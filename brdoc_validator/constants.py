"""
Fixed tables for CPF and CNPJ validation.

Everything here is read-only for the lifetime of the process: lengths,
check-digit positions, multiplier tables, the degenerate-pattern sets and
the compiled character patterns.
"""

from __future__ import annotations

import re

# ─── CPF ─────────────────────────────────────────────────────────────

CPF_LENGTH = 11
CPF_FORMATTED_LENGTH = 14
CPF_FIRST_DIGIT_POSITION = 9
CPF_SECOND_DIGIT_POSITION = 10

CPF_FIRST_MULTIPLIERS: tuple[int, ...] = (10, 9, 8, 7, 6, 5, 4, 3, 2)
CPF_SECOND_MULTIPLIERS: tuple[int, ...] = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)

CPF_ALLOWED_CHARS_PATTERN = re.compile(r"[0-9]+")
CPF_STRUCTURE_PATTERN = re.compile(r"[0-9]{11}")

# ─── CNPJ ────────────────────────────────────────────────────────────

CNPJ_LENGTH = 14
CNPJ_FORMATTED_LENGTH = 18
CNPJ_FIRST_DIGIT_POSITION = 12
CNPJ_SECOND_DIGIT_POSITION = 13

CNPJ_FIRST_MULTIPLIERS: tuple[int, ...] = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_SECOND_MULTIPLIERS: tuple[int, ...] = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

# Letters are accepted in the 12-character base; check digits stay numeric.
CNPJ_ALLOWED_CHARS_PATTERN = re.compile(r"[A-Za-z0-9]+")
CNPJ_STRUCTURE_PATTERN = re.compile(r"[A-Z0-9]{12}[0-9]{2}")

# ─── Shared ──────────────────────────────────────────────────────────

MODULO_DIVISOR = 11
MIN_REMAINDER_FOR_ZERO = 2
DIGIT_ZERO = 0

DIGITS_ONLY_PATTERN = re.compile(r"[0-9]+")

MASK_LITERAL = "***"

# ─── Degenerate Patterns ─────────────────────────────────────────────
# Well-formed but rejected: every character is the same digit.

INVALID_CPF_PATTERNS: frozenset[str] = frozenset(d * CPF_LENGTH for d in "0123456789")

INVALID_CNPJ_PATTERNS: frozenset[str] = frozenset(d * CNPJ_LENGTH for d in "0123456789")

# ─── Messages ────────────────────────────────────────────────────────

ERROR_MESSAGES: dict[str, str] = {
    "INVALID_TYPE": "Input must be a string",
    "EMPTY_INPUT": "Input cannot be empty",
    "INVALID_CPF_LENGTH": "CPF must have exactly 11 digits",
    "INVALID_CNPJ_LENGTH": "CNPJ must have exactly 14 digits",
    "INVALID_CPF_PATTERN": "CPF contains invalid pattern",
    "INVALID_CNPJ_PATTERN": "CNPJ contains invalid pattern",
    "INVALID_CPF_DIGITS": "CPF verification digits are invalid",
    "INVALID_CNPJ_DIGITS": "CNPJ verification digits are invalid",
    "INVALID_CHARACTERS": "Input contains invalid characters",
}

UNDETECTED_TYPE_MESSAGE = "Input must have 11 (CPF) or 14 (CNPJ) characters"
