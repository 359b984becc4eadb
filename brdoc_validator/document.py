"""
Shared validation state machine for CPF and CNPJ.

Flow (entered fresh on every call, no state kept between calls):

  RAW ──type──▶ STRING ──non-empty──▶ TRIMMED ──clean──▶ CLEANED
      ──characters──▶ CHAR_OK ──length──▶ LENGTH_OK
      ──structure + pattern──▶ STRUCT_OK
                                   │
                 weak_validate ◀───┴───▶ validate
                 (VALID)                 (check digits → VALID / INVALID)

Any guard failure is terminal and carries that guard's error. Subclasses
only declare their tables and how to clean, read and lay out a token.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Set
from typing import ClassVar, Optional

from .guards import (
    chain_guards,
    guard_is_string,
    guard_length,
    guard_not_empty,
    guard_pattern,
    guard_structure,
    guard_valid_characters,
)
from .models import DocumentType, ErrorKind, GuardResult, ValidationResult
from .utils import calculate_check_digit, invalid_result, valid_result


class DocumentValidator(ABC):
    """Base validator. Instances are stateless and safe to share."""

    document_type: ClassVar[DocumentType]
    length: ClassVar[int]
    first_digit_position: ClassVar[int]
    second_digit_position: ClassVar[int]
    first_multipliers: ClassVar[tuple[int, ...]]
    second_multipliers: ClassVar[tuple[int, ...]]
    allowed_chars: ClassVar[re.Pattern[str]]
    structure_pattern: ClassVar[re.Pattern[str]]
    invalid_patterns: ClassVar[Set[str]]
    length_error: ClassVar[str]
    pattern_error: ClassVar[str]
    digits_error: ClassVar[str]

    # ─── Type-specific hooks ────────────────────────────────────────

    @abstractmethod
    def _clean_token(self, value: str) -> str:
        """Strip formatting and filter characters of a string."""

    @abstractmethod
    def _to_values(self, token: str) -> tuple[int, ...]:
        """Per-position numeric values of a structurally valid token."""

    @abstractmethod
    def _layout(self, token: str) -> str:
        """Insert separators into a token of the expected length."""

    # ─── Public API ─────────────────────────────────────────────────

    def validate(self, value: object) -> ValidationResult:
        """Strict validation: structure, degenerate patterns and check digits."""
        guard = self._run_guards(value)
        if not guard.is_valid:
            return invalid_result(guard.kind, guard.error)
        return self._validate_check_digits(guard.cleaned)

    def weak_validate(self, value: object) -> ValidationResult:
        """Structural validation only. Any check-digit values are accepted."""
        guard = self._run_guards(value)
        if not guard.is_valid:
            return invalid_result(guard.kind, guard.error)
        return valid_result()

    def clean(self, value: object) -> str:
        """Type-specific cleaning. Never fails; non-strings clean to ""."""
        if not isinstance(value, str):
            return ""
        return self._clean_token(value)

    def format(self, value: object) -> Optional[str]:
        """Formatted token, or None when the cleaned length is wrong."""
        token = self.clean(value)
        if len(token) != self.length:
            return None
        return self._layout(token)

    # ─── Guard pipeline ─────────────────────────────────────────────

    def _run_guards(self, value: object) -> GuardResult:
        base = self._check_input(value)
        if not base.is_valid:
            return base
        return self._check_structure(self.clean(base.cleaned))

    def _check_input(self, value: object) -> GuardResult:
        string_guard = guard_is_string(value)
        if not string_guard.is_valid:
            return string_guard
        return chain_guards(string_guard, guard_not_empty(string_guard.cleaned))

    def _check_structure(self, cleaned: str) -> GuardResult:
        char_guard = guard_valid_characters(cleaned, self.allowed_chars)
        if not char_guard.is_valid:
            return char_guard

        token = char_guard.cleaned
        return chain_guards(
            char_guard,
            guard_length(token, self.length, self.length_error),
            guard_structure(token, self.structure_pattern),
            guard_pattern(token, self.invalid_patterns, self.pattern_error),
        )

    # ─── Check digits ───────────────────────────────────────────────

    def _validate_check_digits(self, token: str) -> ValidationResult:
        """Recompute both mod-11 digits and compare with the provided ones.

        The second digit is computed over the base positions PLUS the
        computed (not the provided) first digit.
        """
        base = self._to_values(token)[: self.first_digit_position]
        first_provided = int(token[self.first_digit_position])
        second_provided = int(token[self.second_digit_position])

        first_digit = calculate_check_digit(base, self.first_multipliers)
        if first_digit != first_provided:
            return invalid_result(ErrorKind.INVALID_CHECK_DIGITS, self.digits_error)

        second_digit = calculate_check_digit(
            (*base, first_digit), self.second_multipliers
        )
        if second_digit != second_provided:
            return invalid_result(ErrorKind.INVALID_CHECK_DIGITS, self.digits_error)

        return valid_result()
