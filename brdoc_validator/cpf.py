"""
CPF (Cadastro de Pessoas Físicas) — the 11-digit individual identifier.

Layout: ``DDD.DDD.DDD-DD``. Positions 9 and 10 are mod-11 check digits
weighted 10..2 and 11..2 respectively.
"""

from __future__ import annotations

from typing import Optional

from .constants import (
    CPF_ALLOWED_CHARS_PATTERN,
    CPF_FIRST_DIGIT_POSITION,
    CPF_FIRST_MULTIPLIERS,
    CPF_LENGTH,
    CPF_SECOND_DIGIT_POSITION,
    CPF_SECOND_MULTIPLIERS,
    CPF_STRUCTURE_PATTERN,
    ERROR_MESSAGES,
    INVALID_CPF_PATTERNS,
    MASK_LITERAL,
)
from .document import DocumentValidator
from .models import DocumentType, FormatOptions, ValidationResult
from .utils import (
    remove_non_digits,
    should_validate_first,
    string_to_digit_array,
    strip_document_formatting,
)


class CPFValidator(DocumentValidator):
    """Validate, clean, format and mask CPF numbers.

    Usage:
        validator = CPFValidator()
        validator.validate("111.444.777-35").is_valid   # True
        validator.mask("11144477735")                   # "111.***.***-35"
    """

    document_type = DocumentType.CPF
    length = CPF_LENGTH
    first_digit_position = CPF_FIRST_DIGIT_POSITION
    second_digit_position = CPF_SECOND_DIGIT_POSITION
    first_multipliers = CPF_FIRST_MULTIPLIERS
    second_multipliers = CPF_SECOND_MULTIPLIERS
    allowed_chars = CPF_ALLOWED_CHARS_PATTERN
    structure_pattern = CPF_STRUCTURE_PATTERN
    invalid_patterns = INVALID_CPF_PATTERNS
    length_error = ERROR_MESSAGES["INVALID_CPF_LENGTH"]
    pattern_error = ERROR_MESSAGES["INVALID_CPF_PATTERN"]
    digits_error = ERROR_MESSAGES["INVALID_CPF_DIGITS"]

    def _clean_token(self, value: str) -> str:
        return remove_non_digits(strip_document_formatting(value))

    def _to_values(self, token: str) -> tuple[int, ...]:
        return string_to_digit_array(token)

    def _layout(self, token: str) -> str:
        return f"{token[:3]}.{token[3:6]}.{token[6:9]}-{token[9:11]}"

    def mask(self, value: object) -> Optional[str]:
        """Hide the middle groups: "11144477735" -> "111.***.***-35"."""
        token = self.clean(value)
        if len(token) != self.length:
            return None
        return f"{token[:3]}.{MASK_LITERAL}.{MASK_LITERAL}-{token[9:11]}"


# ─── Convenience API ─────────────────────────────────────────────────
# One shared instance; the validator holds no mutable state.

_cpf_validator = CPFValidator()


def validate_cpf(value: object) -> ValidationResult:
    return _cpf_validator.validate(value)


def weak_validate_cpf(value: object) -> ValidationResult:
    return _cpf_validator.weak_validate(value)


def format_cpf(
    value: object, options: FormatOptions | None = None, *, validate: bool = False
) -> Optional[str]:
    """Format a CPF. With ``validate=True`` an invalid CPF yields None."""
    if should_validate_first(options, validate) and not _cpf_validator.validate(value):
        return None
    return _cpf_validator.format(value)


def mask_cpf(
    value: object, options: FormatOptions | None = None, *, validate: bool = False
) -> Optional[str]:
    """Mask a CPF. With ``validate=True`` an invalid CPF yields None."""
    if should_validate_first(options, validate) and not _cpf_validator.validate(value):
        return None
    return _cpf_validator.mask(value)


def clean_cpf(value: object) -> str:
    return _cpf_validator.clean(value)
