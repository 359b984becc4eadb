"""
CNPJ (Cadastro Nacional da Pessoa Jurídica) — the 14-character entity identifier.

Layout: ``XX.XXX.XXX/XXXX-DD``. The 12-character base may hold letters
(alphanumeric CNPJ); each character contributes its base-36 value
(0-9 -> 0..9, A-Z -> 10..35) to the weighted sum. The two check digits at
positions 12 and 13 are always decimal.
"""

from __future__ import annotations

from typing import Optional

from .constants import (
    CNPJ_ALLOWED_CHARS_PATTERN,
    CNPJ_FIRST_DIGIT_POSITION,
    CNPJ_FIRST_MULTIPLIERS,
    CNPJ_LENGTH,
    CNPJ_SECOND_DIGIT_POSITION,
    CNPJ_SECOND_MULTIPLIERS,
    CNPJ_STRUCTURE_PATTERN,
    ERROR_MESSAGES,
    INVALID_CNPJ_PATTERNS,
)
from .document import DocumentValidator
from .models import DocumentType, FormatOptions, ValidationResult
from .utils import (
    remove_non_alphanumeric,
    should_validate_first,
    string_to_base36_values,
    strip_document_formatting,
)


class CNPJValidator(DocumentValidator):
    """Validate, clean and format CNPJ numbers, numeric or alphanumeric."""

    document_type = DocumentType.CNPJ
    length = CNPJ_LENGTH
    first_digit_position = CNPJ_FIRST_DIGIT_POSITION
    second_digit_position = CNPJ_SECOND_DIGIT_POSITION
    first_multipliers = CNPJ_FIRST_MULTIPLIERS
    second_multipliers = CNPJ_SECOND_MULTIPLIERS
    allowed_chars = CNPJ_ALLOWED_CHARS_PATTERN
    structure_pattern = CNPJ_STRUCTURE_PATTERN
    invalid_patterns = INVALID_CNPJ_PATTERNS
    length_error = ERROR_MESSAGES["INVALID_CNPJ_LENGTH"]
    pattern_error = ERROR_MESSAGES["INVALID_CNPJ_PATTERN"]
    digits_error = ERROR_MESSAGES["INVALID_CNPJ_DIGITS"]

    def _clean_token(self, value: str) -> str:
        return remove_non_alphanumeric(strip_document_formatting(value)).upper()

    def _to_values(self, token: str) -> tuple[int, ...]:
        return string_to_base36_values(token)

    def _layout(self, token: str) -> str:
        return f"{token[:2]}.{token[2:5]}.{token[5:8]}/{token[8:12]}-{token[12:14]}"


# ─── Convenience API ─────────────────────────────────────────────────

_cnpj_validator = CNPJValidator()


def validate_cnpj(value: object) -> ValidationResult:
    return _cnpj_validator.validate(value)


def weak_validate_cnpj(value: object) -> ValidationResult:
    return _cnpj_validator.weak_validate(value)


def format_cnpj(
    value: object, options: FormatOptions | None = None, *, validate: bool = False
) -> Optional[str]:
    """Format a CNPJ. With ``validate=True`` an invalid CNPJ yields None."""
    if should_validate_first(options, validate) and not _cnpj_validator.validate(value):
        return None
    return _cnpj_validator.format(value)


def clean_cnpj(value: object) -> str:
    return _cnpj_validator.clean(value)
