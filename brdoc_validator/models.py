"""
Pydantic models for validation outcomes — typed results instead of flags.

Guard and validation outcomes are tagged unions: a passing variant and a
failing variant. A failure always carries a machine-readable kind AND the
rendered message; a success never carries an error. All result models are
frozen, so nothing downstream can mutate an outcome after it is produced.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict


# ─── Enumerations ───────────────────────────────────────────────────


class DocumentType(str, Enum):
    """Supported Brazilian taxpayer identifiers."""

    CPF = "CPF"  # Individual (Cadastro de Pessoas Físicas)
    CNPJ = "CNPJ"  # Entity (Cadastro Nacional da Pessoa Jurídica)


class ErrorKind(str, Enum):
    """Closed taxonomy of validation failures."""

    INVALID_TYPE = "INVALID_TYPE"
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_PATTERN = "INVALID_PATTERN"
    INVALID_CHECK_DIGITS = "INVALID_CHECK_DIGITS"


# ─── Guard Results ──────────────────────────────────────────────────


class GuardPassed(BaseModel):
    """A guard accepted its input; ``cleaned`` feeds the next stage."""

    model_config = ConfigDict(frozen=True)

    is_valid: Literal[True] = True
    cleaned: str

    @property
    def error(self) -> None:
        return None

    def __bool__(self) -> bool:
        return True


class GuardFailed(BaseModel):
    """A guard rejected its input."""

    model_config = ConfigDict(frozen=True)

    is_valid: Literal[False] = False
    kind: ErrorKind
    error: str  # Human-readable, e.g. "Input cannot be empty"

    def __bool__(self) -> bool:
        return False


GuardResult = Union[GuardPassed, GuardFailed]


# ─── Validation Results ─────────────────────────────────────────────


class Valid(BaseModel):
    """Terminal success."""

    model_config = ConfigDict(frozen=True)

    is_valid: Literal[True] = True

    @property
    def error(self) -> None:
        return None

    @property
    def kind(self) -> None:
        return None

    def __bool__(self) -> bool:
        return True


class Invalid(BaseModel):
    """Terminal failure with the first error encountered."""

    model_config = ConfigDict(frozen=True)

    is_valid: Literal[False] = False
    kind: ErrorKind
    error: str

    def __bool__(self) -> bool:
        return False


ValidationResult = Union[Valid, Invalid]


# ─── Options ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class FormatOptions:
    """Options accepted by format/mask convenience functions."""

    validate: bool = False  # Run strict validation first; invalid -> None


# ─── Pipeline Report ────────────────────────────────────────────────


class DocumentReport(BaseModel):
    """Outcome of running one value through the validation pipeline."""

    document_type: Optional[DocumentType] = None  # None when undetectable
    mode: Literal["strict", "weak"] = "strict"
    is_valid: bool
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None
    cleaned: str = ""
    formatted: Optional[str] = None  # Only for valid inputs
    masked: Optional[str] = None  # CPF only
