"""
Validation pipeline — detect the document type and build a report.

Flow:
  ┌───────────┐
  │ Raw value │
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │  Guards   │   ← type + non-empty (shared by both documents)
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │  Detect   │   ← CNPJ layout, else CPF if 11 digits
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │ Validator │   ← strict (check digits) or weak (structure only)
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │  Report   │   ← cleaned / formatted / masked + error kind
  └───────────┘

Raw identifiers are personal data: logging only records document type,
mode and error kind, never the value itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional, Union

from .cnpj import CNPJValidator
from .constants import (
    CNPJ_LENGTH,
    CNPJ_STRUCTURE_PATTERN,
    CPF_LENGTH,
    UNDETECTED_TYPE_MESSAGE,
)
from .cpf import CPFValidator
from .document import DocumentValidator
from .exceptions import UnsupportedDocumentError
from .guards import chain_guards, guard_is_string, guard_not_empty
from .models import DocumentReport, DocumentType, ErrorKind

logger = logging.getLogger(__name__)

_VALIDATORS: dict[DocumentType, DocumentValidator] = {
    DocumentType.CPF: CPFValidator(),
    DocumentType.CNPJ: CNPJValidator(),
}


def get_validator(document_type: Union[DocumentType, str]) -> DocumentValidator:
    """Shared validator for a ``DocumentType`` or its name ("cpf", "CNPJ", ...).

    Raises:
        UnsupportedDocumentError: for any other name.
    """
    try:
        key = DocumentType(
            document_type.upper() if isinstance(document_type, str) else document_type
        )
    except ValueError:
        raise UnsupportedDocumentError(
            f"Unsupported document type: {document_type!r}",
            details={
                "requested": document_type,
                "supported": [t.value for t in DocumentType],
            },
        ) from None
    return _VALIDATORS[key]


def detect_document_type(value: object) -> Optional[DocumentType]:
    """Guess the document type from the cleaned token.

    Order matters because CPF cleaning drops letters:
      1. CNPJ when the token already has the CNPJ layout.
      2. CPF when exactly 11 digits remain ("111.444.777-35abc").
      3. CNPJ for any other 14-character token, so it fails on characters.
    """
    cnpj_token = _VALIDATORS[DocumentType.CNPJ].clean(value)
    if CNPJ_STRUCTURE_PATTERN.fullmatch(cnpj_token):
        return DocumentType.CNPJ
    if len(_VALIDATORS[DocumentType.CPF].clean(value)) == CPF_LENGTH:
        return DocumentType.CPF
    if len(cnpj_token) == CNPJ_LENGTH:
        return DocumentType.CNPJ
    return None


class DocumentValidationPipeline:
    """Run values through detection + validation and collect reports.

    Usage:
        pipeline = DocumentValidationPipeline(strict=True)
        report = pipeline.run("111.444.777-35")
        if report.is_valid:
            print(report.formatted)
    """

    def __init__(self, strict: bool = True):
        self.strict = strict

    @property
    def mode(self) -> str:
        return "strict" if self.strict else "weak"

    def run(
        self,
        value: object,
        document_type: Union[DocumentType, str, None] = None,
    ) -> DocumentReport:
        """Validate a single value.

        Args:
            value: Raw user input (any object; non-strings are rejected).
            document_type: Force CPF or CNPJ instead of detecting it.

        Returns:
            DocumentReport with verdict, error and display forms.
        """
        # ── Step 1: Input guards ───────────────────────────────────
        string_guard = guard_is_string(value)
        base = (
            chain_guards(string_guard, guard_not_empty(string_guard.cleaned))
            if string_guard.is_valid
            else string_guard
        )
        if not base.is_valid:
            logger.info("Rejected input before detection: %s", base.kind.value)
            return DocumentReport(
                mode=self.mode,
                is_valid=False,
                error_kind=base.kind,
                error=base.error,
            )

        # ── Step 2: Resolve document type ──────────────────────────
        if document_type is not None:
            validator = get_validator(document_type)
        else:
            detected = detect_document_type(base.cleaned)
            if detected is None:
                logger.info("Could not detect document type")
                return DocumentReport(
                    mode=self.mode,
                    is_valid=False,
                    error_kind=ErrorKind.INVALID_LENGTH,
                    error=UNDETECTED_TYPE_MESSAGE,
                    cleaned=_VALIDATORS[DocumentType.CNPJ].clean(base.cleaned),
                )
            validator = _VALIDATORS[detected]

        # ── Step 3: Validate ───────────────────────────────────────
        logger.debug(
            "Validating %s in %s mode", validator.document_type.value, self.mode
        )
        result = (
            validator.validate(base.cleaned)
            if self.strict
            else validator.weak_validate(base.cleaned)
        )

        # ── Step 4: Report ─────────────────────────────────────────
        if not result.is_valid:
            logger.info(
                "%s rejected: %s", validator.document_type.value, result.kind.value
            )
            return DocumentReport(
                document_type=validator.document_type,
                mode=self.mode,
                is_valid=False,
                error_kind=result.kind,
                error=result.error,
                cleaned=validator.clean(base.cleaned),
            )

        masked = (
            validator.mask(base.cleaned) if isinstance(validator, CPFValidator) else None
        )
        return DocumentReport(
            document_type=validator.document_type,
            mode=self.mode,
            is_valid=True,
            cleaned=validator.clean(base.cleaned),
            formatted=validator.format(base.cleaned),
            masked=masked,
        )

    def run_many(
        self,
        values: Iterable[object],
        document_type: Union[DocumentType, str, None] = None,
    ) -> list[DocumentReport]:
        """Validate every value independently, preserving input order."""
        reports = [self.run(value, document_type) for value in values]
        failed = sum(1 for r in reports if not r.is_valid)
        logger.info(
            "Validated %d value(s) in %s mode, %d rejected",
            len(reports),
            self.mode,
            failed,
        )
        return reports
