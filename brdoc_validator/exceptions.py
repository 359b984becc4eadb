"""
Custom exception hierarchy for programming-contract violations.

Invalid documents are NEVER reported through exceptions — validators return
``Invalid`` results. These exceptions only signal caller misuse of the
library API, which correct composition never reaches.
"""

from __future__ import annotations


class DocumentValidationError(Exception):
    """Base exception for all library contract violations."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class GuardChainError(DocumentValidationError):
    """``chain_guards`` was called without any guard results."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("GUARD_CHAIN_EMPTY", message, details)


class UnsupportedDocumentError(DocumentValidationError):
    """A document type outside CPF/CNPJ was requested."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_DOCUMENT_TYPE", message, details)
