"""
Brazilian Document Validator — CPF and CNPJ validation, cleaning and formatting.

Architecture: Guards (type → empty → characters → length → pattern) → Check digits
Modes:       strict (mod-11 check digits verified) and weak (structure only)
"""

__version__ = "1.0.0"

from .cnpj import (
    CNPJValidator,
    clean_cnpj,
    format_cnpj,
    validate_cnpj,
    weak_validate_cnpj,
)
from .constants import (
    CNPJ_FORMATTED_LENGTH,
    CNPJ_LENGTH,
    CPF_FORMATTED_LENGTH,
    CPF_LENGTH,
    ERROR_MESSAGES,
)
from .cpf import (
    CPFValidator,
    clean_cpf,
    format_cpf,
    mask_cpf,
    validate_cpf,
    weak_validate_cpf,
)
from .document import DocumentValidator
from .exceptions import (
    DocumentValidationError,
    GuardChainError,
    UnsupportedDocumentError,
)
from .guards import (
    chain_guards,
    guard_is_string,
    guard_length,
    guard_not_empty,
    guard_pattern,
    guard_structure,
    guard_valid_characters,
)
from .models import (
    DocumentReport,
    DocumentType,
    ErrorKind,
    FormatOptions,
    GuardFailed,
    GuardPassed,
    GuardResult,
    Invalid,
    Valid,
    ValidationResult,
)
from .pipeline import DocumentValidationPipeline, detect_document_type, get_validator

__all__ = [
    "__version__",
    # Validators
    "DocumentValidator",
    "CPFValidator",
    "CNPJValidator",
    "validate_cpf",
    "weak_validate_cpf",
    "format_cpf",
    "mask_cpf",
    "clean_cpf",
    "validate_cnpj",
    "weak_validate_cnpj",
    "format_cnpj",
    "clean_cnpj",
    # Pipeline
    "DocumentValidationPipeline",
    "detect_document_type",
    "get_validator",
    # Guards
    "guard_is_string",
    "guard_not_empty",
    "guard_valid_characters",
    "guard_length",
    "guard_structure",
    "guard_pattern",
    "chain_guards",
    # Models
    "DocumentType",
    "ErrorKind",
    "GuardPassed",
    "GuardFailed",
    "GuardResult",
    "Valid",
    "Invalid",
    "ValidationResult",
    "FormatOptions",
    "DocumentReport",
    # Errors
    "DocumentValidationError",
    "GuardChainError",
    "UnsupportedDocumentError",
    # Constants
    "CPF_LENGTH",
    "CPF_FORMATTED_LENGTH",
    "CNPJ_LENGTH",
    "CNPJ_FORMATTED_LENGTH",
    "ERROR_MESSAGES",
]
