"""
Guard chain — small, independent validation steps.

Each guard is total over its declared input and returns a ``GuardResult``:
either ``GuardPassed(cleaned=...)`` or ``GuardFailed(kind=..., error=...)``.
Guards never raise for bad data.

``chain_guards`` combines results that have ALREADY been computed, each
against the previous stage's cleaned value. It does not re-run or re-clean
anything; it only picks the first failure (or the last success).
"""

from __future__ import annotations

import re
from collections.abc import Set

from .constants import DIGITS_ONLY_PATTERN, ERROR_MESSAGES
from .exceptions import GuardChainError
from .models import ErrorKind, GuardFailed, GuardPassed, GuardResult
from .utils import strip_document_formatting


def guard_is_string(value: object) -> GuardResult:
    """Pass iff ``value`` is a ``str``. Runs before anything else touches it."""
    if not isinstance(value, str):
        return GuardFailed(
            kind=ErrorKind.INVALID_TYPE, error=ERROR_MESSAGES["INVALID_TYPE"]
        )
    return GuardPassed(cleaned=value)


def guard_not_empty(value: str) -> GuardResult:
    """Trim surrounding whitespace; pass iff something is left.

    Trimming is the only transformation — formatting characters are kept.
    """
    trimmed = value.strip()
    if not trimmed:
        return GuardFailed(
            kind=ErrorKind.EMPTY_INPUT, error=ERROR_MESSAGES["EMPTY_INPUT"]
        )
    return GuardPassed(cleaned=trimmed)


def guard_valid_characters(value: str, allowed: re.Pattern[str]) -> GuardResult:
    """Strip document formatting, then require a full match of ``allowed``.

    An empty remainder never matches (patterns use ``+``).
    """
    cleaned = strip_document_formatting(value)
    if not allowed.fullmatch(cleaned):
        return GuardFailed(
            kind=ErrorKind.INVALID_CHARACTERS,
            error=ERROR_MESSAGES["INVALID_CHARACTERS"],
        )
    return GuardPassed(cleaned=cleaned)


def guard_length(value: str, expected_length: int, error: str) -> GuardResult:
    """Pass iff ``len(value) == expected_length``; ``error`` is caller-supplied."""
    if len(value) != expected_length:
        return GuardFailed(kind=ErrorKind.INVALID_LENGTH, error=error)
    return GuardPassed(cleaned=value)


def guard_structure(value: str, pattern: re.Pattern[str]) -> GuardResult:
    """Cross-check character class and length with one full match."""
    if not pattern.fullmatch(value):
        return GuardFailed(
            kind=ErrorKind.INVALID_CHARACTERS,
            error=ERROR_MESSAGES["INVALID_CHARACTERS"],
        )
    return GuardPassed(cleaned=value)


def guard_pattern(value: str, invalid_patterns: Set[str], error: str) -> GuardResult:
    """Reject known degenerate tokens such as "00000000000".

    Only all-digit tokens are looked up; anything containing a letter is
    exempt because the pattern sets hold digits only.
    """
    if DIGITS_ONLY_PATTERN.fullmatch(value) and value in invalid_patterns:
        return GuardFailed(kind=ErrorKind.INVALID_PATTERN, error=error)
    return GuardPassed(cleaned=value)


def chain_guards(*guards: GuardResult) -> GuardResult:
    """Return the first failed result, or the last result if all passed.

    Raises:
        GuardChainError: if called with no guards (caller misuse).
    """
    if not guards:
        raise GuardChainError("chain_guards requires at least one guard")

    for guard in guards:
        if not guard.is_valid:
            return guard

    return guards[-1]
