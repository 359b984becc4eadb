#!/usr/bin/env python3
"""
Brazilian Document Validator — Entry Point
==========================================

Validates CPF and CNPJ numbers given on the command line.

Usage:
    python main.py 111.444.777-35                  # Auto-detect, strict mode
    python main.py 11.222.333/0001-81 --type cnpj  # Force document type
    python main.py 1A23B45C678D99 --weak           # Structure only, no check digits
    python main.py 11144477735 --mask              # Show CPFs masked
    python main.py 11144477735 52998224725 --json  # One JSON report per line

Configuration (environment or .env):
    BRDOC_LOG_LEVEL          Logging level (default: WARNING)
    BRDOC_VALIDATION_MODE    "strict" (default) or "weak"
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

import typer
from dotenv import load_dotenv

from brdoc_validator.models import DocumentReport, DocumentType
from brdoc_validator.pipeline import DocumentValidationPipeline

load_dotenv()

app = typer.Typer(
    add_completion=False,
    help="Validate Brazilian CPF and CNPJ numbers.",
)

_VALID_MODES = {"strict", "weak"}


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 56


# ─── Configuration ──────────────────────────────────────────────────


def _configure_logging() -> None:
    level = os.getenv("BRDOC_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _default_mode() -> str:
    mode = os.getenv("BRDOC_VALIDATION_MODE", "strict").strip().lower()
    if mode not in _VALID_MODES:
        raise typer.BadParameter(
            f"BRDOC_VALIDATION_MODE must be one of: {', '.join(sorted(_VALID_MODES))}"
        )
    return mode


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_report(value: str, report: DocumentReport, show_masked: bool = False) -> None:
    """Pretty-print one validation report with ANSI color codes."""
    doc_type = report.document_type.value if report.document_type else "UNKNOWN"
    display = report.masked if show_masked and report.masked else report.formatted

    print(f"{'─' * _WIDTH}")
    print(f"  {_BOLD}{_CYAN}{doc_type}{_RESET}  {_DIM}({report.mode}){_RESET}")
    if not show_masked:
        print(f"  Input:       {value}")
    if report.is_valid:
        print(f"  Document:    {display}")
        print(f"  {_GREEN}{_BOLD}VALID{_RESET}")
    else:
        print(f"  {_RED}{_BOLD}INVALID{_RESET}  [{report.error_kind.value}]")
        print(f"  {report.error}")


# ─── Main ────────────────────────────────────────────────────────────


@app.command()
def main(
    values: List[str] = typer.Argument(..., help="CPF/CNPJ values to validate"),
    document_type: Optional[DocumentType] = typer.Option(
        None, "--type", "-t", case_sensitive=False, help="Skip auto-detection"
    ),
    weak: bool = typer.Option(False, "--weak", help="Skip check-digit verification"),
    mask: bool = typer.Option(False, "--mask", help="Display valid CPFs masked"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON reports"),
) -> None:
    """Validate each CPF/CNPJ VALUE and exit 1 if any of them is invalid."""
    _configure_logging()
    strict = not weak and _default_mode() == "strict"

    pipeline = DocumentValidationPipeline(strict=strict)
    reports = pipeline.run_many(values, document_type)

    for value, report in zip(values, reports):
        if as_json:
            print(report.model_dump_json())
        else:
            print_report(value, report, show_masked=mask)

    if not as_json:
        print(f"{'─' * _WIDTH}")

    raise typer.Exit(code=0 if all(r.is_valid for r in reports) else 1)


if __name__ == "__main__":
    app()
