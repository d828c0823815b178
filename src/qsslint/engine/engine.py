"""Lint engine: drives lexer, parser and validator for one source text."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from qsslint.model.diagnostic import Diagnostic, Severity
from qsslint.model.result import LintMode, LintResult, is_success
from qsslint.parser import parse, tokenize
from qsslint.validation import validate

log = logging.getLogger("qsslint")


def lint(file_identifier: str, source_text: str, mode: LintMode = LintMode.FULL) -> LintResult:
    """Lint *source_text* and return a self-contained result.

    Lexical problems do not stop the parser: it still runs over the tokens
    that were produced so independent syntax errors are reported too. The
    semantic pass runs only in FULL mode and only on an error-free parse.
    """
    log.debug("linting %s (%d chars, mode=%s)", file_identifier, len(source_text), mode.value)
    tokens, diagnostics = tokenize(source_text)
    sheet, syntax = parse(tokens)
    diagnostics = diagnostics + syntax

    if sheet is not None and not diagnostics and mode is LintMode.FULL:
        diagnostics.extend(validate(sheet))

    result = LintResult(
        file_identifier=file_identifier,
        success=is_success(diagnostics, mode),
        diagnostics=tuple(diagnostics),
        source=source_text,
    )
    log.debug(
        "linted %s: success=%s errors=%d warnings=%d",
        file_identifier,
        result.success,
        len(result.errors),
        len(result.warnings),
    )
    return result


def read_source(path: str | Path) -> str:
    """Read a style sheet file as UTF-8, tolerating a byte order mark."""
    return Path(path).read_text(encoding="utf-8-sig")


def lint_path(path: str | Path, mode: LintMode = LintMode.FULL) -> LintResult:
    """Read and lint one file; an unreadable file becomes an IO diagnostic."""
    identifier = str(path)
    try:
        source = read_source(path)
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("cannot read %s: %s", identifier, exc)
        diagnostic = Diagnostic(severity=Severity.IO, message=f"cannot read file: {exc}")
        return LintResult(file_identifier=identifier, success=False, diagnostics=(diagnostic,))
    return lint(identifier, source, mode)


def lint_paths(
    paths: list[str] | list[Path], mode: LintMode = LintMode.FULL, jobs: int = 1
) -> list[LintResult]:
    """Lint every path, returning results in input order.

    With ``jobs > 1`` files are linted concurrently on a thread pool.
    """
    if jobs <= 1 or len(paths) <= 1:
        return [lint_path(path, mode) for path in paths]
    with ThreadPoolExecutor(max_workers=jobs) as pool:
        return list(pool.map(lambda path: lint_path(path, mode), paths))
