"""Reporter: renders lint results and folds them into an exit status."""

from __future__ import annotations

from typing import Callable, Iterable

from qsslint.config import LintConfig
from qsslint.model.diagnostic import Diagnostic
from qsslint.model.result import LintResult

Echo = Callable[[str], None]


def format_diagnostic(diagnostic: Diagnostic, file_identifier: str) -> str:
    """One line: ``<file>:<line>:<column>: <SEVERITY>: <message>``."""
    return f"{file_identifier}:{diagnostic}"


def format_verbose(diagnostic: Diagnostic, source: str, preview_length: int = 20) -> list[str]:
    """Lexeme, position and the source split around the offending span.

    The text after the span is cut to *preview_length* characters.
    """
    start = min(max(diagnostic.start, 0), len(source))
    end = min(start + max(diagnostic.length, 0), len(source))
    left = source[:start]
    mid = source[start:end]
    right = source[end:]
    return [
        f"    Lexeme causing the error: {diagnostic.lexeme!r}",
        f"    start: {diagnostic.start} length: {diagnostic.length}",
        f"    original length: {len(source)}",
        f"    new length: {len(left)} {len(mid)} {len(right)}",
        f"    leftString: {left!r}",
        f"    midString: {mid!r}",
        f"    rightString: {right[:preview_length]!r}",
    ]


def render(result: LintResult, config: LintConfig) -> list[str]:
    """All output lines for *result* (empty for a clean file)."""
    lines: list[str] = []
    if not result.success:
        lines.append(f"Invalid stylesheet for {result.file_identifier}")
    for diagnostic in result.diagnostics:
        lines.append(format_diagnostic(diagnostic, result.file_identifier))
        if config.verbose:
            lines.extend(format_verbose(diagnostic, result.source, config.preview_length))
    return lines


def report(result: LintResult, config: LintConfig, echo: Echo) -> None:
    for line in render(result, config):
        echo(line)


def all_succeeded(results: Iterable[LintResult]) -> bool:
    """Logical AND of per-file success (True for no files)."""
    return all(result.success for result in results)


def exit_code(results: Iterable[LintResult]) -> int:
    return 0 if all_succeeded(results) else 1
