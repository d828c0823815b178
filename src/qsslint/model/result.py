"""Per-file lint outcome."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from qsslint.model.diagnostic import Diagnostic, Severity


class LintMode(Enum):
    """How much checking a lint run performs."""

    SYNTAX_ONLY = "syntax-only"
    FULL = "full"


def is_success(diagnostics: list[Diagnostic] | tuple[Diagnostic, ...], mode: LintMode) -> bool:
    """A file fails on any fatal diagnostic, or on a semantic one in full mode."""
    for diag in diagnostics:
        if diag.is_fatal:
            return False
        if diag.severity is Severity.SEMANTIC and mode is LintMode.FULL:
            return False
    return True


@dataclass(frozen=True)
class LintResult:
    """Everything the reporter needs to know about one linted file.

    Attributes:
        file_identifier: Path or label of the linted source.
        success: Whether the file passed in the requested mode.
        diagnostics: Findings in the order they were produced.
        source: The linted text, kept for verbose context output.
    """

    file_identifier: str
    success: bool
    diagnostics: tuple[Diagnostic, ...] = ()
    source: str = field(default="", repr=False)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_fatal]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if not d.is_fatal]
