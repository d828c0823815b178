"""Diagnostic model: positioned findings produced while linting a style sheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from qsslint.model.token import Token


class Severity(Enum):
    """Which stage produced a diagnostic."""

    LEXICAL = "LEXICAL"
    SYNTAX = "SYNTAX"
    SEMANTIC = "SEMANTIC"
    IO = "IO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a style sheet.

    Attributes:
        severity: The stage that found the problem.
        message: Human-readable description of the problem.
        lexeme: The offending source text (empty at end of input).
        start: Offset of the offending text in the source.
        length: Number of characters covered.
        line: 1-based line of ``start``.
        column: 1-based column of ``start``.
    """

    severity: Severity
    message: str
    lexeme: str = ""
    start: int = 0
    length: int = 0
    line: int = 1
    column: int = 1

    @classmethod
    def at(cls, severity: Severity, message: str, token: Token) -> Diagnostic:
        """Build a diagnostic anchored on *token*."""
        return cls(
            severity=severity,
            message=message,
            lexeme=token.lexeme,
            start=token.start,
            length=token.length,
            line=token.line,
            column=token.column,
        )

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def is_fatal(self) -> bool:
        """Lexical, syntax and IO findings always fail a file."""
        return self.severity is not Severity.SEMANTIC

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.severity.value}: {self.message}"
