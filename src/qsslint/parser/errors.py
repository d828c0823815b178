"""Parser error types."""

from __future__ import annotations

from qsslint.model.diagnostic import Diagnostic


class StyleSheetSyntaxError(Exception):
    """Raised when style sheet source cannot be lexed or parsed."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        first = diagnostics[0] if diagnostics else None
        self.line = first.line if first else None
        self.column = first.column if first else None
        super().__init__(
            f"Style sheet has {len(diagnostics)} error(s): "
            + "; ".join(str(d) for d in diagnostics)
        )
