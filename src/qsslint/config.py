from __future__ import annotations

from dataclasses import dataclass

from qsslint.model.result import LintMode


@dataclass(frozen=True)
class LintConfig:
    mode: LintMode = LintMode.FULL
    verbose: bool = False
    preview_length: int = 20  # characters of trailing context in verbose output
    jobs: int = 1
