from qsslint.report.reporter import (
    all_succeeded,
    exit_code,
    format_diagnostic,
    format_verbose,
    render,
    report,
)

__all__ = [
    "all_succeeded",
    "exit_code",
    "format_diagnostic",
    "format_verbose",
    "render",
    "report",
]
