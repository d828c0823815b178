"""qsslint model layer -- public type re-exports."""

from qsslint.model.diagnostic import Diagnostic, Severity
from qsslint.model.result import LintMode, LintResult, is_success
from qsslint.model.stylesheet import (
    AttributeSelector,
    Declaration,
    PseudoState,
    Rule,
    Selector,
    SelectorChain,
    StyleSheet,
)
from qsslint.model.token import Combinator, Token, TokenKind

__all__ = [
    # token
    "TokenKind",
    "Token",
    "Combinator",
    # stylesheet
    "PseudoState",
    "AttributeSelector",
    "Selector",
    "SelectorChain",
    "Declaration",
    "Rule",
    "StyleSheet",
    # diagnostic
    "Severity",
    "Diagnostic",
    # result
    "LintMode",
    "LintResult",
    "is_success",
]
