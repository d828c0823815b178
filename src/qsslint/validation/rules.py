"""Semantic validation rules for parsed style sheets.

Each rule is a function taking a StyleSheet and returning a list of
SEMANTIC Diagnostic objects. Rules never mutate the sheet.
"""

from __future__ import annotations

from collections.abc import Iterator

from qsslint.model.diagnostic import Diagnostic, Severity
from qsslint.model.stylesheet import Declaration, Selector, StyleSheet
from qsslint.registry import (
    known_pseudo_states,
    known_sub_controls,
    lookup_property,
    value_matches,
)


def _declarations(sheet: StyleSheet) -> Iterator[Declaration]:
    for rule in sheet.rules:
        yield from rule.declarations


def _selectors(sheet: StyleSheet) -> Iterator[Selector]:
    for rule in sheet.rules:
        for chain in rule.selector_group:
            yield from chain.selectors


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


def check_known_properties(sheet: StyleSheet) -> list[Diagnostic]:
    """Every property name must be in the registry."""
    diagnostics: list[Diagnostic] = []
    for decl in _declarations(sheet):
        if lookup_property(decl.property) is not None:
            continue
        message = f"unknown property: {decl.property}"
        if decl.property_token is not None:
            diagnostics.append(Diagnostic.at(Severity.SEMANTIC, message, decl.property_token))
        else:
            diagnostics.append(
                Diagnostic(
                    severity=Severity.SEMANTIC,
                    message=message,
                    lexeme=decl.property,
                    start=decl.start,
                    length=len(decl.property),
                )
            )
    return diagnostics


def check_property_values(sheet: StyleSheet) -> list[Diagnostic]:
    """Values of known properties must match the registered shape."""
    diagnostics: list[Diagnostic] = []
    for decl in _declarations(sheet):
        spec = lookup_property(decl.property)
        if spec is None or not decl.value_tokens:
            continue
        if value_matches(spec, decl.value_tokens):
            continue
        first = decl.value_tokens[0]
        last = decl.value_tokens[-1]
        diagnostics.append(
            Diagnostic(
                severity=Severity.SEMANTIC,
                message=f"malformed value for property: {decl.property}",
                lexeme=decl.value_text,
                start=first.start,
                length=last.end - first.start,
                line=first.line,
                column=first.column,
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


def check_pseudo_states(sheet: StyleSheet) -> list[Diagnostic]:
    """Pseudo-state names must be known for the selector's type."""
    diagnostics: list[Diagnostic] = []
    for selector in _selectors(sheet):
        known = known_pseudo_states(selector.type_name)
        for state in selector.pseudo:
            if state.name.lower() not in known:
                diagnostics.append(
                    Diagnostic.at(
                        Severity.SEMANTIC,
                        f"unknown pseudo-state: {state.name}",
                        state.token,
                    )
                )
    return diagnostics


def check_sub_controls(sheet: StyleSheet) -> list[Diagnostic]:
    """Sub-control names must be known for the selector's type."""
    diagnostics: list[Diagnostic] = []
    for selector in _selectors(sheet):
        token = selector.sub_control_token
        if token is None:
            continue
        if token.lexeme.lower() not in known_sub_controls(selector.type_name):
            diagnostics.append(
                Diagnostic.at(
                    Severity.SEMANTIC,
                    f"unknown sub-control: {token.lexeme}",
                    token,
                )
            )
    return diagnostics


ALL_RULES = [
    check_known_properties,
    check_property_values,
    check_pseudo_states,
    check_sub_controls,
]
