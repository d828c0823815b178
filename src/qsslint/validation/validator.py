"""Style sheet validator: runs all semantic rules and collects diagnostics."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from qsslint.model.diagnostic import Diagnostic
from qsslint.model.stylesheet import StyleSheet
from qsslint.validation.rules import ALL_RULES

log = logging.getLogger("qsslint")

RuleFunc = Callable[[StyleSheet], list[Diagnostic]]


def _rules(extra_rules: Iterable[RuleFunc] | None) -> tuple[RuleFunc, ...]:
    return (*ALL_RULES, *(extra_rules or ()))


def validate(
    sheet: StyleSheet, extra_rules: Iterable[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run every rule against *sheet*, built-in rules first.

    Diagnostics come back grouped by rule, in rule order; within a rule they
    follow the source.
    """
    diagnostics: list[Diagnostic] = []
    for rule in _rules(extra_rules):
        found = rule(sheet)
        if found:
            log.debug("%s reported %d diagnostic(s)", rule.__name__, len(found))
        diagnostics.extend(found)
    return diagnostics
