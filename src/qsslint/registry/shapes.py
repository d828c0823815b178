"""Value-shape matching for declarations.

Structured shapes (colors, lengths, borders, fonts, ...) are parsed with a
Lark grammar, one start rule per shape. A small Transformer then checks the
names the grammar cannot know about: color names, palette roles, border
styles and font flags.
"""

from __future__ import annotations

from functools import cache
from pathlib import Path

from lark import Lark, Token as LarkToken, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from qsslint.model.token import Token, TokenKind
from qsslint.registry.properties import (
    BORDER_STYLES,
    FONT_FLAGS,
    NAMED_COLORS,
    PALETTE_ROLES,
    PropertySpec,
    ValueShape,
)

__all__ = ["value_matches"]

GRAMMAR_PATH = Path(__file__).parent / "values.lark"

# ValueShape -> start rule in values.lark
_START_RULES: dict[ValueShape, str] = {
    ValueShape.COLOR: "color",
    ValueShape.BRUSH: "brush",
    ValueShape.COLORS: "colors",
    ValueShape.LENGTH: "length",
    ValueShape.BOX: "box",
    ValueShape.BORDER: "border",
    ValueShape.FONT: "font",
    ValueShape.FONT_FAMILY: "font_family",
    ValueShape.URL: "url",
    ValueShape.NUMBER: "number",
}


class MalformedValue(ValueError):
    """Raised by the checker for a word outside its accepted set."""


def _word(items: list[LarkToken]) -> str:
    return str(items[-1]).lower()


class _ValueChecker(Transformer):  # type: ignore[type-arg]
    """Reject names that parse but are not recognized."""

    def named_color(self, items: list[LarkToken]) -> str:
        name = _word(items)
        if name not in NAMED_COLORS:
            raise MalformedValue(f"unknown color {name!r}")
        return name

    def palette_role(self, items: list[LarkToken]) -> str:
        role = _word(items)
        if role not in PALETTE_ROLES:
            raise MalformedValue(f"unknown palette role {role!r}")
        return role

    def border_keyword(self, items: list[LarkToken]) -> str:
        word = _word(items)
        if word not in BORDER_STYLES and word not in NAMED_COLORS:
            raise MalformedValue(f"unknown border style or color {word!r}")
        return word

    def font_flag(self, items: list[LarkToken]) -> str:
        flag = _word(items)
        if flag not in FONT_FLAGS:
            raise MalformedValue(f"unknown font flag {flag!r}")
        return flag


@cache
def _value_parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start=list(_START_RULES.values()),
    )


def _keywords_match(spec: PropertySpec, tokens: tuple[Token, ...]) -> bool:
    if not 1 <= len(tokens) <= spec.max_items:
        return False
    for token in tokens:
        if token.kind not in (TokenKind.IDENTIFIER, TokenKind.NUMBER):
            return False
        if token.lexeme.lower() not in spec.keywords:
            return False
    return True


def value_matches(spec: PropertySpec, tokens: tuple[Token, ...]) -> bool:
    """Whether the value *tokens* of a declaration fit *spec*."""
    if spec.shape is ValueShape.ANY:
        return True
    if spec.shape is ValueShape.KEYWORD:
        return _keywords_match(spec, tokens)

    text = " ".join(t.lexeme for t in tokens)
    try:
        tree = _value_parser().parse(text, start=_START_RULES[spec.shape])
        _ValueChecker().transform(tree)
    except (UnexpectedInput, VisitError):
        return False
    return True
