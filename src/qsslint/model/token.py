"""Token model: classified source slices produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Classification of a lexeme."""

    IDENTIFIER = "identifier"
    HASH_ID = "hash-id"
    DOT = "."
    COLON = ":"
    DOUBLE_COLON = "::"
    COMMA = ","
    SLASH = "/"
    STAR = "*"
    COMBINATOR = "combinator"
    LBRACE = "{"
    RBRACE = "}"
    SEMICOLON = ";"
    PROPERTY_SEPARATOR = "property-separator"
    EXCLAMATION = "!"
    LBRACKET = "["
    RBRACKET = "]"
    ATTRIBUTE_OPERATOR = "attribute-operator"
    STRING = "string"
    NUMBER = "number"
    COLOR = "color"
    URL = "url"
    FUNCTION = "function"
    EOF = "end of input"


VALUE_KINDS = frozenset({
    TokenKind.IDENTIFIER,
    TokenKind.STRING,
    TokenKind.NUMBER,
    TokenKind.COLOR,
    TokenKind.URL,
    TokenKind.FUNCTION,
})


class Combinator(Enum):
    """Operator joining two selectors of a chain."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


@dataclass(frozen=True)
class Token:
    """A lexeme with its position in the source text.

    Attributes:
        kind: The token classification.
        lexeme: The exact source slice ``source[start:start + length]``.
        start: Offset of the first character.
        length: Number of characters covered.
        line: 1-based line of ``start``.
        column: 1-based column of ``start``.
    """

    kind: TokenKind
    lexeme: str
    start: int
    length: int
    line: int
    column: int

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def is_value(self) -> bool:
        return self.kind in VALUE_KINDS

    @property
    def combinator(self) -> Combinator | None:
        if self.kind is not TokenKind.COMBINATOR:
            return None
        if self.lexeme in (">", "+", "~"):
            return Combinator(self.lexeme)
        return Combinator.DESCENDANT

    def describe(self) -> str:
        """Short human form used in diagnostic messages."""
        if self.kind is TokenKind.EOF:
            return "end of input"
        if self.combinator is Combinator.DESCENDANT:
            return "whitespace"
        return repr(self.lexeme)
