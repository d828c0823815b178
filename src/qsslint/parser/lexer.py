"""Hand-written scanner for Qt style sheets.

Converts raw source text into classified tokens with source positions.
The scanner is context sensitive: outside braces it produces selector
tokens (``#id``, ``:state``, combinators), inside braces it produces
declaration tokens (``:`` and ``/`` separators, colors, numbers,
``url(...)``).

Whitespace and comments are dropped, except that whitespace separating two
selector components becomes an explicit descendant COMBINATOR token.
"""

from __future__ import annotations

import re
from bisect import bisect_right

from qsslint.model.diagnostic import Diagnostic, Severity
from qsslint.model.token import Token, TokenKind

__all__ = ["tokenize"]

_WHITESPACE = frozenset(" \t\r\n\f")

_IDENT_RE = re.compile(r"-?[^\W\d][\w-]*")
_HASH_RE = re.compile(r"#[\w-]+")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:%|[^\W\d][\w-]*)?")

# Token kinds that may end / begin a compound selector. Whitespace between
# an end and a begin is the descendant combinator.
_COMPONENT_END = frozenset({
    TokenKind.IDENTIFIER,
    TokenKind.HASH_ID,
    TokenKind.STAR,
    TokenKind.RBRACKET,
})
_COMPONENT_START = frozenset({
    TokenKind.IDENTIFIER,
    TokenKind.HASH_ID,
    TokenKind.STAR,
    TokenKind.DOT,
    TokenKind.COLON,
    TokenKind.DOUBLE_COLON,
    TokenKind.LBRACKET,
})

_SINGLE_CHAR: dict[str, TokenKind] = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
    "!": TokenKind.EXCLAMATION,
}


def tokenize(source: str) -> tuple[list[Token], list[Diagnostic]]:
    """Tokenize style sheet *source*.

    Returns the tokens, always terminated by a single EOF token, and any
    LEXICAL diagnostics. An unterminated string, comment, ``url(`` or
    function call stops the scan: the rest of the input yields no tokens.
    """
    return _Lexer(source).run()


class _Lexer:
    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.depth = 0
        self.tokens: list[Token] = []
        self.diagnostics: list[Diagnostic] = []
        self._line_starts = [0] + [i + 1 for i, c in enumerate(source) if c == "\n"]
        self._pending_space: tuple[int, int] | None = None

    # ---- positions ----

    def _line_column(self, offset: int) -> tuple[int, int]:
        line = bisect_right(self._line_starts, offset)
        return line, offset - self._line_starts[line - 1] + 1

    def _append(self, kind: TokenKind, start: int, end: int) -> None:
        line, column = self._line_column(start)
        self.tokens.append(
            Token(kind, self.source[start:end], start, end - start, line, column)
        )

    def _emit(self, kind: TokenKind, start: int, end: int) -> None:
        if self._pending_space is not None:
            space_start, space_end = self._pending_space
            self._pending_space = None
            if (
                kind in _COMPONENT_START
                and self.tokens
                and self.tokens[-1].kind in _COMPONENT_END
            ):
                self._append(TokenKind.COMBINATOR, space_start, space_end)
        self._append(kind, start, end)
        self.pos = end

    def _skip(self, start: int, end: int) -> None:
        """Drop whitespace or a comment, remembering it in selector context."""
        if self.depth == 0:
            if self._pending_space is None:
                self._pending_space = (start, end)
            else:
                self._pending_space = (self._pending_space[0], end)
        self.pos = end

    # ---- errors ----

    def _error(self, message: str, start: int, end: int) -> None:
        line, column = self._line_column(start)
        self.diagnostics.append(
            Diagnostic(
                severity=Severity.LEXICAL,
                message=message,
                lexeme=self.source[start:end],
                start=start,
                length=end - start,
                line=line,
                column=column,
            )
        )

    def _unterminated(self, what: str, start: int) -> bool:
        self._error(f"unterminated {what}", start, len(self.source))
        self.pos = len(self.source)
        return False

    def _unexpected(self, start: int) -> bool:
        self._error(f"unexpected character {self.source[start]!r}", start, start + 1)
        self._pending_space = None
        self.pos = start + 1
        return True

    # ---- driver ----

    def run(self) -> tuple[list[Token], list[Diagnostic]]:
        while self.pos < len(self.source):
            if not self._step():
                break
        end = len(self.source)
        self._append(TokenKind.EOF, end, end)
        return self.tokens, self.diagnostics

    def _step(self) -> bool:
        """Consume one token (or skipped run). Returns False to stop scanning."""
        src = self.source
        start = self.pos
        ch = src[start]

        if ch in _WHITESPACE:
            end = start + 1
            while end < len(src) and src[end] in _WHITESPACE:
                end += 1
            self._skip(start, end)
            return True
        if src.startswith("/*", start):
            close = src.find("*/", start + 2)
            if close < 0:
                return self._unterminated("comment", start)
            self._skip(start, close + 2)
            return True
        if ch in "\"'":
            return self._string(start)
        if ch in _SINGLE_CHAR:
            self._emit(_SINGLE_CHAR[ch], start, start + 1)
            if ch == "{":
                self.depth += 1
            elif ch == "}":
                self.depth = max(0, self.depth - 1)
            return True
        if self.depth == 0:
            return self._selector_token(start)
        return self._declaration_token(start)

    # ---- shared scanners ----

    def _string(self, start: int) -> bool:
        src = self.source
        quote = src[start]
        i = start + 1
        while i < len(src):
            if src[i] == "\\":
                i += 2
                continue
            if src[i] == quote:
                self._emit(TokenKind.STRING, start, i + 1)
                return True
            i += 1
        return self._unterminated("string", start)

    def _closing_paren(self, open_at: int) -> int:
        """Offset just past the ``)`` balancing the ``(`` at *open_at*, or -1."""
        src = self.source
        depth = 0
        i = open_at
        while i < len(src):
            c = src[i]
            if c in "\"'":
                close = src.find(c, i + 1)
                if close < 0:
                    return -1
                i = close + 1
                continue
            if c == "(":
                depth += 1
            elif c == ")":
                depth -= 1
                if depth == 0:
                    return i + 1
            i += 1
        return -1

    # ---- selector context ----

    def _selector_token(self, start: int) -> bool:
        src = self.source
        ch = src[start]
        nxt = src[start + 1] if start + 1 < len(src) else ""

        match = _IDENT_RE.match(src, start)
        if match:
            self._emit(TokenKind.IDENTIFIER, start, match.end())
        elif ch == "#":
            match = _HASH_RE.match(src, start)
            if not match:
                return self._unexpected(start)
            self._emit(TokenKind.HASH_ID, start, match.end())
        elif ch == ":":
            if nxt == ":":
                self._emit(TokenKind.DOUBLE_COLON, start, start + 2)
            else:
                self._emit(TokenKind.COLON, start, start + 1)
        elif ch == ".":
            self._emit(TokenKind.DOT, start, start + 1)
        elif ch == "*":
            self._emit(TokenKind.STAR, start, start + 1)
        elif ch in "~|" and nxt == "=":
            self._emit(TokenKind.ATTRIBUTE_OPERATOR, start, start + 2)
        elif ch == "=":
            self._emit(TokenKind.ATTRIBUTE_OPERATOR, start, start + 1)
        elif ch in ">+~":
            self._emit(TokenKind.COMBINATOR, start, start + 1)
        elif ch == "[":
            self._emit(TokenKind.LBRACKET, start, start + 1)
        elif ch == "]":
            self._emit(TokenKind.RBRACKET, start, start + 1)
        elif ch.isdigit():
            match = _NUMBER_RE.match(src, start)
            self._emit(TokenKind.NUMBER, start, match.end() if match else start + 1)
        else:
            return self._unexpected(start)
        return True

    # ---- declaration context ----

    def _declaration_token(self, start: int) -> bool:
        src = self.source
        ch = src[start]

        match = _IDENT_RE.match(src, start)
        if match:
            end = match.end()
            if end < len(src) and src[end] == "(":
                close = self._closing_paren(end)
                if match.group().lower() == "url":
                    if close < 0:
                        return self._unterminated("url", start)
                    self._emit(TokenKind.URL, start, close)
                else:
                    if close < 0:
                        return self._unterminated("function call", start)
                    self._emit(TokenKind.FUNCTION, start, close)
            else:
                self._emit(TokenKind.IDENTIFIER, start, end)
            return True

        match = _NUMBER_RE.match(src, start)
        if match:
            self._emit(TokenKind.NUMBER, start, match.end())
        elif ch == "#":
            match = _HASH_RE.match(src, start)
            if not match:
                return self._unexpected(start)
            self._emit(TokenKind.COLOR, start, match.end())
        elif ch == ":":
            self._emit(TokenKind.PROPERTY_SEPARATOR, start, start + 1)
        elif ch == "/":
            self._emit(TokenKind.SLASH, start, start + 1)
        else:
            return self._unexpected(start)
        return True
