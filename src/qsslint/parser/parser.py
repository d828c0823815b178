"""Recursive-descent parser for Qt style sheets.

Grammar:
    stylesheet     := rule* EOF
    rule           := selector_group '{' (declaration | ';')* '}'
    selector_group := chain (',' chain)*
    chain          := selector (COMBINATOR? selector)*
    selector       := (IDENT | '*')? qualifier*      -- at least one part
    qualifier      := HASH_ID | '.' IDENT | ':' '!'? IDENT | '::' IDENT
                    | '[' IDENT (ATTR_OP (STRING | IDENT))? ']'
    declaration    := IDENT ':' value ((',' | '/') value)* ('!' 'important')? (';' | &'}')

Errors never stop the parse. After reporting the offending token the parser
skips ahead to a boundary (``;`` or ``}`` inside a block, ``{``, ``}`` or ``;``
at the top level) and carries on, so one pass reports independent errors.
"""

from __future__ import annotations

from dataclasses import replace

from qsslint.model.diagnostic import Diagnostic, Severity
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
from qsslint.parser.errors import StyleSheetSyntaxError
from qsslint.parser.lexer import tokenize

__all__ = ["parse", "parse_stylesheet"]

_SELECTOR_START = frozenset({
    TokenKind.IDENTIFIER,
    TokenKind.STAR,
    TokenKind.HASH_ID,
    TokenKind.DOT,
    TokenKind.COLON,
    TokenKind.DOUBLE_COLON,
    TokenKind.LBRACKET,
})
_VALUE_SEPARATORS = frozenset({TokenKind.COMMA, TokenKind.SLASH})


def parse(tokens: list[Token]) -> tuple[StyleSheet | None, list[Diagnostic]]:
    """Parse *tokens* into a StyleSheet.

    Returns ``(sheet, [])`` on success. If any SYNTAX diagnostic was produced
    the partially built sheet is dropped and ``(None, diagnostics)`` is
    returned.
    """
    parser = _Parser(tokens)
    rules = parser.parse_rules()
    if parser.diagnostics:
        return None, parser.diagnostics
    return StyleSheet(rules=tuple(rules)), []


def parse_stylesheet(source: str) -> StyleSheet:
    """Lex and parse *source*, raising on any lexical or syntax error."""
    tokens, diagnostics = tokenize(source)
    sheet, syntax = parse(tokens)
    diagnostics = diagnostics + syntax
    if diagnostics or sheet is None:
        raise StyleSheetSyntaxError(diagnostics)
    return sheet


class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = list(tokens)
        if not self.tokens or self.tokens[-1].kind is not TokenKind.EOF:
            end = self.tokens[-1].end if self.tokens else 0
            line = self.tokens[-1].line if self.tokens else 1
            self.tokens.append(Token(TokenKind.EOF, "", end, 0, line, 1))
        self.pos = 0
        self.diagnostics: list[Diagnostic] = []

    # ---- token access ----

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def next(self) -> Token:
        token = self.tokens[self.pos]
        if token.kind is not TokenKind.EOF:
            self.pos += 1
        return token

    def at(self, *kinds: TokenKind) -> bool:
        return self.peek().kind in kinds

    @property
    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def error(self, message: str, token: Token) -> None:
        self.diagnostics.append(Diagnostic.at(Severity.SYNTAX, message, token))

    # ---- recovery ----

    def recover_selector(self) -> None:
        """Skip to the next '{' (kept) or past the next '}' or ';'."""
        while True:
            token = self.peek()
            if token.kind in (TokenKind.LBRACE, TokenKind.EOF):
                return
            self.next()
            if token.kind in (TokenKind.RBRACE, TokenKind.SEMICOLON):
                return

    def recover_declaration(self) -> None:
        """Skip past the next ';', or up to the next '}' (kept)."""
        while True:
            token = self.peek()
            if token.kind in (TokenKind.RBRACE, TokenKind.EOF):
                return
            self.next()
            if token.kind is TokenKind.SEMICOLON:
                return

    # ---- rules ----

    def parse_rules(self) -> list[Rule]:
        rules: list[Rule] = []
        while not self.at(TokenKind.EOF):
            before = self.pos
            token = self.peek()
            if token.kind in (TokenKind.RBRACE, TokenKind.SEMICOLON):
                self.error(f"unexpected {token.describe()} outside of a rule", token)
                self.next()
                continue
            rule = self.parse_rule()
            if rule is not None:
                rules.append(rule)
            if self.pos == before:
                self.next()
        return rules

    def parse_rule(self) -> Rule | None:
        first = self.peek()
        group = self.parse_selector_group()
        if not self.at(TokenKind.LBRACE):
            return None
        self.next()
        declarations, close = self.parse_block()
        if group is None or close is None:
            return None
        return Rule(
            selector_group=group,
            declarations=tuple(declarations),
            start=first.start,
            length=close.end - first.start,
        )

    def parse_block(self) -> tuple[list[Declaration], Token | None]:
        """Parse declarations up to and including the closing '}'."""
        declarations: list[Declaration] = []
        while True:
            token = self.peek()
            if token.kind is TokenKind.RBRACE:
                return declarations, self.next()
            if token.kind is TokenKind.EOF:
                self.error("expected '}' before end of input", token)
                return declarations, None
            if token.kind is TokenKind.SEMICOLON:
                self.next()
                continue
            declaration = self.parse_declaration()
            if declaration is not None:
                declarations.append(declaration)

    # ---- declarations ----

    def parse_declaration(self) -> Declaration | None:
        name = self.peek()
        if name.kind is not TokenKind.IDENTIFIER:
            self.error(f"expected property name, found {name.describe()}", name)
            self.recover_declaration()
            return None
        self.next()

        separator = self.peek()
        if separator.kind is not TokenKind.PROPERTY_SEPARATOR:
            self.error(
                f"expected ':' after property {name.lexeme!r}, found {separator.describe()}",
                separator,
            )
            self.recover_declaration()
            return None
        self.next()

        values: list[Token] = []
        while True:
            token = self.peek()
            if token.is_value:
                values.append(self.next())
            elif token.kind in _VALUE_SEPARATORS and values and values[-1].is_value:
                values.append(self.next())
            else:
                break
        token = self.peek()
        if not values or not values[-1].is_value:
            self.error(
                f"expected value for property {name.lexeme!r}, found {token.describe()}",
                token,
            )
            self.recover_declaration()
            return None

        important = False
        if token.kind is TokenKind.EXCLAMATION:
            self.next()
            word = self.peek()
            if word.kind is not TokenKind.IDENTIFIER or word.lexeme.lower() != "important":
                self.error(f"expected 'important' after '!', found {word.describe()}", word)
                self.recover_declaration()
                return None
            self.next()
            important = True

        last = self.previous
        terminator = self.peek()
        if terminator.kind is TokenKind.SEMICOLON:
            self.next()
        elif terminator.kind not in (TokenKind.RBRACE, TokenKind.EOF):
            self.error(
                f"expected ';' or '}}' after value of {name.lexeme!r}, "
                f"found {terminator.describe()}",
                terminator,
            )
            self.recover_declaration()
            return None

        return Declaration(
            property=name.lexeme,
            value_tokens=tuple(values),
            start=name.start,
            length=last.end - name.start,
            property_token=name,
            important=important,
        )

    # ---- selectors ----

    def parse_selector_group(self) -> tuple[SelectorChain, ...] | None:
        chains: list[SelectorChain] = []
        while True:
            chain = self.parse_chain()
            if chain is None:
                self.recover_selector()
                return None
            chains.append(chain)
            if self.at(TokenKind.COMMA):
                self.next()
                continue
            if self.at(TokenKind.LBRACE):
                return tuple(chains)
            token = self.peek()
            self.error(f"expected ',' or '{{' after selector, found {token.describe()}", token)
            self.recover_selector()
            return None

    def parse_chain(self) -> SelectorChain | None:
        selector = self.parse_selector()
        if selector is None:
            return None
        selectors: list[Selector] = []
        while True:
            token = self.peek()
            if token.kind is TokenKind.COMBINATOR:
                self.next()
                combinator = token.combinator
            elif token.kind in _SELECTOR_START:
                combinator = Combinator.DESCENDANT
            else:
                break
            following = self.parse_selector()
            if following is None:
                return None
            selectors.append(replace(selector, combinator=combinator))
            selector = following
        selectors.append(selector)
        return SelectorChain(selectors=tuple(selectors))

    def parse_selector(self) -> Selector | None:
        first = self.peek()
        if first.kind not in _SELECTOR_START:
            self.error(f"expected selector, found {first.describe()}", first)
            return None

        type_name: str | None = None
        id_: str | None = None
        classes: list[str] = []
        pseudo: list[PseudoState] = []
        sub_control: Token | None = None
        attributes: list[AttributeSelector] = []

        if first.kind in (TokenKind.IDENTIFIER, TokenKind.STAR):
            type_name = self.next().lexeme

        while True:
            token = self.peek()
            if token.kind is TokenKind.HASH_ID:
                if id_ is not None:
                    self.error(f"selector already has id '#{id_}'", token)
                    return None
                id_ = self.next().lexeme[1:]
            elif token.kind is TokenKind.DOT:
                name = self.qualifier_name(self.next(), "class name")
                if name is None:
                    return None
                if name.lexeme not in classes:
                    classes.append(name.lexeme)
            elif token.kind is TokenKind.COLON:
                anchor = self.next()
                negated = False
                if self.at(TokenKind.EXCLAMATION) and self.peek().start == anchor.end:
                    anchor = self.next()
                    negated = True
                name = self.qualifier_name(anchor, "pseudo-state")
                if name is None:
                    return None
                pseudo.append(PseudoState(name=name.lexeme, negated=negated, token=name))
            elif token.kind is TokenKind.DOUBLE_COLON:
                if sub_control is not None:
                    self.error(
                        f"selector already has sub-control '::{sub_control.lexeme}'", token
                    )
                    return None
                name = self.qualifier_name(self.next(), "sub-control")
                if name is None:
                    return None
                sub_control = name
            elif token.kind is TokenKind.LBRACKET:
                attribute = self.parse_attribute()
                if attribute is None:
                    return None
                attributes.append(attribute)
            else:
                break

        last = self.previous
        return Selector(
            type_name=type_name,
            id=id_,
            classes=tuple(classes),
            pseudo=tuple(pseudo),
            sub_control_token=sub_control,
            attributes=tuple(attributes),
            start=first.start,
            length=last.end - first.start,
        )

    def qualifier_name(self, punctuation: Token, what: str) -> Token | None:
        """The identifier directly following *punctuation*, with no gap."""
        token = self.peek()
        if token.kind is not TokenKind.IDENTIFIER or token.start != punctuation.end:
            self.error(
                f"expected {what} immediately after {punctuation.lexeme!r}, "
                f"found {token.describe()}",
                token,
            )
            return None
        return self.next()

    def parse_attribute(self) -> AttributeSelector | None:
        self.next()
        name = self.peek()
        if name.kind is not TokenKind.IDENTIFIER:
            self.error(f"expected attribute name, found {name.describe()}", name)
            return None
        self.next()

        operator: str | None = None
        value: str | None = None
        if self.at(TokenKind.ATTRIBUTE_OPERATOR):
            operator = self.next().lexeme
            token = self.peek()
            if token.kind is TokenKind.STRING:
                value = self.next().lexeme[1:-1]
            elif token.kind is TokenKind.IDENTIFIER:
                value = self.next().lexeme
            else:
                self.error(f"expected attribute value, found {token.describe()}", token)
                return None

        close = self.peek()
        if close.kind is not TokenKind.RBRACKET:
            self.error(f"expected ']', found {close.describe()}", close)
            return None
        self.next()
        return AttributeSelector(name=name.lexeme, operator=operator, value=value)
