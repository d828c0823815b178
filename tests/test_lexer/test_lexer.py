"""Tests for the style sheet lexer."""

import pytest

from qsslint.model import Combinator, Severity, Token, TokenKind
from qsslint.parser import tokenize


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _tokens(source: str) -> list[Token]:
    tokens, diagnostics = tokenize(source)
    assert diagnostics == []
    return tokens


def _kinds(source: str) -> list[TokenKind]:
    """Token kinds without the trailing EOF."""
    tokens = _tokens(source)
    assert tokens[-1].kind is TokenKind.EOF
    return [t.kind for t in tokens[:-1]]


def _values(source: str) -> list[Token]:
    """Value tokens of the first declaration in *source*."""
    tokens = _tokens(source)
    sep = next(i for i, t in enumerate(tokens) if t.kind is TokenKind.PROPERTY_SEPARATOR)
    values = []
    for token in tokens[sep + 1:]:
        if token.kind in (TokenKind.SEMICOLON, TokenKind.RBRACE):
            break
        values.append(token)
    return values


# ---------------------------------------------------------------------------
# EOF handling
# ---------------------------------------------------------------------------


class TestEof:
    def test_empty_source_yields_only_eof(self) -> None:
        tokens = _tokens("")
        assert len(tokens) == 1
        assert tokens[0].kind is TokenKind.EOF
        assert tokens[0].start == 0
        assert tokens[0].length == 0
        assert (tokens[0].line, tokens[0].column) == (1, 1)

    def test_whitespace_and_comments_only(self) -> None:
        source = "  /* nothing */ \n\t"
        tokens = _tokens(source)
        assert [t.kind for t in tokens] == [TokenKind.EOF]
        assert tokens[0].start == len(source)


# ---------------------------------------------------------------------------
# Selector context
# ---------------------------------------------------------------------------


class TestSelectorTokens:
    def test_type_id_and_pseudo_state(self) -> None:
        assert _kinds("QPushButton#ok:hover {}") == [
            TokenKind.IDENTIFIER,
            TokenKind.HASH_ID,
            TokenKind.COLON,
            TokenKind.IDENTIFIER,
            TokenKind.LBRACE,
            TokenKind.RBRACE,
        ]

    def test_hash_id_lexeme_keeps_hash(self) -> None:
        tokens = _tokens("#okButton {}")
        assert tokens[0].kind is TokenKind.HASH_ID
        assert tokens[0].lexeme == "#okButton"

    def test_sub_control(self) -> None:
        assert _kinds("QScrollBar::handle:hover {}") == [
            TokenKind.IDENTIFIER,
            TokenKind.DOUBLE_COLON,
            TokenKind.IDENTIFIER,
            TokenKind.COLON,
            TokenKind.IDENTIFIER,
            TokenKind.LBRACE,
            TokenKind.RBRACE,
        ]

    def test_class_and_universal(self) -> None:
        assert _kinds("*.primary {}") == [
            TokenKind.STAR,
            TokenKind.DOT,
            TokenKind.IDENTIFIER,
            TokenKind.LBRACE,
            TokenKind.RBRACE,
        ]

    def test_negated_pseudo_state(self) -> None:
        assert _kinds("QPushButton:!enabled {}")[:4] == [
            TokenKind.IDENTIFIER,
            TokenKind.COLON,
            TokenKind.EXCLAMATION,
            TokenKind.IDENTIFIER,
        ]

    def test_attribute_selector(self) -> None:
        assert _kinds('QPushButton[flat="false"] {}') == [
            TokenKind.IDENTIFIER,
            TokenKind.LBRACKET,
            TokenKind.IDENTIFIER,
            TokenKind.ATTRIBUTE_OPERATOR,
            TokenKind.STRING,
            TokenKind.RBRACKET,
            TokenKind.LBRACE,
            TokenKind.RBRACE,
        ]

    def test_attribute_operators(self) -> None:
        tokens = _tokens('a[x~="1"][y|="2"] {}')
        operators = [t.lexeme for t in tokens if t.kind is TokenKind.ATTRIBUTE_OPERATOR]
        assert operators == ["~=", "|="]

    def test_hyphenated_identifier(self) -> None:
        tokens = _tokens("QTreeView::branch:has-children {}")
        assert tokens[4].lexeme == "has-children"


class TestCombinators:
    def test_whitespace_between_selectors_is_descendant(self) -> None:
        tokens = _tokens("QDialog QPushButton {}")
        assert [t.kind for t in tokens[:3]] == [
            TokenKind.IDENTIFIER,
            TokenKind.COMBINATOR,
            TokenKind.IDENTIFIER,
        ]
        assert tokens[1].lexeme == " "
        assert tokens[1].start == 7
        assert tokens[1].combinator is Combinator.DESCENDANT

    def test_whitespace_before_brace_is_dropped(self) -> None:
        assert TokenKind.COMBINATOR not in _kinds("QLabel   {}")

    def test_whitespace_around_comma_is_dropped(self) -> None:
        assert _kinds("a , b {}") == [
            TokenKind.IDENTIFIER,
            TokenKind.COMMA,
            TokenKind.IDENTIFIER,
            TokenKind.LBRACE,
            TokenKind.RBRACE,
        ]

    @pytest.mark.parametrize(
        ("source", "combinator"),
        [
            ("a > b {}", Combinator.CHILD),
            ("a>b {}", Combinator.CHILD),
            ("a + b {}", Combinator.ADJACENT_SIBLING),
            ("a ~ b {}", Combinator.GENERAL_SIBLING),
        ],
    )
    def test_explicit_combinator_suppresses_descendant(
        self, source: str, combinator: Combinator
    ) -> None:
        tokens = _tokens(source)
        combinators = [t for t in tokens if t.kind is TokenKind.COMBINATOR]
        assert len(combinators) == 1
        assert combinators[0].combinator is combinator

    def test_comment_between_selectors_is_descendant(self) -> None:
        tokens = _tokens("a/* gap */b {}")
        assert tokens[1].kind is TokenKind.COMBINATOR
        assert tokens[1].lexeme == "/* gap */"
        assert tokens[1].combinator is Combinator.DESCENDANT

    def test_whitespace_before_pseudo_state_is_descendant(self) -> None:
        assert _kinds("QWidget :hover {}")[:3] == [
            TokenKind.IDENTIFIER,
            TokenKind.COMBINATOR,
            TokenKind.COLON,
        ]

    def test_no_combinator_inside_declarations(self) -> None:
        kinds = _kinds("a { margin: 1px 2px; }")
        assert TokenKind.COMBINATOR not in kinds


# ---------------------------------------------------------------------------
# Declaration context
# ---------------------------------------------------------------------------


class TestDeclarationTokens:
    def test_declaration_kinds(self) -> None:
        assert _kinds("* { color: red; }") == [
            TokenKind.STAR,
            TokenKind.LBRACE,
            TokenKind.IDENTIFIER,
            TokenKind.PROPERTY_SEPARATOR,
            TokenKind.IDENTIFIER,
            TokenKind.SEMICOLON,
            TokenKind.RBRACE,
        ]

    def test_hash_is_color_inside_block(self) -> None:
        tokens = _tokens("#ok { color: #abc; }")
        assert tokens[0].kind is TokenKind.HASH_ID
        assert [t.kind for t in _values("#ok { color: #abc; }")] == [TokenKind.COLOR]
        assert tokens[4].lexeme == "#abc"

    def test_numbers_and_dimensions(self) -> None:
        values = _values("a { margin: 1px 2.5em -3px 0; }")
        assert [t.kind for t in values] == [TokenKind.NUMBER] * 4
        assert [t.lexeme for t in values] == ["1px", "2.5em", "-3px", "0"]

    def test_percentage(self) -> None:
        values = _values("a { opacity: 50%; }")
        assert values[0].kind is TokenKind.NUMBER
        assert values[0].lexeme == "50%"

    def test_url(self) -> None:
        values = _values("a { image: url(:/images/arrow.png); }")
        assert len(values) == 1
        assert values[0].kind is TokenKind.URL
        assert values[0].lexeme == "url(:/images/arrow.png)"

    def test_function_spans_balanced_parentheses(self) -> None:
        values = _values("a { color: rgba(0, 0, 0, 50%); }")
        assert len(values) == 1
        assert values[0].kind is TokenKind.FUNCTION
        assert values[0].lexeme == "rgba(0, 0, 0, 50%)"

    def test_gradient_colons_stay_inside_function(self) -> None:
        source = "a { background: qlineargradient(x1:0, y1:0, stop:0 white); }"
        values = _values(source)
        assert len(values) == 1
        assert values[0].kind is TokenKind.FUNCTION

    def test_strings_and_commas(self) -> None:
        values = _values('a { font-family: "Segoe UI", Arial; }')
        assert [t.kind for t in values] == [
            TokenKind.STRING,
            TokenKind.COMMA,
            TokenKind.IDENTIFIER,
        ]
        assert values[0].lexeme == '"Segoe UI"'

    def test_slash_separator(self) -> None:
        values = _values("a { font: 12px/14px Arial; }")
        assert [t.kind for t in values] == [
            TokenKind.NUMBER,
            TokenKind.SLASH,
            TokenKind.NUMBER,
            TokenKind.IDENTIFIER,
        ]
        assert values[1].lexeme == "/"

    def test_slash_before_comment(self) -> None:
        values = _values("a { font: 12px / /* leading */ 14px Arial; }")
        assert [t.lexeme for t in values] == ["12px", "/", "14px", "Arial"]

    def test_slash_in_selector_is_unexpected(self) -> None:
        _, diagnostics = tokenize("a/b {}")
        assert [d.lexeme for d in diagnostics] == ["/"]

    def test_vendor_prefixed_identifier(self) -> None:
        tokens = _tokens("a { -qt-background-role: highlight; }")
        assert tokens[2].kind is TokenKind.IDENTIFIER
        assert tokens[2].lexeme == "-qt-background-role"

    def test_important(self) -> None:
        kinds = _kinds("a { color: red !important; }")
        assert kinds[4:7] == [
            TokenKind.IDENTIFIER,
            TokenKind.EXCLAMATION,
            TokenKind.IDENTIFIER,
        ]


# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------


class TestPositions:
    def test_line_and_column(self) -> None:
        tokens = _tokens("QLabel {\n  color: red;\n}")
        color = tokens[2]
        assert color.lexeme == "color"
        assert (color.line, color.column) == (2, 3)
        closing = tokens[-2]
        assert closing.kind is TokenKind.RBRACE
        assert (closing.line, closing.column) == (3, 1)

    def test_lexemes_match_source_slices(self) -> None:
        source = (
            "QDialog > QPushButton#ok:hover, QLabel.title::text {\n"
            "  border: 1px solid rgb(1, 2, 3); /* c */ font: bold 10pt 'A B';\n"
            "}\n"
        )
        tokens = _tokens(source)
        for token in tokens:
            assert source[token.start:token.end] == token.lexeme

    def test_ranges_are_increasing_and_disjoint(self) -> None:
        source = "a b > c:hover { color: #fff; margin: 1px 2px } d e {}"
        tokens = _tokens(source)
        for before, after in zip(tokens, tokens[1:]):
            assert before.end <= after.start


# ---------------------------------------------------------------------------
# Lexical errors
# ---------------------------------------------------------------------------


class TestLexicalErrors:
    def test_unterminated_string(self) -> None:
        source = 'a { font-family: "oops; }'
        tokens, diagnostics = tokenize(source)
        assert len(diagnostics) == 1
        diag = diagnostics[0]
        assert diag.severity is Severity.LEXICAL
        assert diag.start == source.index('"')
        assert diag.start + diag.length == len(source)
        assert diag.lexeme == '"oops; }'
        # nothing after the opening quote is tokenized
        assert tokens[-2].kind is TokenKind.PROPERTY_SEPARATOR
        assert tokens[-1].kind is TokenKind.EOF

    def test_unterminated_comment(self) -> None:
        source = "a { } /* never closed"
        tokens, diagnostics = tokenize(source)
        assert len(diagnostics) == 1
        assert "comment" in diagnostics[0].message
        assert diagnostics[0].start == source.index("/*")
        assert diagnostics[0].length == len(source) - source.index("/*")
        assert [t.kind for t in tokens] == [
            TokenKind.IDENTIFIER,
            TokenKind.LBRACE,
            TokenKind.RBRACE,
            TokenKind.EOF,
        ]

    def test_unterminated_url(self) -> None:
        source = "a { image: url(:/a.png; }"
        _, diagnostics = tokenize(source)
        assert len(diagnostics) == 1
        assert diagnostics[0].start == source.index("url")
        assert diagnostics[0].start + diagnostics[0].length == len(source)

    def test_unexpected_character_continues(self) -> None:
        source = "a { color: red; } $ b { }"
        tokens, diagnostics = tokenize(source)
        assert len(diagnostics) == 1
        assert diagnostics[0].severity is Severity.LEXICAL
        assert diagnostics[0].lexeme == "$"
        assert diagnostics[0].length == 1
        assert "unexpected character" in diagnostics[0].message
        assert [t.lexeme for t in tokens if t.kind is TokenKind.IDENTIFIER][-1] == "b"
