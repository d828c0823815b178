"""Style sheet AST: selectors, declarations, rules."""

from __future__ import annotations

from dataclasses import dataclass

from qsslint.model.token import Combinator, Token


@dataclass(frozen=True)
class PseudoState:
    """A ``:state`` or ``:!state`` qualifier."""

    name: str
    negated: bool
    token: Token

    def __str__(self) -> str:
        return f"!{self.name}" if self.negated else self.name


@dataclass(frozen=True)
class AttributeSelector:
    """A ``[name]`` or ``[name<op>"value"]`` qualifier."""

    name: str
    operator: str | None = None
    value: str | None = None


@dataclass(frozen=True)
class Selector:
    """One compound selector, e.g. ``QPushButton#ok.primary:hover``.

    ``combinator`` links this selector to the next one in its chain and is
    ``None`` for the last selector.
    """

    type_name: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()
    pseudo: tuple[PseudoState, ...] = ()
    sub_control_token: Token | None = None
    attributes: tuple[AttributeSelector, ...] = ()
    combinator: Combinator | None = None
    start: int = 0
    length: int = 0

    @property
    def pseudo_states(self) -> tuple[str, ...]:
        return tuple(str(p) for p in self.pseudo)

    @property
    def sub_control(self) -> str | None:
        if self.sub_control_token is None:
            return None
        return self.sub_control_token.lexeme


@dataclass(frozen=True)
class SelectorChain:
    """Selectors joined by combinators."""

    selectors: tuple[Selector, ...]

    @property
    def subject(self) -> Selector:
        """The rightmost selector, the one the rule styles."""
        return self.selectors[-1]


@dataclass(frozen=True)
class Declaration:
    """A ``property: value;`` pair."""

    property: str
    value_tokens: tuple[Token, ...]
    start: int
    length: int
    property_token: Token | None = None
    important: bool = False

    @property
    def value_text(self) -> str:
        return " ".join(t.lexeme for t in self.value_tokens)


@dataclass(frozen=True)
class Rule:
    """A selector group with its declaration block."""

    selector_group: tuple[SelectorChain, ...]
    declarations: tuple[Declaration, ...]
    start: int = 0
    length: int = 0


@dataclass(frozen=True)
class StyleSheet:
    """A fully parsed, error-free style sheet."""

    rules: tuple[Rule, ...] = ()
