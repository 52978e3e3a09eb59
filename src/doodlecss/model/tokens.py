"""Token model: the immutable tree handed to the composition engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class TextNode:
    """Literal text inside a value expression."""

    value: str
    type: str = field(default="text", init=False)


@dataclass(frozen=True)
class Argument:
    """One argument of a function call: an ordered run of value nodes."""

    nodes: tuple[ValueNode, ...] = ()
    cluster: bool = False

    def __iter__(self):
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)


@dataclass(frozen=True)
class FuncNode:
    """A function call such as ``@pick(red, blue)``.

    ``name`` keeps the leading ``@`` marker the way it was written.
    """

    name: str
    arguments: tuple[Argument, ...] = ()
    position: int = 0
    type: str = field(default="func", init=False)

    @property
    def bare_name(self) -> str:
        return self.name[1:] if self.name.startswith("@") else self.name


ValueNode = Union[TextNode, FuncNode]
ValueGroup = tuple[ValueNode, ...]


@dataclass(frozen=True)
class RuleToken:
    """A single declaration: ``property: value-group, value-group;``."""

    property: str
    value: tuple[ValueGroup, ...] = ()
    styles: tuple[Token, ...] = ()  # nested tokens for @use
    type: str = field(default="rule", init=False)


@dataclass(frozen=True)
class PseudoToken:
    """A pseudo-selector block such as ``:hover { ... }`` or ``:host { ... }``."""

    selector: str
    styles: tuple[RuleToken, ...] = ()
    type: str = field(default="pseudo", init=False)


@dataclass(frozen=True)
class CondToken:
    """A selector-predicate block such as ``@nth(2n) { ... }``."""

    name: str
    arguments: tuple[Argument, ...] = ()
    styles: tuple[Token, ...] = ()
    type: str = field(default="cond", init=False)


@dataclass(frozen=True)
class KeyframeStep:
    name: str
    styles: tuple[RuleToken, ...] = ()


@dataclass(frozen=True)
class KeyframesToken:
    name: str
    steps: tuple[KeyframeStep, ...] = ()
    type: str = field(default="keyframes", init=False)


Token = Union[RuleToken, PseudoToken, CondToken, KeyframesToken]


def text(value: str) -> TextNode:
    return TextNode(value)


def func(name: str, *arguments: Argument | list[ValueNode] | ValueNode, position: int = 0) -> FuncNode:
    """Build a FuncNode, wrapping bare nodes or lists into Arguments."""
    args: list[Argument] = []
    for arg in arguments:
        if isinstance(arg, Argument):
            args.append(arg)
        elif isinstance(arg, (TextNode, FuncNode)):
            args.append(Argument((arg,)))
        else:
            args.append(Argument(tuple(arg)))
    if not name.startswith("@"):
        name = "@" + name
    return FuncNode(name=name, arguments=tuple(args), position=position)
