"""Lark Transformer that converts a value-expression parse tree into value-groups."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer

from doodlecss.model.tokens import Argument, FuncNode, TextNode, ValueGroup, ValueNode
from doodlecss.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "value.lark"


def _normalize(items: list[object]) -> tuple[ValueNode, ...]:
    """Flatten paren lists, merge adjacent text and trim the outer whitespace."""
    nodes: list[ValueNode] = []
    for item in items:
        for node in item if isinstance(item, list) else [item]:
            if isinstance(node, TextNode) and nodes and isinstance(nodes[-1], TextNode):
                nodes[-1] = TextNode(nodes[-1].value + node.value)
            else:
                nodes.append(node)

    if nodes and isinstance(nodes[0], TextNode):
        nodes[0] = TextNode(nodes[0].value.lstrip())
    if nodes and isinstance(nodes[-1], TextNode):
        nodes[-1] = TextNode(nodes[-1].value.rstrip())
    return tuple(n for n in nodes if not (isinstance(n, TextNode) and not n.value))


class ValueTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a tuple of value-groups."""

    def text(self, items: list[Token]) -> TextNode:
        return TextNode(str(items[0]))

    def comma(self, items: list[Token]) -> TextNode:
        return TextNode(",")

    def paren(self, items: list[object]) -> list[ValueNode]:
        inner: list[ValueNode] = []
        for item in items:
            inner.extend(item if isinstance(item, list) else [item])
        return [TextNode("("), *inner, TextNode(")")]

    def argument(self, items: list[object]) -> Argument:
        return Argument(_normalize(items))

    def func(self, items: list[object]) -> FuncNode:
        name = items[0]
        arguments = [a for a in items[1:] if isinstance(a, Argument)]
        # @fn() parses as a single empty argument
        if len(arguments) == 1 and not arguments[0].nodes:
            arguments = []
        position = getattr(name, "start_pos", 0) or 0
        return FuncNode(name=str(name), arguments=tuple(arguments), position=position)

    def group(self, items: list[object]) -> ValueGroup:
        return _normalize(items)

    def start(self, items: list[ValueGroup]) -> tuple[ValueGroup, ...]:
        return tuple(group for group in items if group)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_value(source: str) -> tuple[ValueGroup, ...]:
    """Parse a value expression into comma-separated value-groups.

    ``"@pick(red, blue) 1px, 0"`` yields two groups: a call to ``@pick``
    followed by the text ``" 1px"``, and the text ``"0"``.
    """
    if not source or not source.strip():
        return ()
    try:
        tree = _parser().parse(source)
    except Exception as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    return ValueTransformer().transform(tree)
