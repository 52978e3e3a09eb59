"""Build the immutable token tree from JSON-compatible data.

Accepted shapes::

    {"type": "rule", "property": "color", "value": "@pick(red, blue)"}
    {"type": "rule", "property": "color",
     "value": [[{"type": "text", "value": "red"}]]}
    {"type": "pseudo", "selector": ":hover", "styles": [<rule>, ...]}
    {"type": "cond", "name": "@nth", "arguments": ["2n"], "styles": [...]}
    {"type": "keyframes", "name": "spin",
     "steps": [{"name": "from", "styles": [<rule>, ...]}]}

Values and arguments may be written either as expression strings (parsed
with :func:`parse_value`) or in the structured node form.
"""

from __future__ import annotations

from typing import Any

from doodlecss.model.tokens import (
    Argument,
    CondToken,
    FuncNode,
    KeyframeStep,
    KeyframesToken,
    PseudoToken,
    RuleToken,
    TextNode,
    Token,
    ValueGroup,
    ValueNode,
)
from doodlecss.parser.errors import ParseError, TokenError
from doodlecss.parser.transformer import parse_value

__all__ = ["load_tokens"]


def _require(data: dict[str, Any], key: str, path: str) -> Any:
    if key not in data:
        raise TokenError(f"missing required key {key!r}", path)
    return data[key]


def _parse(source: str, path: str) -> tuple[ValueGroup, ...]:
    try:
        return parse_value(source)
    except ParseError as exc:
        raise TokenError(f"invalid value expression {source!r}: {exc}", path) from exc


def _load_node(data: Any, path: str) -> ValueNode:
    if not isinstance(data, dict):
        raise TokenError("value node must be an object", path)
    kind = data.get("type")
    if kind == "text":
        return TextNode(str(_require(data, "value", path)))
    if kind == "func":
        arguments = tuple(
            _load_argument(arg, f"{path}.arguments[{i}]")
            for i, arg in enumerate(data.get("arguments", []))
        )
        return FuncNode(
            name=str(_require(data, "name", path)),
            arguments=arguments,
            position=int(data.get("position", 0)),
        )
    raise TokenError(f"unknown value node type {kind!r}", path)


def _load_argument(data: Any, path: str) -> Argument:
    if isinstance(data, str):
        groups = _parse(data, path)
        nodes: list[ValueNode] = []
        for i, group in enumerate(groups):
            if i:
                nodes.append(TextNode(", "))
            nodes.extend(group)
        return Argument(tuple(nodes))
    if isinstance(data, dict) and "nodes" in data:
        nodes = [_load_node(n, f"{path}.nodes[{i}]") for i, n in enumerate(data["nodes"])]
        return Argument(tuple(nodes), cluster=bool(data.get("cluster", False)))
    if isinstance(data, list):
        return Argument(tuple(_load_node(n, f"{path}[{i}]") for i, n in enumerate(data)))
    raise TokenError("argument must be a string, a list of nodes or an object with 'nodes'", path)


def _load_value(data: Any, path: str) -> tuple[ValueGroup, ...]:
    if isinstance(data, str):
        return _parse(data, path)
    if not isinstance(data, list):
        raise TokenError("value must be a string or a list of value-groups", path)
    groups: list[ValueGroup] = []
    for i, group in enumerate(data):
        if not isinstance(group, list):
            raise TokenError("value-group must be a list of nodes", f"{path}[{i}]")
        groups.append(tuple(_load_node(n, f"{path}[{i}][{j}]") for j, n in enumerate(group)))
    return tuple(groups)


def _load_rules(data: Any, path: str) -> tuple[RuleToken, ...]:
    tokens = _load_list(data, path)
    for i, token in enumerate(tokens):
        if not isinstance(token, RuleToken):
            raise TokenError("only rule tokens are allowed here", f"{path}[{i}]")
    return tokens  # type: ignore[return-value]


def _load_list(data: Any, path: str) -> tuple[Token, ...]:
    if not isinstance(data, list):
        raise TokenError("expected a list of tokens", path)
    return tuple(_load_token(item, f"{path}[{i}]") for i, item in enumerate(data))


def _load_token(data: Any, path: str) -> Token:
    if not isinstance(data, dict):
        raise TokenError("token must be an object", path)
    kind = data.get("type")

    if kind == "rule":
        return RuleToken(
            property=str(_require(data, "property", path)),
            value=_load_value(data.get("value", []), f"{path}.value"),
            styles=_load_list(data.get("styles", []), f"{path}.styles"),
        )

    if kind == "pseudo":
        return PseudoToken(
            selector=str(_require(data, "selector", path)),
            styles=_load_rules(data.get("styles", []), f"{path}.styles"),
        )

    if kind == "cond":
        arguments = tuple(
            _load_argument(arg, f"{path}.arguments[{i}]")
            for i, arg in enumerate(data.get("arguments", []))
        )
        return CondToken(
            name=str(_require(data, "name", path)),
            arguments=arguments,
            styles=_load_list(data.get("styles", []), f"{path}.styles"),
        )

    if kind == "keyframes":
        steps: list[KeyframeStep] = []
        for i, step in enumerate(data.get("steps", [])):
            step_path = f"{path}.steps[{i}]"
            if not isinstance(step, dict):
                raise TokenError("keyframe step must be an object", step_path)
            steps.append(
                KeyframeStep(
                    name=str(_require(step, "name", step_path)),
                    styles=_load_rules(step.get("styles", []), f"{step_path}.styles"),
                )
            )
        return KeyframesToken(name=str(_require(data, "name", path)), steps=tuple(steps))

    raise TokenError(f"unknown token type {kind!r}", path)


def load_tokens(data: Any) -> tuple[Token, ...]:
    """Build a token tree from a list of token objects (e.g. decoded JSON)."""
    return _load_list(data, "$")
