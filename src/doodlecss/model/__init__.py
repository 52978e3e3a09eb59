"""doodlecss model layer -- public type re-exports."""

from doodlecss.model.context import Context
from doodlecss.model.grid import Coordinate, GridSize
from doodlecss.model.result import CompileResult, Styles
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
    func,
    text,
)

__all__ = [
    # tokens
    "TextNode",
    "FuncNode",
    "Argument",
    "ValueNode",
    "ValueGroup",
    "RuleToken",
    "PseudoToken",
    "CondToken",
    "KeyframeStep",
    "KeyframesToken",
    "Token",
    "text",
    "func",
    # grid
    "GridSize",
    "Coordinate",
    # context
    "Context",
    # result
    "Styles",
    "CompileResult",
]
