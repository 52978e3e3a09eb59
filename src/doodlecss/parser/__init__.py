"""Value-expression parser and token loader."""

from doodlecss.parser.errors import ParseError, TokenError
from doodlecss.parser.loader import load_tokens
from doodlecss.parser.transformer import parse_value

__all__ = ["ParseError", "TokenError", "load_tokens", "parse_value"]
