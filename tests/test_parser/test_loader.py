"""Tests for building token trees from JSON-compatible data."""

import json
from pathlib import Path

import pytest

from doodlecss.model.tokens import (
    Argument,
    CondToken,
    FuncNode,
    KeyframesToken,
    PseudoToken,
    RuleToken,
    TextNode,
)
from doodlecss.parser import ParseError, TokenError, load_tokens

FIXTURES = Path(__file__).parent.parent / "fixtures"


class TestRuleTokens:
    def test_string_value_is_parsed(self):
        (token,) = load_tokens([{"type": "rule", "property": "color", "value": "red, blue"}])
        assert isinstance(token, RuleToken)
        assert token.property == "color"
        assert token.value == ((TextNode("red"),), (TextNode("blue"),))

    def test_structured_value(self):
        data = [
            {
                "type": "rule",
                "property": "color",
                "value": [[{"type": "text", "value": "red"}]],
            }
        ]
        (token,) = load_tokens(data)
        assert token.value == ((TextNode("red"),),)

    def test_structured_func_node(self):
        data = [
            {
                "type": "rule",
                "property": "width",
                "value": [
                    [
                        {"type": "func", "name": "@index", "arguments": [], "position": 3},
                        {"type": "text", "value": "px"},
                    ]
                ],
            }
        ]
        (token,) = load_tokens(data)
        func = token.value[0][0]
        assert isinstance(func, FuncNode)
        assert func.name == "@index"
        assert func.position == 3

    def test_missing_value_is_empty(self):
        (token,) = load_tokens([{"type": "rule", "property": "color"}])
        assert token.value == ()

    def test_nested_styles_for_use(self):
        data = [
            {
                "type": "rule",
                "property": "@use",
                "value": "",
                "styles": [{"type": "rule", "property": "color", "value": "red"}],
            }
        ]
        (token,) = load_tokens(data)
        assert len(token.styles) == 1


class TestBlockTokens:
    def test_pseudo(self):
        data = [
            {
                "type": "pseudo",
                "selector": ":host",
                "styles": [{"type": "rule", "property": "background", "value": "blue"}],
            }
        ]
        (token,) = load_tokens(data)
        assert isinstance(token, PseudoToken)
        assert token.selector == ":host"
        assert token.styles[0].property == "background"

    def test_cond_string_arguments(self):
        data = [
            {
                "type": "cond",
                "name": "@nth",
                "arguments": ["2n+1"],
                "styles": [{"type": "rule", "property": "color", "value": "red"}],
            }
        ]
        (token,) = load_tokens(data)
        assert isinstance(token, CondToken)
        assert token.arguments == (Argument((TextNode("2n+1"),)),)

    def test_cluster_argument_object(self):
        data = [
            {
                "type": "cond",
                "name": "@at",
                "arguments": [{"nodes": [{"type": "text", "value": "1"}], "cluster": True}],
            }
        ]
        (token,) = load_tokens(data)
        assert token.arguments[0].cluster is True

    def test_keyframes(self):
        data = [
            {
                "type": "keyframes",
                "name": "spin",
                "steps": [
                    {"name": "from", "styles": [{"type": "rule", "property": "opacity", "value": "0"}]},
                    {"name": "to", "styles": [{"type": "rule", "property": "opacity", "value": "1"}]},
                ],
            }
        ]
        (token,) = load_tokens(data)
        assert isinstance(token, KeyframesToken)
        assert [step.name for step in token.steps] == ["from", "to"]


class TestErrors:
    def test_top_level_must_be_list(self):
        with pytest.raises(TokenError, match=r"^\$: expected a list"):
            load_tokens({"type": "rule"})

    def test_unknown_type_reports_path(self):
        with pytest.raises(TokenError) as exc:
            load_tokens([{"type": "rule", "property": "a"}, {"type": "bogus"}])
        assert exc.value.path == "$[1]"

    def test_missing_property(self):
        with pytest.raises(TokenError, match="property"):
            load_tokens([{"type": "rule", "value": "red"}])

    def test_pseudo_only_allows_rules(self):
        data = [
            {
                "type": "pseudo",
                "selector": ":hover",
                "styles": [{"type": "pseudo", "selector": ":focus", "styles": []}],
            }
        ]
        with pytest.raises(TokenError) as exc:
            load_tokens(data)
        assert exc.value.path == "$[0].styles[0]"

    def test_bad_expression_is_token_error(self):
        with pytest.raises(TokenError) as exc:
            load_tokens([{"type": "rule", "property": "color", "value": "@pick(red"}])
        assert exc.value.path == "$[0].value"

    def test_token_error_is_parse_error(self):
        with pytest.raises(ParseError):
            load_tokens(["not a token"])


class TestFixtureFiles:
    def test_basic_fixture_loads(self):
        data = json.loads((FIXTURES / "basic.json").read_text())
        tokens = load_tokens(data)
        assert len(tokens) == 4
