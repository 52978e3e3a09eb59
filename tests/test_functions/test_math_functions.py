"""Tests for math wrappers and the @calc evaluator."""

import math

import pytest

from doodlecss.functions import math_functions
from doodlecss.functions.calc import CalcError, evaluate
from doodlecss.model import Coordinate, GridSize


def _call(name, *args):
    coord = Coordinate(x=1, y=1, z=1, count=1, grid=GridSize())
    return math_functions.resolve(name).bind(coord)(*args)


class TestMathWrappers:
    def test_results_are_formatted_strings(self):
        assert _call("sqrt", "9") == "3"
        assert _call("pow", "2", "10") == "1024"

    def test_min_max(self):
        assert _call("min", "3", "1", "2") == "1"
        assert _call("max", "3", "1", "2") == "3"

    def test_round_is_half_up(self):
        assert _call("round", "2.5") == "3"
        assert _call("round", "-2.5") == "-2"
        assert _call("round", "1.005", "2") == "1"

    def test_sign(self):
        assert _call("sign", "-4") == "-1"
        assert _call("sign", "0") == "0"

    def test_units_are_ignored(self):
        assert _call("abs", "-10px") == "10"

    def test_no_arguments_gives_nothing(self):
        assert _call("sin") is None

    @pytest.mark.parametrize(
        "name,args",
        [("sqrt", ["-1"]), ("log", ["0"]), ("asin", ["2"]), ("exp", ["1000"])],
    )
    def test_out_of_domain_gives_nothing(self, name, args):
        assert _call(name, *args) is None

    def test_constants(self):
        assert _call("PI") == "3.141593"
        assert _call("e").startswith("2.71828")

    def test_float_formatting(self):
        assert _call("sin", str(math.pi / 2)) == "1"


class TestCalc:
    @pytest.mark.parametrize(
        "expression,expected",
        [
            ("1 + 2", 3),
            ("2 * 3 + 4", 10),
            ("2 * (3 + 4)", 14),
            ("10 / 4", 2.5),
            ("7 % 3", 1),
            ("2 ^ 3 ^ 2", 512),
            ("-3 + 5", 2),
            ("max(1, 5, 3)", 5),
            ("pi * 2", math.pi * 2),
            (".5 + .5", 1),
        ],
    )
    def test_evaluate(self, expression, expected):
        assert evaluate(expression) == pytest.approx(expected)

    @pytest.mark.parametrize("expression", ["1 +", "foo(1)", "bar", "10px + 2", "1 / 0"])
    def test_invalid_expressions(self, expression):
        with pytest.raises(CalcError):
            evaluate(expression)
