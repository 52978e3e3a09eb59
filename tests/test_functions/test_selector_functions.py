"""Tests for the selector predicates used by cond blocks."""

import pytest

from doodlecss.functions import nth_matches, selector_functions
from doodlecss.model import Context, Coordinate, GridSize


def _coord(**kwargs):
    defaults = dict(x=1, y=1, z=1, count=1, grid=GridSize(x=4, y=4), context=Context(seed=2))
    defaults.update(kwargs)
    return Coordinate(**defaults)


def _test(name, coord, *args):
    return selector_functions.resolve(name).bind(coord)(*args)


class TestNthMatches:
    @pytest.mark.parametrize(
        "formula,matching",
        [
            ("3", [3]),
            ("2n", [2, 4, 6, 8]),
            ("2n+1", [1, 3, 5, 7]),
            ("odd", [1, 3, 5, 7]),
            ("even", [2, 4, 6, 8]),
            ("3n - 1", [2, 5, 8]),
            ("n+5", [5, 6, 7, 8]),
            ("-n+3", [1, 2, 3]),
            ("0n+4", [4]),
        ],
    )
    def test_formulas(self, formula, matching):
        assert [i for i in range(1, 9) if nth_matches(formula, i)] == matching

    def test_garbage_never_matches(self):
        assert not any(nth_matches("banana", i) for i in range(1, 9))


class TestPredicates:
    def test_nth_uses_count(self):
        assert _test("nth", _coord(count=4), "2n")
        assert not _test("@nth", _coord(count=3), "2n")

    def test_nth_accepts_several_formulas(self):
        assert _test("nth", _coord(count=5), "1", "5")

    def test_row_and_col(self):
        coord = _coord(x=2, y=3)
        assert _test("row", coord, "2")
        assert not _test("row", coord, "3")
        assert _test("col", coord, "odd")

    def test_depth(self):
        assert _test("depth", _coord(z=3, grid=GridSize(z=5)), "3")

    def test_at(self):
        assert _test("at", _coord(x=2, y=3), "2", "3")
        assert not _test("at", _coord(x=2, y=3), "3", "2")

    def test_at_single_argument_means_diagonal(self):
        assert _test("at", _coord(x=2, y=2), "2")

    def test_at_without_arguments(self):
        assert _test("at", _coord()) is False

    def test_even_odd(self):
        assert _test("even", _coord(count=2))
        assert _test("odd", _coord(count=3))
        assert not _test("odd", _coord(count=2))

    def test_random_extremes(self):
        assert _test("random", _coord(), "1") is True
        assert _test("random", _coord(), "0") is False

    def test_random_is_seeded(self):
        first = [_test("random", _coord(context=Context(seed=9))) for _ in range(4)]
        second = [_test("random", _coord(context=Context(seed=9))) for _ in range(4)]
        assert first == second
