"""Tests for selector composition and classification."""

import pytest

from doodlecss.engine.selector import (
    cell_id,
    compose_selector,
    is_cell_selector,
    is_host_selector,
    is_parent_selector,
    is_special_selector,
    normalize_host_alias,
)
from doodlecss.model import Coordinate, GridSize


def _coord(x, y, z=1):
    return Coordinate(x=x, y=y, z=z, count=1, grid=GridSize(x=4, y=4))


class TestComposeSelector:
    def test_cell_id(self):
        assert cell_id(2, 3, 1) == "cell-2-3-1"

    def test_plain(self):
        assert compose_selector(_coord(2, 3)) == "#cell-2-3-1"

    def test_with_pseudo(self):
        assert compose_selector(_coord(1, 1, 4), ":hover") == "#cell-1-1-4:hover"

    def test_unique_per_coordinate(self):
        selectors = {compose_selector(_coord(x, y)) for x in range(1, 5) for y in range(1, 5)}
        assert len(selectors) == 16

    def test_composed_selectors_are_cell_selectors(self):
        assert is_cell_selector(compose_selector(_coord(1, 1)))
        assert not is_cell_selector(":host")


class TestClassification:
    @pytest.mark.parametrize("selector", [":host", ":host:hover", ":doodle", ":doodle:hover"])
    def test_host(self, selector):
        assert is_host_selector(selector)
        assert is_special_selector(selector)

    @pytest.mark.parametrize("selector", [":container", ":parent", ":container:hover"])
    def test_parent(self, selector):
        assert is_parent_selector(selector)
        assert is_special_selector(selector)
        assert not is_host_selector(selector)

    @pytest.mark.parametrize("selector", [":hover", "::before", ":nth-child(2)", ""])
    def test_cell_pseudo_is_not_special(self, selector):
        assert not is_special_selector(selector)


class TestHostAlias:
    def test_doodle_becomes_host(self):
        assert normalize_host_alias(":doodle") == ":host"
        assert normalize_host_alias("::doodle:hover") == ":host:hover"

    def test_other_selectors_untouched(self):
        assert normalize_host_alias(":hover") == ":hover"
        assert normalize_host_alias(":host") == ":host"
