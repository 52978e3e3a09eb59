"""Tests for clip-path shape generators."""

import re

import pytest

from doodlecss.shapes import SHAPES, get_shape, polygon

_POINT = re.compile(r"-?[\d.]+% -?[\d.]+%")


def _points(clip: str) -> list[str]:
    return _POINT.findall(clip)


class TestPolygon:
    def test_square_points(self):
        assert _points(polygon(4)) == ["100% 50%", "50% 100%", "0% 50%", "50% 0%"]

    def test_triangle_has_three_points(self):
        assert len(_points(get_shape("triangle"))) == 3

    def test_star_has_five_points(self):
        assert len(_points(get_shape("star"))) == 5

    def test_points_stay_inside_the_cell(self):
        for value in _points(get_shape("hexagon")):
            x, y = (float(v.rstrip("%")) for v in value.split())
            assert 0 <= x <= 100
            assert 0 <= y <= 100


class TestGetShape:
    def test_every_shape_renders(self):
        for name in SHAPES:
            clip = get_shape(name)
            assert clip.startswith(("polygon(", "circle("))

    def test_unknown_shape(self):
        assert get_shape("blob") is None

    def test_siogon_sides_are_clamped(self):
        assert len(_points(get_shape("siogon", "6"))) == 6
        assert len(_points(get_shape("siogon", "50"))) == 12
        assert len(_points(get_shape("siogon", "1"))) == 3

    @pytest.mark.parametrize("name", ["hypocycloid", "clover"])
    def test_parametrized_shapes_accept_k(self, name):
        assert get_shape(name, "4") != get_shape(name, "5")

    def test_name_is_trimmed(self):
        assert get_shape(" circle ") == "circle(50%)"
