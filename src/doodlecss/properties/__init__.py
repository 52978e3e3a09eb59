"""Property transform table, classification and vendor prefixing."""

from doodlecss.properties.kinds import PropertyKind
from doodlecss.properties.prefixer import PREFIXED_PROPERTIES, prefixer
from doodlecss.properties.transforms import (
    MAX_GRID,
    TRANSFORMS,
    GridDirective,
    TransformOptions,
    parse_grid,
    parse_size,
)

__all__ = [
    "PropertyKind",
    "PREFIXED_PROPERTIES",
    "prefixer",
    "MAX_GRID",
    "TRANSFORMS",
    "GridDirective",
    "TransformOptions",
    "parse_grid",
    "parse_size",
]
