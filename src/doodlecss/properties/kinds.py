"""Property classification driving the rule composer's post-processing."""

from __future__ import annotations

from enum import Enum

from doodlecss.properties.transforms import TRANSFORMS


class PropertyKind(Enum):
    """Properties the rule composer treats specially.

    ``DIRECTIVE`` covers every other ``@``-marked property that has a
    transform; everything else, unknown directives included, is ``PLAIN``.
    """

    PLAIN = "plain"
    ANIMATION = "animation"
    ANIMATION_NAME = "animation-name"
    CONTENT = "content"
    TRANSITION = "transition"
    CLIP_PATH = "clip-path"
    WIDTH = "width"
    HEIGHT = "height"
    GRID = "@grid"
    PLACE_CELL = "@place-cell"
    USE = "@use"
    DIRECTIVE = "@"

    @classmethod
    def of(cls, prop: str) -> PropertyKind:
        try:
            kind = cls(prop)
        except ValueError:
            kind = None
        if kind is not None and kind not in (cls.PLAIN, cls.DIRECTIVE):
            return kind
        if prop in TRANSFORMS:
            return cls.DIRECTIVE
        return cls.PLAIN

    @property
    def is_animation(self) -> bool:
        return self in (PropertyKind.ANIMATION, PropertyKind.ANIMATION_NAME)

    @property
    def is_size(self) -> bool:
        return self in (PropertyKind.WIDTH, PropertyKind.HEIGHT)

    @property
    def is_directive(self) -> bool:
        return self in (
            PropertyKind.GRID,
            PropertyKind.PLACE_CELL,
            PropertyKind.USE,
            PropertyKind.DIRECTIVE,
        )
