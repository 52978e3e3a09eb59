"""Vendor-prefix expansion for properties that still need a ``-webkit-`` twin."""

from __future__ import annotations

__all__ = ["PREFIXED_PROPERTIES", "prefixer"]

PREFIXED_PROPERTIES = frozenset(
    {
        "backdrop-filter",
        "box-decoration-break",
        "clip-path",
        "mask",
        "mask-clip",
        "mask-composite",
        "mask-image",
        "mask-origin",
        "mask-position",
        "mask-repeat",
        "mask-size",
        "text-fill-color",
        "text-stroke",
        "user-select",
    }
)


def prefixer(prop: str, rule: str) -> str:
    """Prepend the ``-webkit-`` variant of *rule* when *prop* needs one."""
    if prop in PREFIXED_PROPERTIES:
        return f"-webkit-{rule} {rule}"
    return rule
