"""Image map elements: clickable hot-spot areas and the maps that hold them."""

from __future__ import annotations

from htmlspec.model import AttrType, Category, ElementSpec, attr, element


def elements() -> tuple[ElementSpec, ...]:
    """Specs for ``<area>`` and ``<map>``."""
    return (
        element(
            "area",
            [Category.FLOW, Category.PHRASING],
            attributes=[
                "alt",
                "coords",
                attr("download", AttrType.BOOL),
                "href",
                "hreflang",
                "ping",
                "rel",
                "target",
            ],
        ),
        element(
            "map",
            [Category.FLOW, Category.PHRASING, Category.PALPABLE],
            attributes=["name"],
        ),
    )