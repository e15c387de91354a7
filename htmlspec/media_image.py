"""The ``<img>`` element for embedding images."""

from __future__ import annotations

from htmlspec.model import AttrType, Category, ElementSpec, attr, element


def elements() -> tuple[ElementSpec, ...]:
    """Spec for ``<img>``."""
    return (
        element(
            "img",
            [
                Category.FLOW,
                Category.PHRASING,
                Category.EMBEDDED,
                Category.PALPABLE,
                Category.INTERACTIVE,
            ],
            attributes=[
                "alt",
                "crossorigin",
                "decoding",
                "height",
                attr("ismap", AttrType.BOOL),
                "loading",
                "sizes",
                "src",
                "srcset",
                "width",
                "usemap",
            ],
        ),
    )