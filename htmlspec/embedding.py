"""Embedded content: plug-in content, nested browsing contexts, pictures and sources."""

from __future__ import annotations

from htmlspec.model import AttrType, Category, ElementSpec, attr, element


def elements() -> tuple[ElementSpec, ...]:
    """Specs for ``<embed>``, ``<iframe>``, ``<object>``, ``<param>``, ``<picture>``, ``<source>``."""
    return (
        element(
            "embed",
            [
                Category.FLOW,
                Category.PHRASING,
                Category.EMBEDDED,
                Category.INTERACTIVE,
                Category.PALPABLE,
            ],
            attributes=["height", "src", "type_", "width"],
        ),
        element(
            "iframe",
            [
                Category.FLOW,
                Category.PHRASING,
                Category.EMBEDDED,
                Category.INTERACTIVE,
                Category.PALPABLE,
            ],
            attributes=[
                "allow",
                "height",
                "name",
                attr("referrerpolicy", AttrType.REFERRER_POLICY),
                "sandbox",
                "src",
                "srcdoc",
                "width",
            ],
        ),
        element(
            "object",
            [
                Category.FLOW,
                Category.PHRASING,
                Category.EMBEDDED,
                Category.PALPABLE,
                Category.LISTED,
                Category.SUBMITTABLE,
                Category.INTERACTIVE,
            ],
            child_tags=["param"],
            attributes=[
                "data",
                "form",
                "height",
                "name",
                "type_",
                attr("typemustmatch", AttrType.BOOL),
                "usemap",
                "width",
            ],
        ),
        element("param", attributes=["name", "value"]),
        element(
            "picture",
            [Category.FLOW, Category.PHRASING, Category.EMBEDDED],
            child_tags=["source", "img", "script", "template"],
        ),
        element(
            "source",
            attributes=["media", "sizes", "src", "srcset", "type_"],
        ),
    )