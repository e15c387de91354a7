"""Interactive elements: disclosure widgets, dialogs and menus."""

from __future__ import annotations

from htmlspec.model import AttrType, Category, ElementSpec, attr, element

_HEADINGS = ("h1", "h2", "h3", "h4", "h5", "h6", "hgroup")


def elements() -> tuple[ElementSpec, ...]:
    """Specs for ``<details>``, ``<dialog>``, ``<menu>`` and ``<summary>``."""
    return (
        element(
            "details",
            [Category.FLOW, Category.SECTIONING, Category.INTERACTIVE, Category.PALPABLE],
            child_tags=["summary"],
            child_categories=[Category.FLOW],
            attributes=[attr("open", AttrType.BOOL)],
        ),
        element(
            "dialog",
            [Category.FLOW, Category.SECTIONING],
            child_categories=[Category.FLOW],
            attributes=[attr("open", AttrType.BOOL)],
        ),
        element(
            "menu",
            [Category.FLOW, Category.PALPABLE],
            child_categories=[Category.FLOW],
        ),
        element(
            "summary",
            child_tags=_HEADINGS,
            child_categories=[Category.PHRASING],
        ),
    )