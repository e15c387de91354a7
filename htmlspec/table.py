"""Tabular data elements."""

from __future__ import annotations

from htmlspec.model import Category, ElementSpec, element

_ROW_GROUP_CHILDREN = ("tr",)


def _row_group(tag: str) -> ElementSpec:
    return element(tag, child_tags=_ROW_GROUP_CHILDREN)


def elements() -> tuple[ElementSpec, ...]:
    """Specs for the table, its sections, rows, cells, captions and columns."""
    return (
        element("caption", child_categories=[Category.FLOW]),
        element("col", attributes=["span"]),
        element("colgroup", child_tags=["col"], attributes=["span"]),
        element(
            "table",
            [Category.FLOW],
            child_tags=["caption", "colgroup", "thead", "tbody", "tr", "tfoot"],
        ),
        _row_group("tbody"),
        element(
            "td",
            [Category.SECTIONING],
            child_categories=[Category.FLOW],
            attributes=["colspan", "headers", "rowspan"],
        ),
        _row_group("tfoot"),
        element(
            "th",
            child_categories=[Category.FLOW],
            attributes=["abbr", "colspan", "headers", "rowspan", "scope"],
        ),
        _row_group("thead"),
        element(
            "tr",
            child_tags=["td", "th"],
            child_categories=[Category.SCRIPT_SUPPORTING],
        ),
    )