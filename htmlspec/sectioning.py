"""Content sectioning elements: headings, landmarks and other document outline pieces."""

from __future__ import annotations

from htmlspec.model import Category, ElementSpec, element

_HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


def _flow_container(tag: str, *categories: Category) -> ElementSpec:
    return element(tag, categories, child_categories=[Category.FLOW])


def elements() -> tuple[ElementSpec, ...]:
    """Specs for the sectioning elements and the ``<h1>``–``<h6>`` headings."""
    headings = tuple(
        element(
            tag,
            [Category.FLOW, Category.HEADING, Category.PALPABLE],
            child_categories=[Category.PHRASING],
        )
        for tag in _HEADING_TAGS
    )
    return (
        _flow_container("address", Category.FLOW, Category.PALPABLE),
        _flow_container("article", Category.FLOW, Category.SECTIONING, Category.PALPABLE),
        _flow_container("aside", Category.FLOW, Category.SECTIONING, Category.PALPABLE),
        _flow_container("footer", Category.FLOW, Category.PALPABLE),
        _flow_container("header", Category.FLOW, Category.PALPABLE),
        *headings,
        element(
            "hgroup",
            [Category.FLOW, Category.HEADING, Category.PALPABLE],
            child_tags=_HEADING_TAGS,
        ),
        _flow_container("main", Category.FLOW, Category.PALPABLE),
        _flow_container("nav", Category.FLOW, Category.SECTIONING, Category.PALPABLE),
        _flow_container("section", Category.FLOW, Category.SECTIONING, Category.PALPABLE),
    )