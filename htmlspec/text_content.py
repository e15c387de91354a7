"""Text content elements that structure blocks of the document body."""

from __future__ import annotations

from htmlspec.model import AttrType, Category, ElementSpec, attr, element

_LIST_CHILDREN = ("li", "script", "template")


def _flow_container(tag: str, *categories: Category) -> ElementSpec:
    return element(tag, categories, child_categories=[Category.FLOW])


def _phrasing_container(tag: str) -> ElementSpec:
    return element(
        tag, [Category.FLOW, Category.PALPABLE], child_categories=[Category.PHRASING]
    )


def elements() -> tuple[ElementSpec, ...]:
    """Specs for block quotes, divisions, lists, figures, paragraphs and rules."""
    return (
        element(
            "blockquote",
            [Category.FLOW, Category.SECTIONING, Category.PALPABLE],
            child_categories=[Category.FLOW],
            attributes=["cite"],
        ),
        _flow_container("dd"),
        _flow_container("div", Category.FLOW, Category.PALPABLE),
        element(
            "dl",
            [Category.FLOW, Category.PALPABLE],
            child_tags=["script", "template", "div", "dt", "dd"],
        ),
        _flow_container("dt"),
        _flow_container("figcaption"),
        element(
            "figure",
            [Category.FLOW, Category.SECTIONING, Category.PALPABLE],
            child_tags=["figcaption"],
            child_categories=[Category.FLOW],
        ),
        element("hr", [Category.FLOW]),
        _flow_container("li"),
        element(
            "ol",
            [Category.FLOW, Category.PALPABLE],
            child_tags=_LIST_CHILDREN,
            attributes=[
                attr("reversed", AttrType.BOOL),
                attr("start", AttrType.U32),
                "type_",
            ],
        ),
        _phrasing_container("p"),
        _phrasing_container("pre"),
        element("ul", [Category.FLOW, Category.PALPABLE], child_tags=_LIST_CHILDREN),
    )