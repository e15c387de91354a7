"""Form elements: buttons, data lists, field sets and the form itself."""

from __future__ import annotations

from htmlspec.model import AttrType, Category, ElementSpec, attr, element


def elements() -> tuple[ElementSpec, ...]:
    """Specs for ``<button>``, ``<datalist>``, ``<fieldset>`` and ``<form>``."""
    return (
        element(
            "button",
            [
                Category.FLOW,
                Category.PHRASING,
                Category.INTERACTIVE,
                Category.LISTED,
                Category.LABELABLE,
                Category.SUBMITTABLE,
                Category.PALPABLE,
            ],
            child_categories=[Category.PHRASING],
            attributes=[
                attr("autofocus", AttrType.BOOL),
                attr("disabled", AttrType.BOOL),
                "form",
                "formaction",
                "formenctype",
                "formmethod",
                attr("formnovalidate", AttrType.BOOL),
                "formtarget",
                "name",
                "type_",
                "value",
            ],
        ),
        element(
            "datalist",
            [Category.FLOW, Category.PHRASING],
            child_tags=["option"],
            child_categories=[Category.PHRASING],
        ),
        element(
            "fieldset",
            [
                Category.FLOW,
                Category.SECTIONING,
                Category.LISTED,
                Category.FORM_ASSOCIATED,
                Category.PALPABLE,
            ],
            child_tags=["legend"],
            child_categories=[Category.FLOW],
            attributes=["disabled", "form", "name"],
        ),
        element(
            "form",
            [Category.FLOW, Category.PALPABLE],
            child_categories=[Category.FLOW],
            attributes=[
                "accept_charset",
                "action",
                "autocomplete",
                "enctype",
                "method",
                attr("novalidate", AttrType.BOOL),
                "rel",
                "target",
            ],
        ),
    )