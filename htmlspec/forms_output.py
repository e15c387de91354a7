"""Form elements for choices and results: option groups, options, outputs and progress bars."""

from __future__ import annotations

from htmlspec.model import AttrType, Category, ElementSpec, attr, element


def elements() -> tuple[ElementSpec, ...]:
    """Specs for ``<optgroup>``, ``<option>``, ``<output>`` and ``<progress>``."""
    return (
        element(
            "optgroup",
            child_tags=["option"],
            attributes=[attr("disabled", AttrType.BOOL), "label"],
        ),
        element(
            "option",
            attributes=[
                attr("disabled", AttrType.BOOL),
                "label",
                attr("selected", AttrType.BOOL),
                "value",
            ],
            text_only=True,
        ),
        element(
            "output",
            [
                Category.FLOW,
                Category.PHRASING,
                Category.LISTED,
                Category.LABELABLE,
                Category.RESETTABLE,
                Category.FORM_ASSOCIATED,
                Category.PALPABLE,
            ],
            child_categories=[Category.PHRASING],
            attributes=["for_", "form", "name"],
        ),
        element(
            "progress",
            [Category.FLOW, Category.PHRASING, Category.LABELABLE, Category.PALPABLE],
            child_categories=[Category.PHRASING],
            attributes=[attr("max", AttrType.F32), attr("value", AttrType.F32)],
        ),
    )