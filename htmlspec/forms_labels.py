"""Form elements that caption or measure: labels, legends and meters."""

from __future__ import annotations

from htmlspec.model import AttrType, Category, ElementSpec, attr, element


def elements() -> tuple[ElementSpec, ...]:
    """Specs for ``<label>``, ``<legend>`` and ``<meter>``."""
    return (
        element(
            "label",
            [
                Category.FLOW,
                Category.PHRASING,
                Category.INTERACTIVE,
                Category.FORM_ASSOCIATED,
                Category.PALPABLE,
            ],
            child_categories=[Category.PHRASING],
            attributes=["for_", "form"],
        ),
        element(
            "legend",
            child_categories=[Category.PHRASING],
        ),
        element(
            "meter",
            [Category.FLOW, Category.PHRASING, Category.LABELABLE, Category.PALPABLE],
            child_categories=[Category.PHRASING],
            attributes=[
                "value",
                "min",
                "max",
                "form",
                attr("high", AttrType.U32),
                attr("low", AttrType.U32),
                attr("optimum", AttrType.U32),
            ],
        ),
    )