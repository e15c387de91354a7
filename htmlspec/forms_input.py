"""The ``<input>`` form control."""

from __future__ import annotations

from htmlspec.model import AttrType, Category, ElementSpec, attr, element


def elements() -> tuple[ElementSpec, ...]:
    """Spec for ``<input>``."""
    return (
        element(
            "input",
            [
                Category.FLOW,
                Category.LISTED,
                Category.SUBMITTABLE,
                Category.RESETTABLE,
                Category.FORM_ASSOCIATED,
                Category.PHRASING,
                Category.LABELABLE,
                Category.PALPABLE,
            ],
            attributes=[
                "accept",
                "alt",
                "autocomplete",
                attr("autofocus", AttrType.BOOL),
                "capture",
                "checked",
                "dirname",
                attr("disabled", AttrType.BOOL),
                "form",
                "formaction",
                "formenctype",
                "formmethod",
                "formnovalidate",
                "formtarget",
                "height",
                "id",
                "inputmode",
                "list",
                "max",
                "maxlength",
                "min",
                "minlength",
                attr("multiple", AttrType.BOOL),
                "name",
                "pattern",
                "placeholder",
                attr("readonly", AttrType.BOOL),
                attr("required", AttrType.BOOL),
                "size",
                "src",
                "step",
                "tabindex",
                "title",
                "type_",
                "value",
                "width",
            ],
        ),
    )