"""Form controls for choosing and typing: selection menus and text areas."""

from __future__ import annotations

from htmlspec.model import AttrType, Category, ElementSpec, attr, element


def elements() -> tuple[ElementSpec, ...]:
    """Specs for ``<select>`` and ``<textarea>``."""
    return (
        element(
            "select",
            [
                Category.FLOW,
                Category.PHRASING,
                Category.INTERACTIVE,
                Category.LISTED,
                Category.LABELABLE,
                Category.RESETTABLE,
                Category.SUBMITTABLE,
                Category.FORM_ASSOCIATED,
            ],
            child_tags=["option", "optgroup"],
            attributes=[
                "autocomplete",
                attr("autofocus", AttrType.BOOL),
                attr("disabled", AttrType.BOOL),
                "form",
                attr("multiple", AttrType.BOOL),
                "name",
                attr("required", AttrType.BOOL),
                "size",
            ],
        ),
        element(
            "textarea",
            [
                Category.FLOW,
                Category.PHRASING,
                Category.INTERACTIVE,
                Category.LISTED,
                Category.LABELABLE,
                Category.RESETTABLE,
                Category.SUBMITTABLE,
                Category.FORM_ASSOCIATED,
            ],
            attributes=[
                "autocomplete",
                attr("autofocus", AttrType.BOOL),
                attr("cols", AttrType.U32),
                attr("disabled", AttrType.BOOL),
                "form",
                attr("maxlength", AttrType.U32),
                attr("minlength", AttrType.U32),
                "name",
                "placeholder",
                attr("readonly", AttrType.BOOL),
                "required",
                "rows",
                "spellcheck",
                "wrap",
            ],
            text_only=True,
        ),
    )