"""The full catalogue of known elements and queries over it."""

from __future__ import annotations

import functools
from typing import Union

from htmlspec import (
    embedding,
    forms_buttons,
    forms_input,
    forms_labels,
    forms_output,
    forms_select,
    interactive,
    media_area,
    media_image,
    media_video,
    sectioning,
    table,
    text_content,
)
from htmlspec.model import Category, ElementRegistry, ElementSpec

_SOURCES = (
    embedding,
    forms_buttons,
    forms_input,
    forms_labels,
    forms_output,
    forms_select,
    interactive,
    media_area,
    media_image,
    media_video,
    sectioning,
    table,
    text_content,
)


def default_registry() -> ElementRegistry:
    """Return a new registry holding every element known to the package."""
    registry = ElementRegistry()
    for source in _SOURCES:
        for spec in source.elements():
            registry.register(spec)
    return registry


@functools.lru_cache(maxsize=None)
def _shared() -> ElementRegistry:
    return default_registry()


def lookup(name: str) -> ElementSpec:
    """Return the spec for tag ``name`` (case-insensitive)."""
    return _shared().get(name)


def elements_in(category: Category) -> list[ElementSpec]:
    """All known elements in ``category``, ordered by tag."""
    return _shared().by_category(category)


def can_contain(
    parent: Union[ElementSpec, str], child: Union[ElementSpec, str]
) -> bool:
    """Whether element ``child`` may appear directly inside ``parent``.

    Both may be given as specs or tag names. A child tag the parent names
    explicitly is allowed even if it is not in the catalogue.
    """
    parent_spec = lookup(parent) if isinstance(parent, str) else parent
    if isinstance(child, str):
        if not parent_spec.text_only and child.lower() in parent_spec.child_tags:
            return True
        child = lookup(child)
    return parent_spec.allows_child(child)