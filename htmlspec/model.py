"""Core data model: content categories, attribute specs, element specs and a registry."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

_U32_MAX = 2**32 - 1


class Category(enum.Enum):
    """HTML content categories an element may belong to or accept as children."""

    FLOW = "flow"
    PHRASING = "phrasing"
    EMBEDDED = "embedded"
    INTERACTIVE = "interactive"
    PALPABLE = "palpable"
    LISTED = "listed"
    SUBMITTABLE = "submittable"
    LABELABLE = "labelable"
    RESETTABLE = "resettable"
    FORM_ASSOCIATED = "form-associated"
    SECTIONING = "sectioning"
    HEADING = "heading"
    METADATA = "metadata"
    SCRIPT_SUPPORTING = "script-supporting"


class AttrType(enum.Enum):
    """The kind of value an attribute holds."""

    STRING = "string"
    BOOL = "bool"
    U32 = "u32"
    F32 = "f32"
    REFERRER_POLICY = "referrer-policy"


@dataclass(frozen=True)
class AttributeSpec:
    """One attribute an element accepts, with the kind of value it takes."""

    name: str
    kind: AttrType = AttrType.STRING

    @property
    def html_name(self) -> str:
        """The attribute's name as written in markup."""
        return self.name.rstrip("_").replace("_", "-")

    def coerce(self, value: Any) -> Any:
        """Check ``value`` against this attribute's kind and return it normalised."""
        kind = self.kind
        if kind is AttrType.BOOL:
            if not isinstance(value, bool):
                raise TypeError(f"attribute {self.html_name!r} takes a bool, got {value!r}")
            return value
        if kind in (AttrType.STRING, AttrType.REFERRER_POLICY):
            if not isinstance(value, str):
                raise TypeError(f"attribute {self.html_name!r} takes a string, got {value!r}")
            return value
        if kind is AttrType.U32:
            return self._coerce_u32(value)
        return self._coerce_f32(value)

    def _coerce_u32(self, value: Any) -> int:
        if isinstance(value, bool):
            raise TypeError(f"attribute {self.html_name!r} takes an integer, got {value!r}")
        if isinstance(value, str):
            text = value.strip()
            if not text.isdigit():
                raise ValueError(f"attribute {self.html_name!r}: {value!r} is not an integer")
            value = int(text)
        if not isinstance(value, int):
            raise TypeError(f"attribute {self.html_name!r} takes an integer, got {value!r}")
        if not 0 <= value <= _U32_MAX:
            raise ValueError(f"attribute {self.html_name!r}: {value} is out of range")
        return value

    def _coerce_f32(self, value: Any) -> float:
        if isinstance(value, bool):
            raise TypeError(f"attribute {self.html_name!r} takes a number, got {value!r}")
        if isinstance(value, str):
            try:
                value = float(value.strip())
            except ValueError:
                raise ValueError(
                    f"attribute {self.html_name!r}: {value!r} is not a number"
                ) from None
        if not isinstance(value, (int, float)):
            raise TypeError(f"attribute {self.html_name!r} takes a number, got {value!r}")
        result = float(value)
        if not math.isfinite(result):
            raise ValueError(f"attribute {self.html_name!r}: {value!r} is not finite")
        return result


@dataclass(frozen=True)
class ElementSpec:
    """Description of one HTML element: its categories, permitted children and attributes."""

    tag: str
    categories: frozenset[Category] = frozenset()
    child_tags: frozenset[str] = frozenset()
    child_categories: frozenset[Category] = frozenset()
    attributes: tuple[AttributeSpec, ...] = ()
    text_only: bool = False
    _by_name: dict[str, AttributeSpec] = field(
        default_factory=dict, init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        index: dict[str, AttributeSpec] = {}
        for spec in self.attributes:
            index[spec.name] = spec
            index[spec.html_name] = spec
        self._by_name.update(index)

    def attribute(self, name: str) -> AttributeSpec:
        """Return the attribute called ``name`` (source or markup spelling)."""
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"<{self.tag}> has no attribute {name!r}") from None

    def in_category(self, category: Category) -> bool:
        """Whether this element belongs to ``category``."""
        return category in self.categories

    def allows_child(self, child: Union[ElementSpec, str]) -> bool:
        """Whether ``child`` may appear inside this element.

        ``child`` is either another element's spec or a string of text content.
        """
        if isinstance(child, str):
            return self.text_only or bool(
                self.child_categories & {Category.PHRASING, Category.FLOW}
            )
        if self.text_only:
            return False
        return child.tag in self.child_tags or bool(child.categories & self.child_categories)

    def validate_attributes(self, attributes: Mapping[str, Any]) -> dict[str, Any]:
        """Check every attribute and return them keyed by markup name, values coerced."""
        result: dict[str, Any] = {}
        for name, value in attributes.items():
            spec = self.attribute(name)
            result[spec.html_name] = spec.coerce(value)
        return result


class ElementRegistry:
    """A collection of element specs looked up by tag name."""

    def __init__(self, specs: Iterable[ElementSpec] = ()) -> None:
        self._specs: dict[str, ElementSpec] = {}
        for spec in specs:
            self.register(spec)

    def register(self, spec: ElementSpec) -> None:
        """Add ``spec``; a tag may be registered only once."""
        if spec.tag in self._specs:
            raise ValueError(f"<{spec.tag}> is already registered")
        self._specs[spec.tag] = spec

    def get(self, name: str) -> ElementSpec:
        """Return the spec for tag ``name``."""
        try:
            return self._specs[name.lower()]
        except KeyError:
            raise KeyError(f"unknown element <{name}>") from None

    def by_category(self, category: Category) -> list[ElementSpec]:
        """All registered elements in ``category``, ordered by tag."""
        return sorted(
            (spec for spec in self._specs.values() if category in spec.categories),
            key=lambda spec: spec.tag,
        )

    def names(self) -> list[str]:
        """All registered tag names, sorted."""
        return sorted(self._specs)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._specs

    def __iter__(self) -> Iterator[ElementSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)


def attr(name: str, kind: AttrType = AttrType.STRING) -> AttributeSpec:
    """Shorthand for building an :class:`AttributeSpec`."""
    return AttributeSpec(name, kind)


def element(
    tag: str,
    categories: Iterable[Category] = (),
    child_tags: Iterable[str] = (),
    child_categories: Iterable[Category] = (),
    attributes: Iterable[Union[AttributeSpec, str]] = (),
    text_only: bool = False,
) -> ElementSpec:
    """Build an :class:`ElementSpec`; plain strings in ``attributes`` become string attributes."""
    attrs = tuple(a if isinstance(a, AttributeSpec) else attr(a) for a in attributes)
    seen: set[str] = set()
    for spec in attrs:
        if spec.name in seen:
            raise ValueError(f"<{tag}> declares attribute {spec.name!r} twice")
        seen.add(spec.name)
    return ElementSpec(
        tag=tag,
        categories=frozenset(categories),
        child_tags=frozenset(child_tags),
        child_categories=frozenset(child_categories),
        attributes=attrs,
        text_only=text_only,
    )