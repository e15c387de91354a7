# htmlspec

A catalog of HTML elements described as plain Python data: the content
categories each element belongs to, which children it permits, and the
attributes it accepts together with their value types.

## Installation

```
pip install .
```

## Usage

```python
from htmlspec.catalog import lookup, elements_in, can_contain
from htmlspec.model import Category

button = lookup("button")                  # tag names are case-insensitive
button.in_category(Category.INTERACTIVE)   # True
button.attribute("disabled").coerce(True)  # True; a non-bool raises TypeError

can_contain("table", "tr")     # True
can_contain("ul", "div")       # False

[spec.tag for spec in elements_in(Category.HEADING)]
# ['h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'hgroup']
```

### The catalogue

`htmlspec.catalog` offers:

- `default_registry()` – a fresh `ElementRegistry` holding every known element.
- `lookup(name)` – the `ElementSpec` for a tag; `KeyError` if unknown.
- `elements_in(category)` – all elements in a `Category`, sorted by tag.
- `can_contain(parent, child)` – whether `child` may appear directly inside
  `parent`. Either may be a spec or a tag name. A tag the parent lists
  explicitly among its children is accepted even when that tag is not in the
  catalogue (for example `can_contain("ul", "script")`).

The element definitions are grouped in the modules `embedding`,
`forms_buttons`, `forms_input`, `forms_labels`, `forms_output`,
`forms_select`, `interactive`, `media_area`, `media_image`, `media_video`,
`sectioning`, `table` and `text_content`; each has an `elements()` function
returning a tuple of specs.

### The model

`htmlspec.model` defines:

- `Category` – content categories (flow, phrasing, embedded, interactive,
  palpable, listed, submittable, labelable, resettable, form-associated,
  sectioning, heading, metadata, script-supporting).
- `AttrType` – `STRING`, `BOOL`, `U32`, `F32`, `REFERRER_POLICY`.
- `AttributeSpec` – an attribute's name and kind. `html_name` gives the
  markup spelling (a trailing underscore is dropped and other underscores
  become hyphens, so `type_` is `type` and `accept_charset` is
  `accept-charset`). `coerce(value)` checks a value:
  - `BOOL` takes only `bool`;
  - `STRING` and `REFERRER_POLICY` take only `str`;
  - `U32` takes an int or a string of digits in the range 0 to 2³²−1;
  - `F32` takes an int, float or numeric string, which must be finite.

  Values of the wrong type raise `TypeError`; malformed or out-of-range
  values raise `ValueError`.
- `ElementSpec` – `tag`, `categories`, `child_tags`, `child_categories`,
  `attributes` and `text_only`, with:
  - `attribute(name)` – look up an attribute by either spelling;
  - `in_category(category)`;
  - `allows_child(child)` – `child` is a spec, or a string standing for text
    content (text is allowed in text-only elements and in elements that take
    phrasing or flow content; text-only elements accept no element children);
  - `validate_attributes(mapping)` – returns a dict keyed by markup names
    with coerced values; an unknown attribute raises `KeyError`.
- `ElementRegistry` – `register(spec)` (a duplicate tag raises `ValueError`),
  `get(name)`, `by_category(category)`, `names()`, plus `in`, iteration and
  `len()`.
- `attr(name, kind)` and `element(tag, categories, child_tags,
  child_categories, attributes, text_only)` – helpers for building specs;
  plain strings in `attributes` become string attributes, and declaring the
  same attribute twice raises `ValueError`.

```python
from htmlspec.model import AttrType, Category, ElementRegistry, attr, element

registry = ElementRegistry([
    element("widget", [Category.FLOW], child_categories=[Category.PHRASING],
            attributes=["label", attr("count", AttrType.U32)]),
])
registry.get("widget").validate_attributes({"count": "3"})   # {'count': 3}
```

## What it does not do

The package describes elements; it does not build, parse or render HTML
documents, and it does not check whole trees. Content rules that depend on
context (for instance "no interactive descendants" or categories that apply
only when an attribute is present) are not enforced. The catalogue covers
embedded, form, interactive, media, sectioning, table and text-content
elements; document metadata and scripting elements such as `<head>`,
`<title>`, `<meta>`, `<link>`, `<style>`, `<script>`, `<canvas>` and
`<noscript>`, and inline text elements such as `<a>` and `<span>`, are not in
it.

## Running the tests

```
pip install .[test]
pytest
```