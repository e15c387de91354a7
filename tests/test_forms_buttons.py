import pytest

from htmlspec.forms_buttons import elements
from htmlspec.model import AttrType, Category, element


@pytest.fixture
def specs():
    return {spec.tag: spec for spec in elements()}


def test_tags_are_exactly_the_four_elements(specs):
    assert sorted(specs) == ["button", "datalist", "fieldset", "form"]


def test_button_categories(specs):
    assert specs["button"].categories == {
        Category.FLOW,
        Category.PHRASING,
        Category.INTERACTIVE,
        Category.LISTED,
        Category.LABELABLE,
        Category.SUBMITTABLE,
        Category.PALPABLE,
    }


def test_button_accepts_phrasing_and_text(specs):
    button = specs["button"]
    span_like = element("span", [Category.PHRASING, Category.FLOW])
    block = element("div", [Category.FLOW])
    assert button.allows_child(span_like) is True
    assert button.allows_child(block) is False
    assert button.allows_child("Click me") is True


@pytest.mark.parametrize(
    "name", ["autofocus", "disabled", "formnovalidate"]
)
def test_button_bool_attributes(specs, name):
    assert specs["button"].attribute(name).kind is AttrType.BOOL


@pytest.mark.parametrize(
    "name", ["form", "formaction", "formenctype", "formmethod", "formtarget", "name", "value"]
)
def test_button_string_attributes(specs, name):
    assert specs["button"].attribute(name).kind is AttrType.STRING


def test_button_validate_attributes_uses_markup_names(specs):
    result = specs["button"].validate_attributes({"type_": "submit", "disabled": True})
    assert result == {"type": "submit", "disabled": True}


def test_button_rejects_non_bool_disabled(specs):
    with pytest.raises(TypeError):
        specs["button"].validate_attributes({"disabled": "yes"})


def test_button_unknown_attribute(specs):
    with pytest.raises(KeyError):
        specs["button"].attribute("href")


def test_datalist_children(specs):
    datalist = specs["datalist"]
    option = element("option", text_only=True)
    assert datalist.allows_child(option) is True
    assert datalist.allows_child(element("div", [Category.FLOW])) is False
    assert datalist.attributes == ()


def test_fieldset_disabled_is_a_string(specs):
    fieldset = specs["fieldset"]
    assert fieldset.attribute("disabled").kind is AttrType.STRING
    with pytest.raises(TypeError):
        fieldset.attribute("disabled").coerce(True)


def test_fieldset_accepts_legend_and_flow(specs):
    fieldset = specs["fieldset"]
    assert fieldset.allows_child(element("legend")) is True
    assert fieldset.allows_child(element("p", [Category.FLOW])) is True
    assert fieldset.in_category(Category.FORM_ASSOCIATED) is True
    assert fieldset.in_category(Category.INTERACTIVE) is False


def test_form_accept_charset_markup_name(specs):
    form = specs["form"]
    spec = form.attribute("accept_charset")
    assert spec.html_name == "accept-charset"
    assert form.attribute("accept-charset") is spec


def test_form_novalidate_is_bool(specs):
    form = specs["form"]
    assert form.attribute("novalidate").kind is AttrType.BOOL
    assert form.validate_attributes({"novalidate": False, "method": "post"}) == {
        "novalidate": False,
        "method": "post",
    }


def test_form_attribute_order(specs):
    names = [a.name for a in specs["form"].attributes]
    assert names == [
        "accept_charset",
        "action",
        "autocomplete",
        "enctype",
        "method",
        "novalidate",
        "rel",
        "target",
    ]


def test_no_element_is_text_only(specs):
    assert all(not spec.text_only for spec in specs.values())