import pytest

from htmlspec.forms_labels import elements
from htmlspec.model import AttrType, Category, ElementRegistry, element


@pytest.fixture
def registry():
    return ElementRegistry(elements())


def test_tags(registry):
    assert registry.names() == ["label", "legend", "meter"]


def test_label_categories(registry):
    label = registry.get("label")
    assert label.categories == frozenset(
        {
            Category.FLOW,
            Category.PHRASING,
            Category.INTERACTIVE,
            Category.FORM_ASSOCIATED,
            Category.PALPABLE,
        }
    )


def test_label_for_attribute_markup_name(registry):
    label = registry.get("label")
    assert label.attribute("for_").html_name == "for"
    assert label.attribute("for") is label.attribute("for_")


def test_label_validate_attributes(registry):
    label = registry.get("label")
    result = label.validate_attributes({"for_": "email", "form": "signup"})
    assert result == {"for": "email", "form": "signup"}


def test_label_accepts_phrasing_and_text(registry):
    label = registry.get("label")
    span = element("span", [Category.PHRASING, Category.FLOW])
    div = element("div", [Category.FLOW])
    assert label.allows_child(span) is True
    assert label.allows_child(div) is False
    assert label.allows_child("Name") is True


def test_legend_has_no_categories_or_attributes(registry):
    legend = registry.get("legend")
    assert legend.categories == frozenset()
    assert legend.attributes == ()
    with pytest.raises(KeyError):
        legend.attribute("name")


def test_meter_numeric_attributes(registry):
    meter = registry.get("meter")
    for name in ("high", "low", "optimum"):
        assert meter.attribute(name).kind is AttrType.U32
    for name in ("value", "min", "max", "form"):
        assert meter.attribute(name).kind is AttrType.STRING


def test_meter_coerces_u32(registry):
    meter = registry.get("meter")
    result = meter.validate_attributes({"low": "3", "high": 9, "value": "0.5"})
    assert result == {"low": 3, "high": 9, "value": "0.5"}


def test_meter_rejects_bad_values(registry):
    meter = registry.get("meter")
    with pytest.raises(ValueError):
        meter.validate_attributes({"optimum": -1})
    with pytest.raises(ValueError):
        meter.validate_attributes({"low": "abc"})
    with pytest.raises(TypeError):
        meter.validate_attributes({"high": True})


def test_labelable_category(registry):
    tags = [spec.tag for spec in registry.by_category(Category.LABELABLE)]
    assert tags == ["meter"]