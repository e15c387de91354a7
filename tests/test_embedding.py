import pytest

from htmlspec.embedding import elements
from htmlspec.model import AttrType, Category, element


def _by_tag():
    return {spec.tag: spec for spec in elements()}


def test_tags():
    assert sorted(_by_tag()) == ["embed", "iframe", "object", "param", "picture", "source"]


def test_iframe_referrerpolicy_kind():
    iframe = _by_tag()["iframe"]
    assert iframe.attribute("referrerpolicy").kind is AttrType.REFERRER_POLICY
    assert iframe.validate_attributes({"srcdoc": "<p>hi</p>"}) == {"srcdoc": "<p>hi</p>"}


def test_object_typemustmatch_bool_and_type_spelling():
    obj = _by_tag()["object"]
    assert obj.validate_attributes({"type": "image/png", "typemustmatch": False}) == {
        "type": "image/png",
        "typemustmatch": False,
    }
    with pytest.raises(TypeError):
        obj.validate_attributes({"typemustmatch": 1})


def test_object_only_accepts_param():
    specs = _by_tag()
    assert specs["object"].allows_child(specs["param"])
    assert not specs["object"].allows_child(specs["source"])
    assert specs["object"].in_category(Category.SUBMITTABLE)


def test_picture_children():
    specs = _by_tag()
    picture = specs["picture"]
    assert picture.allows_child(specs["source"])
    assert picture.allows_child(element("img", [Category.FLOW, Category.EMBEDDED]))
    assert not picture.allows_child(specs["embed"])
    assert not picture.allows_child("text")


@pytest.mark.parametrize("tag", ["embed", "param", "source"])
def test_void_like_elements_take_no_children(tag):
    spec = _by_tag()[tag]
    assert not spec.allows_child("text")
    assert not spec.allows_child(_by_tag()["param"])


def test_embed_unknown_attribute():
    with pytest.raises(KeyError):
        _by_tag()["embed"].validate_attributes({"srcset": "a.png 1x"})