import pytest
from qpath._component import (
    CURRENT,
    EMPTY,
    PARENT,
    Current,
    Empty,
    Item,
    Parent,
    classify,
    component_from_raw,
    raw_value,
)


def test_classify_current():
    assert classify(".") == CURRENT
    assert isinstance(classify("."), Current)


def test_classify_parent():
    assert classify("..") == PARENT
    assert isinstance(classify(".."), Parent)


def test_classify_empty():
    assert classify("") == EMPTY
    assert isinstance(classify(""), Empty)


@pytest.mark.parametrize("raw", ["usr", "...", ".hidden", "'.'", "\\.", " ."])
def test_classify_item(raw):
    component = classify(raw)
    assert component == Item(raw)
    assert component.name == raw


def test_empty_segment_is_never_empty_item():
    assert classify("") != Item("")


@pytest.mark.parametrize(
    "component, raw",
    [(CURRENT, "."), (PARENT, ".."), (EMPTY, ""), (Item("bin"), "bin")],
)
def test_raw_property_and_raw_value(component, raw):
    assert component.raw == raw
    assert raw_value(component) == raw


@pytest.mark.parametrize("raw", [".", "..", "", "a b", "'x/y'"])
def test_raw_value_round_trip(raw):
    assert raw_value(component_from_raw(raw)) == raw


def test_raw_value_rejects_foreign_object():
    with pytest.raises(TypeError):
        raw_value("usr")  # type: ignore[arg-type]


def test_components_are_immutable():
    item = Item("a")
    with pytest.raises(AttributeError):
        item.name = "b"  # type: ignore[misc]


def test_components_are_hashable():
    assert {CURRENT, Current(), Item("a"), Item("a")} == {CURRENT, Item("a")}
