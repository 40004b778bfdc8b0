import pytest

from msstyle.identifiers import Identifier
from msstyle.property import StyleProperty
from msstyle.tree import StyleClass, StylePart, StyleState


def _int_prop(name_id: int, value: int) -> StyleProperty:
    prop = StyleProperty()
    prop.initialize(Identifier.INT, name_id)
    prop.update_integer(value)
    return prop


def test_add_property_returns_same_object_and_keeps_order():
    state = StyleState(state_id=1, state_name="Normal")
    first = _int_prop(Identifier.WIDTH, 5)
    second = _int_prop(Identifier.HEIGHT, 7)
    assert state.add_property(first) is first
    state.add_property(second)
    assert list(state) == [first, second]
    assert len(state) == 2
    assert state[1] is second


def test_find_property_by_value_matches_equal_property():
    state = StyleState()
    stored = state.add_property(_int_prop(Identifier.WIDTH, 5))
    probe = _int_prop(Identifier.WIDTH, 5)
    assert state.find_property_by_value(probe) is stored


def test_find_property_by_value_misses_on_different_value():
    state = StyleState()
    state.add_property(_int_prop(Identifier.WIDTH, 5))
    assert state.find_property_by_value(_int_prop(Identifier.WIDTH, 6)) is None


def test_remove_property_removes_by_identity():
    state = StyleState()
    a = state.add_property(_int_prop(Identifier.WIDTH, 5))
    b = state.add_property(_int_prop(Identifier.WIDTH, 5))
    state.remove_property(b)
    assert state.properties == [a]
    assert state.properties[0] is a


def test_remove_missing_property_is_ignored():
    state = StyleState()
    a = state.add_property(_int_prop(Identifier.WIDTH, 5))
    state.remove_property(_int_prop(Identifier.WIDTH, 5))
    assert state.properties == [a]


def test_sort_properties_orders_by_name_id():
    state = StyleState()
    high = state.add_property(_int_prop(Identifier.HEIGHT, 1))
    low = state.add_property(_int_prop(Identifier.IMAGECOUNT, 1))
    state.sort_properties()
    assert state.properties == [low, high]


def test_add_state_keeps_existing_state_for_same_id():
    part = StylePart(part_id=1, part_name="PUSHBUTTON")
    original = part.add_state(StyleState(state_id=2, state_name="Hot"))
    duplicate = part.add_state(StyleState(state_id=2, state_name="Other"))
    assert duplicate is original
    assert part.find_state(2).state_name == "Hot"
    assert len(part) == 1


def test_find_state_missing_returns_none():
    part = StylePart()
    part.add_state(StyleState(state_id=0))
    assert part.find_state(3) is None


def test_part_iterates_states_in_id_order():
    part = StylePart()
    for state_id in (3, 0, 2):
        part.add_state(StyleState(state_id=state_id))
    assert [s.state_id for s in part] == [0, 2, 3]


def test_add_part_keeps_existing_part_for_same_id():
    cls = StyleClass(class_id=0, class_name="Button")
    original = cls.add_part(StylePart(part_id=1, part_name="PUSHBUTTON"))
    assert cls.add_part(StylePart(part_id=1, part_name="X")) is original
    assert cls.find_part(1).part_name == "PUSHBUTTON"


def test_class_iterates_parts_in_id_order_and_find_missing():
    cls = StyleClass()
    for part_id in (5, 1, 3):
        cls.add_part(StylePart(part_id=part_id))
    assert [p.part_id for p in cls] == [1, 3, 5]
    assert len(cls) == 3
    assert cls.find_part(2) is None


@pytest.mark.parametrize("index", [0, 1])
def test_nested_lookup_reaches_property(index):
    cls = StyleClass()
    part = cls.add_part(StylePart(part_id=1))
    state = part.add_state(StyleState(state_id=index))
    prop = state.add_property(_int_prop(Identifier.WIDTH, index))
    assert cls.find_part(1).find_state(index)[0] is prop