import dataclasses

import pytest

from patternkit.flyweight import ChairFactory, ChairType, main


def test_display():
    chair = ChairType("Modern Classroom Chair", "Brown", "Wood")
    assert chair.display(1, "Amit") == (
        "Seat No: 1, Student: Amit, Design: Modern Classroom Chair, "
        "Color: Brown, Material: Wood"
    )


def test_same_key_is_shared():
    factory = ChairFactory()
    first = factory.get_chair("Modern", "Brown", "Wood")
    second = factory.get_chair("Modern", "Brown", "Wood")
    assert first is second
    assert len(factory) == 1


def test_different_keys_make_different_chairs():
    factory = ChairFactory()
    wood = factory.get_chair("Modern", "Brown", "Wood")
    metal = factory.get_chair("Modern", "Brown", "Metal")
    assert wood.material == "Wood"
    assert metal.material == "Metal"
    assert len(factory) == 2


def test_keys_do_not_collide_on_concatenation():
    factory = ChairFactory()
    first = factory.get_chair("ab", "c", "x")
    second = factory.get_chair("a", "bc", "x")
    assert (first.design, second.design) == ("ab", "a")
    assert len(factory) == 2


def test_new_factory_is_empty():
    assert len(ChairFactory()) == 0


def test_chair_type_is_immutable():
    chair = ChairType("d", "c", "m")
    with pytest.raises(dataclasses.FrozenInstanceError):
        chair.color = "Red"
    assert chair.color == "c"


def test_display_varies_only_in_extrinsic_state():
    chair = ChairType("d", "c", "m")
    one = chair.display(1, "Ravi")
    two = chair.display(2, "Ravi")
    assert one.split(", ")[1:] == two.split(", ")[1:]
    assert one.split(", ")[0] == "Seat No: 1"


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert [line.split(", ")[1] for line in lines] == [
        "Student: Amit",
        "Student: Ravi",
        "Student: Pramod",
        "Student: David",
    ]
    assert all(line.endswith("Material: Wood") for line in lines)