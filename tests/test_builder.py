import pytest

from patternkit.builder import Director, House, HouseBuilder, WoodenHouseBuilder, main


def test_director_builds_wooden_house():
    house = Director().create_house(WoodenHouseBuilder())
    assert house == House("Wooden Walls", "Wooden Roof", "Wooden Door")


def test_show_of_wooden_house():
    house = Director().create_house(WoodenHouseBuilder())
    assert house.show() == "Wooden Walls, Wooden Roof, Wooden Door"


def test_director_returns_builders_house():
    builder = WoodenHouseBuilder()
    assert Director().create_house(builder) is builder.house


def test_steps_set_only_their_part():
    builder = WoodenHouseBuilder()
    builder.build_roof()
    assert builder.house.roof == "Wooden Roof"
    assert builder.house.walls == ""
    assert builder.house.door == ""


def test_show_joins_fields():
    assert House("a", "b", "c").show() == "a, b, c"


def test_house_builder_is_abstract():
    with pytest.raises(TypeError):
        HouseBuilder()


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Wooden Walls, Wooden Roof, Wooden Door\n"