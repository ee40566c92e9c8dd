import pytest

from patternkit.factory import Bike, Car, Vehicle, VehicleFactory, main


def test_create_car():
    vehicle = VehicleFactory.create_vehicle("car")
    assert isinstance(vehicle, Car)
    assert vehicle.drive() == "Driving the car"


def test_create_bike():
    vehicle = VehicleFactory.create_vehicle("bike")
    assert isinstance(vehicle, Bike)
    assert vehicle.drive() == "Driving the bike"


def test_each_call_makes_new_vehicle():
    first = VehicleFactory.create_vehicle("car")
    second = VehicleFactory.create_vehicle("car")
    assert first is not second
    assert first.drive() == second.drive()


@pytest.mark.parametrize("name", ["truck", "Car", "", " car"])
def test_unknown_type_raises(name):
    with pytest.raises(ValueError):
        VehicleFactory.create_vehicle(name)


def test_vehicle_is_abstract():
    with pytest.raises(TypeError):
        Vehicle()


def test_main_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Driving the car\n"


def test_main_bike(capsys):
    assert main(["bike"]) == 0
    assert capsys.readouterr().out == "Driving the bike\n"


def test_main_unknown(capsys):
    assert main(["boat"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "boat" in captured.err