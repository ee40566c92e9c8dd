"""Factory: vehicles made by name."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod


class Vehicle(ABC):
    @abstractmethod
    def drive(self) -> str:
        """Describe driving the vehicle."""


class Car(Vehicle):
    def drive(self) -> str:
        return "Driving the car"


class Bike(Vehicle):
    def drive(self) -> str:
        return "Driving the bike"


class VehicleFactory:
    """Makes a vehicle from its type name."""

    _TYPES: dict[str, type[Vehicle]] = {"car": Car, "bike": Bike}

    @staticmethod
    def create_vehicle(vehicle_type: str) -> Vehicle:
        """Return a new vehicle; raise ValueError for an unknown type."""
        try:
            return VehicleFactory._TYPES[vehicle_type]()
        except KeyError:
            raise ValueError(f"unknown vehicle type: {vehicle_type!r}") from None


def main(argv=None) -> int:
    """Make a vehicle of the given type and drive it."""
    parser = argparse.ArgumentParser(description="Make and drive a vehicle.")
    parser.add_argument("type", nargs="?", default="car")
    args = parser.parse_args(argv)
    try:
        vehicle = VehicleFactory.create_vehicle(args.type)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(vehicle.drive())
    return 0