"""Builder: a director assembling a house step by step."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class House:
    """A house made of walls, a roof and a door."""

    walls: str = ""
    roof: str = ""
    door: str = ""

    def show(self) -> str:
        """Describe the house's parts."""
        return f"{self.walls}, {self.roof}, {self.door}"


class HouseBuilder(ABC):
    """Builds the parts of a house held in ``house``."""

    house: House

    @abstractmethod
    def build_walls(self) -> None:
        """Put up the walls."""

    @abstractmethod
    def build_roof(self) -> None:
        """Put on the roof."""

    @abstractmethod
    def build_door(self) -> None:
        """Fit the door."""


class WoodenHouseBuilder(HouseBuilder):
    """Builds a house entirely of wood."""

    def __init__(self) -> None:
        self.house = House()

    def build_walls(self) -> None:
        self.house.walls = "Wooden Walls"

    def build_roof(self) -> None:
        self.house.roof = "Wooden Roof"

    def build_door(self) -> None:
        self.house.door = "Wooden Door"


class Director:
    """Runs the building steps in order."""

    def create_house(self, builder: HouseBuilder) -> House:
        builder.build_walls()
        builder.build_roof()
        builder.build_door()
        return builder.house


def main(argv=None) -> int:
    """Build a wooden house and show it."""
    house = Director().create_house(WoodenHouseBuilder())
    print(house.show())
    return 0