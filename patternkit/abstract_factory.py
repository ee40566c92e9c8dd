"""Abstract factory: families of matching furniture."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod


class Chair(ABC):
    """A chair that can be sat on."""

    @abstractmethod
    def sit_on(self) -> str:
        """Describe sitting on the chair."""


class Sofa(ABC):
    """A sofa that can be lain on."""

    @abstractmethod
    def lie_on(self) -> str:
        """Describe lying on the sofa."""


class ModernChair(Chair):
    def sit_on(self) -> str:
        return "Sitting on Modern Chair"


class ModernSofa(Sofa):
    def lie_on(self) -> str:
        return "Lying on Modern Sofa"


class VictorianChair(Chair):
    def sit_on(self) -> str:
        return "Sitting on Victorian Chair"


class VictorianSofa(Sofa):
    def lie_on(self) -> str:
        return "Lying on Victorian Sofa"


class FurnitureFactory(ABC):
    """Creates a chair and a sofa of one style."""

    @abstractmethod
    def create_chair(self) -> Chair:
        """Make a chair of this factory's style."""

    @abstractmethod
    def create_sofa(self) -> Sofa:
        """Make a sofa of this factory's style."""


class ModernFurnitureFactory(FurnitureFactory):
    def create_chair(self) -> Chair:
        return ModernChair()

    def create_sofa(self) -> Sofa:
        return ModernSofa()


class VictorianFurnitureFactory(FurnitureFactory):
    def create_chair(self) -> Chair:
        return VictorianChair()

    def create_sofa(self) -> Sofa:
        return VictorianSofa()


_FACTORIES = {
    "modern": ModernFurnitureFactory,
    "victorian": VictorianFurnitureFactory,
}


def main(argv=None) -> int:
    """Build a chair and a sofa of the chosen style and use them."""
    parser = argparse.ArgumentParser(description="Furniture from one factory.")
    parser.add_argument("style", nargs="?", default="modern", choices=sorted(_FACTORIES))
    args = parser.parse_args(argv)

    factory = _FACTORIES[args.style]()
    print(factory.create_chair().sit_on())
    print(factory.create_sofa().lie_on())
    return 0