"""Decorator: coffee with toppings wrapped around it."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod


class Coffee(ABC):
    """A drink with a description and a cost."""

    @abstractmethod
    def description(self) -> str:
        """Describe the drink."""

    @abstractmethod
    def cost(self) -> int:
        """Return the price of the drink."""


class SimpleCoffee(Coffee):
    def description(self) -> str:
        return "Simple Coffee"

    def cost(self) -> int:
        return 50


class CoffeeDecorator(Coffee, ABC):
    """A coffee that wraps another coffee."""

    def __init__(self, coffee: Coffee) -> None:
        self.wrapped = coffee


class AddMilk(CoffeeDecorator):
    def description(self) -> str:
        return self.wrapped.description() + " + Milk"

    def cost(self) -> int:
        return self.wrapped.cost() + 20


class AddSugar(CoffeeDecorator):
    def description(self) -> str:
        return self.wrapped.description() + " + Sugar"

    def cost(self) -> int:
        return self.wrapped.cost() + 10


class AddCream(CoffeeDecorator):
    def description(self) -> str:
        return self.wrapped.description() + " + Cream"

    def cost(self) -> int:
        return self.wrapped.cost() + 30


_TOPPINGS = {"milk": AddMilk, "sugar": AddSugar, "cream": AddCream}


def main(argv=None) -> int:
    """Make a coffee with the chosen toppings and print it with its cost."""
    parser = argparse.ArgumentParser(description="Coffee with toppings.")
    parser.add_argument(
        "toppings", nargs="*", choices=sorted(_TOPPINGS), default=["milk", "sugar"]
    )
    args = parser.parse_args(argv)

    coffee: Coffee = SimpleCoffee()
    for topping in args.toppings:
        coffee = _TOPPINGS[topping](coffee)
    print(coffee.description())
    print(f"Total Cost: {coffee.cost()}")
    return 0