"""Command: orders carried from a waiter to a chef."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Chef:
    """The receiver that actually cooks."""

    def cook_burger(self) -> str:
        return "Chef can cook Burger!!"

    def cook_pizza(self) -> str:
        return "Chef can cook Pizza!!"


class Order(ABC):
    """A command that can be executed later."""

    @abstractmethod
    def execute(self) -> str:
        """Carry out the order."""


class BurgerOrder(Order):
    def __init__(self, chef: Chef) -> None:
        self.chef = chef

    def execute(self) -> str:
        return self.chef.cook_burger()


class PizzaOrder(Order):
    def __init__(self, chef: Chef) -> None:
        self.chef = chef

    def execute(self) -> str:
        return self.chef.cook_pizza()


class Waiter:
    """The invoker: holds one order and sends it to the kitchen."""

    def __init__(self) -> None:
        self.order: Order | None = None

    def take_order(self, order: Order) -> None:
        self.order = order

    def place_order(self) -> list[str]:
        """Send the current order; return what happened, line by line."""
        lines = ["Waiter sends the order to the kitchen!!"]
        if self.order is not None:
            lines.append(self.order.execute())
        return lines


def main(argv=None) -> int:
    """Have a waiter place a burger order and then a pizza order."""
    chef = Chef()
    waiter = Waiter()
    for order in (BurgerOrder(chef), PizzaOrder(chef)):
        waiter.take_order(order)
        for line in waiter.place_order():
            print(line)
    return 0