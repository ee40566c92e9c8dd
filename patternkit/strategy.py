"""Strategy: choosing how to get to the airport."""

from __future__ import annotations

from abc import ABC, abstractmethod


class WayToAirport(ABC):
    """A way of travelling to the airport."""

    @abstractmethod
    def go_to_airport(self, amount: int) -> str:
        """Describe the trip for the given budget."""


class Bicycle(WayToAirport):
    def go_to_airport(self, amount: int) -> str:
        return f"If you have {amount}, go to airport via Bicycle."


class Bike(WayToAirport):
    def go_to_airport(self, amount: int) -> str:
        return f"If you have {amount}, go to airport via Bike."


class Car(WayToAirport):
    def go_to_airport(self, amount: int) -> str:
        return f"If you have {amount}, go to airport via Car."


class ChooseStrategy:
    """The context: travels with whichever way is currently set in ``way``."""

    def __init__(self, way: WayToAirport) -> None:
        self.way = way

    def start_journey(self, amount: int) -> list[str]:
        return ["You have started your journey!!", self.way.go_to_airport(amount)]


def main(argv=None) -> int:
    """Travel by bicycle, bike and car with growing budgets."""
    strategy = ChooseStrategy(Bicycle())
    for way, amount in ((Bicycle(), 200), (Bike(), 500), (Car(), 1000)):
        strategy.way = way
        for line in strategy.start_journey(amount):
            print(line)
    return 0