"""State: a traffic light whose behaviour depends on its current colour."""

from __future__ import annotations

from abc import ABC, abstractmethod


class State(ABC):
    """One colour of the traffic light."""

    @abstractmethod
    def change(self, light: TrafficLight) -> str:
        """Move ``light`` to the next state and describe the transition."""


class RedState(State):
    def change(self, light: TrafficLight) -> str:
        light.state = GreenState()
        return "Red -> Green"


class GreenState(State):
    def change(self, light: TrafficLight) -> str:
        light.state = YellowState()
        return "Green -> Yellow"


class YellowState(State):
    def change(self, light: TrafficLight) -> str:
        light.state = RedState()
        return "Yellow -> Red"


class TrafficLight:
    """The context: delegates changes to its current state."""

    def __init__(self, state: State) -> None:
        self.state = state

    def request_change(self) -> str:
        return self.state.change(self)


def main(argv=None) -> int:
    """Start at red and change the light four times."""
    light = TrafficLight(RedState())
    for _ in range(4):
        print(light.request_change())
    return 0