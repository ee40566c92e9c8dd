"""Flyweight: shared chair types, with seat and student kept outside."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChairType:
    """The shared, intrinsic state of a chair."""

    design: str
    color: str
    material: str

    def display(self, seat_number: int, student_name: str) -> str:
        """Describe a seat using this chair type."""
        return (
            f"Seat No: {seat_number}, Student: {student_name}, "
            f"Design: {self.design}, Color: {self.color}, Material: {self.material}"
        )


class ChairFactory:
    """Hands out one shared ChairType per design, colour and material."""

    def __init__(self) -> None:
        self._chairs: dict[tuple[str, str, str], ChairType] = {}

    def get_chair(self, design: str, color: str, material: str) -> ChairType:
        key = (design, color, material)
        chair = self._chairs.get(key)
        if chair is None:
            chair = self._chairs[key] = ChairType(design, color, material)
        return chair

    def __len__(self) -> int:
        return len(self._chairs)


def main(argv=None) -> int:
    """Seat four students on one shared chair type."""
    factory = ChairFactory()
    chair = factory.get_chair("Modern Classroom Chair", "Brown", "Wood")
    for seat, student in enumerate(["Amit", "Ravi", "Pramod", "David"], start=1):
        print(chair.display(seat, student))
    return 0