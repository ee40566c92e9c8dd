"""Facade: one hotel desk in front of cleaning, decoration and food."""

from __future__ import annotations

import argparse
from enum import IntEnum


class Cuisine(IntEnum):
    THAI = 1
    ITALIAN = 2
    JAPANESE = 3


class Cleaning:
    def clean_room(self) -> str:
        return "Room is cleaned"


class Decoration:
    def decorate_room(self) -> str:
        return "Room is decorated"


class FoodMenu:
    """The hotel's menus, one per cuisine."""

    def __init__(self) -> None:
        self.thai_food = {
            1: "Stir-fried rice noodles",
            2: "Hot and sour soup with shrimp",
            3: "Coconut milk-based curry with green chilies",
        }
        self.italian_food = {
            1: "Classic pizza with tomato",
            2: "Pasta with eggs",
            3: "Creamy saffron-infused rice dish",
        }
        self.japanese_food = {
            1: "Sushi",
            2: "Noodle soup with pork",
            3: "Seafood",
        }

    @staticmethod
    def _render(title: str, dishes: dict[int, str]) -> list[str]:
        lines = [title, "Ref. No.     Dish", "---------------------------"]
        lines.extend(f"{ref}    {dish}" for ref, dish in sorted(dishes.items()))
        return lines

    def italian(self) -> list[str]:
        return self._render("Italian food menu", self.italian_food)

    def thai(self) -> list[str]:
        return self._render("Thai food menu", self.thai_food)

    def japanese(self) -> list[str]:
        return self._render("Japanese food menu", self.japanese_food)


class HotelManagement:
    """The facade: guests deal only with this."""

    def __init__(self) -> None:
        self.cleaning = Cleaning()
        self.menu = FoodMenu()
        self.decoration = Decoration()

    def reception(self) -> list[str]:
        return [self.cleaning.clean_room(), self.decoration.decorate_room()]

    def order_food(self) -> list[str]:
        return self.menu.italian() + self.menu.thai() + self.menu.japanese()

    def italian_menu(self) -> list[str]:
        return self.menu.italian()

    def thai_menu(self) -> list[str]:
        return self.menu.thai()

    def japanese_menu(self) -> list[str]:
        return self.menu.japanese()


def _parse_choice(text: str) -> Cuisine | None:
    words = text.split()
    if not words:
        return None
    try:
        return Cuisine(int(words[0]))
    except ValueError:
        return None


def main(argv=None) -> int:
    """Receive a guest, ask for a cuisine and show its menu."""
    parser = argparse.ArgumentParser(description="Hotel reception.")
    parser.add_argument("choice", nargs="?", help="1 Thai, 2 Italian, 3 Japanese")
    args = parser.parse_args(argv)

    hotel = HotelManagement()
    for line in hotel.reception():
        print(line)

    print("\nSelect Cuisine:")
    print("1. Thai")
    print("2. Italian")
    print("3. Japanese")
    if args.choice is None:
        try:
            text = input("Enter your choice: ")
        except EOFError:
            text = ""
    else:
        print("Enter your choice: ", end="")
        text = args.choice

    menus = {
        Cuisine.THAI: hotel.thai_menu,
        Cuisine.ITALIAN: hotel.italian_menu,
        Cuisine.JAPANESE: hotel.japanese_menu,
    }
    cuisine = _parse_choice(text)
    if cuisine is None:
        print("Invalid choice!")
    else:
        for line in menus[cuisine]():
            print(line)
    return 0