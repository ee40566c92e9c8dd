"""Composite: departments and developers treated alike."""

from __future__ import annotations

from abc import ABC, abstractmethod

_SEPARATOR = "======================================"


class Employee(ABC):
    """Anything in the organisation that has details and a salary."""

    @abstractmethod
    def show_details(self) -> list[str]:
        """Return the lines describing this employee or group."""

    @abstractmethod
    def total_salary(self) -> int:
        """Return the salary of this employee or the sum for a group."""


class Developer(Employee):
    """A single developer: a leaf of the tree."""

    def __init__(self, name: str, salary: int) -> None:
        self.name = name
        self.salary = salary

    def show_details(self) -> list[str]:
        return [f"Developer: {self.name}, Salary: {self.salary}"]

    def total_salary(self) -> int:
        return self.salary


class Department(Employee):
    """A named group of employees, which may include other departments."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.members: list[Employee] = []

    def add(self, employee: Employee) -> None:
        self.members.append(employee)

    def show_details(self) -> list[str]:
        lines = [f"Department: {self.name}"]
        for member in self.members:
            lines.extend(member.show_details())
        lines.append(_SEPARATOR)
        return lines

    def total_salary(self) -> int:
        return sum(member.total_salary() for member in self.members)


def _department(name: str, staff: list[tuple[str, int]]) -> Department:
    department = Department(name)
    for person, salary in staff:
        department.add(Developer(person, salary))
    return department


def main(argv=None) -> int:
    """Build a small company, show it and print its total salary."""
    company = Department("Tech Company")
    company.add(
        _department(
            "Development",
            [("Pramod", 150000), ("Alice", 50000), ("Bob", 60000)],
        )
    )
    company.add(_department("HR", [("Ram", 50000), ("Bob", 60000)]))
    company.add(
        _department(
            "Operation",
            [("Arvind", 150000), ("David", 510000), ("Caprio", 600)],
        )
    )
    for line in company.show_details():
        print(line)
    print(f"Total Salary: {company.total_salary()}")
    return 0