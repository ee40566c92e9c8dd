import pytest

from patternkit.composite import Department, Developer, Employee, main

SEPARATOR = "======================================"


def test_developer_details():
    assert Developer("Alice", 50000).show_details() == ["Developer: Alice, Salary: 50000"]


def test_developer_salary():
    assert Developer("Bob", 60000).total_salary() == 60000


def test_department_sums_members():
    dept = Department("Development")
    salaries = [150000, 50000, 60000]
    for i, salary in enumerate(salaries):
        dept.add(Developer(f"dev{i}", salary))
    assert dept.total_salary() == sum(salaries)


def test_empty_department_total():
    assert Department("Empty").total_salary() == 0


def test_nested_departments_total():
    inner = Department("Inner")
    inner.add(Developer("A", 100))
    inner.add(Developer("B", 250))
    outer = Department("Outer")
    outer.add(inner)
    outer.add(Developer("C", 75))
    assert outer.total_salary() == inner.total_salary() + 75


def test_department_details_structure():
    dept = Department("HR")
    dept.add(Developer("Ram", 50000))
    dept.add(Developer("Bob", 60000))
    lines = dept.show_details()
    assert lines[0] == "Department: HR"
    assert lines[-1] == SEPARATOR
    assert lines[1:3] == (
        Developer("Ram", 50000).show_details() + Developer("Bob", 60000).show_details()
    )


def test_nested_details_contain_inner_block():
    inner = Department("Inner")
    inner.add(Developer("A", 1))
    outer = Department("Outer")
    outer.add(inner)
    lines = outer.show_details()
    assert lines[1:-1] == inner.show_details()
    assert lines.count(SEPARATOR) == 2


def test_employee_is_abstract():
    with pytest.raises(TypeError):
        Employee()


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Department: Tech Company"
    assert "Developer: Pramod, Salary: 150000" in lines
    total = int(lines[-1].removeprefix("Total Salary: "))
    assert total == sum([150000, 50000, 60000, 50000, 60000, 150000, 510000, 600])
    assert lines.count(SEPARATOR) == 4