"""Tests for the interactive menu loop."""

import io
import logging

import pytest

from cli.menu import InvalidInputError, MenuLoop, parse_student_id


def run_menu(registry, console, lines, sort_students=True):
    """Run a menu over the given input lines and return its output."""
    stream = io.StringIO("".join(f"{line}\n" for line in lines))
    MenuLoop(registry, console=console, stream=stream, sort_students=sort_students).run()
    return console.file.getvalue()


def test_parse_student_id():
    """Test unsigned integer parsing."""
    assert parse_student_id("42") == 42
    assert parse_student_id(" 7 ") == 7
    assert parse_student_id("0") == 0


@pytest.mark.parametrize("value", ["", "abc", "-1", "1.5", "+3"])
def test_parse_student_id_invalid(value):
    """Test invalid IDs are rejected."""
    with pytest.raises(InvalidInputError):
        parse_student_id(value)


def test_menu_exit(registry, console):
    """Test option 6 ends the loop."""
    output = run_menu(registry, console, ["6"])
    assert "=== Course Registry System ===" in output
    assert "1. Add Student" in output
    assert "6. Exit" in output
    assert "Exiting Course Registry System..." in output


def test_menu_exits_at_end_of_input(registry, console):
    """Test exhausted input ends the loop without choosing Exit."""
    output = run_menu(registry, console, [])
    assert "Exiting Course Registry System..." in output


def test_menu_exits_mid_prompt_at_end_of_input(registry, console):
    """Test input ending inside an option's prompts ends the loop."""
    output = run_menu(registry, console, ["1", "5"])
    assert "Exiting Course Registry System..." in output
    assert len(registry) == 0


def test_menu_add_student(registry, console):
    """Test adding a student through the menu."""
    output = run_menu(registry, console, ["1", "5", "Eve", "6"])
    assert "Student added successfully!" in output
    assert registry.get_student(5).name == "Eve"
    assert registry.get_student(5).courses == []


def test_menu_add_student_duplicate(sample_registry, console):
    """Test duplicate IDs are reported and the loop continues."""
    output = run_menu(sample_registry, console, ["1", "1", "Mallory", "6"])
    assert "Error: Student ID 1 already exists" in output
    assert sample_registry.get_student(1).name == "Alice"
    assert "Exiting Course Registry System..." in output


def test_menu_add_student_empty_name(registry, console):
    """Test an empty name is reported."""
    output = run_menu(registry, console, ["1", "5", "", "6"])
    assert "Error: Student name cannot be empty" in output
    assert len(registry) == 0


def test_menu_add_student_invalid_id(registry, console):
    """Test a non-numeric ID returns to the menu."""
    output = run_menu(registry, console, ["1", "abc", "6"])
    assert "Error: Invalid student ID: 'abc'" in output
    assert len(registry) == 0


def test_menu_enroll_and_remove(sample_registry, console):
    """Test enrolling and removing a course through the menu."""
    output = run_menu(
        sample_registry,
        console,
        ["2", "3", "Go", "3", "1", "Databases", "6"],
    )
    assert "Course enrolled successfully!" in output
    assert "Course removed successfully!" in output
    assert sample_registry.get_student(3).courses == ["Go"]
    assert sample_registry.get_student(1).courses == ["Go"]


def test_menu_enroll_errors(sample_registry, console):
    """Test enrollment errors are shown and state is unchanged."""
    output = run_menu(
        sample_registry,
        console,
        ["2", "99", "Go", "2", "1", "Go", "6"],
    )
    assert "Error: Student 99 does not exist" in output
    assert "Error: Student 1 is already enrolled in 'Go'" in output
    assert sample_registry.get_student(1).courses == ["Go", "Databases"]


def test_menu_remove_missing_course(sample_registry, console):
    """Test removing a course the student does not take."""
    output = run_menu(sample_registry, console, ["3", "2", "Databases", "6"])
    assert "Error: Course 'Databases' not found for student 2" in output
    assert sample_registry.get_student(2).courses == ["Go"]


def test_menu_error_logged(sample_registry, console, caplog):
    """Test registry errors are logged as warnings."""
    with caplog.at_level(logging.WARNING, logger="cli.menu"):
        run_menu(sample_registry, console, ["2", "99", "Go", "6"])
    assert "Registry error: Student 99 does not exist" in caplog.text


def test_menu_list_students(sample_registry, console):
    """Test listing shows students in ID order."""
    output = run_menu(sample_registry, console, ["4", "6"])
    assert "=== Students in Registry ===" in output
    assert output.index("Alice") < output.index("Bob") < output.index("Charlie")
    assert "[Go, Databases]" in output


def test_menu_list_students_empty(registry, console):
    """Test listing an empty registry."""
    output = run_menu(registry, console, ["4", "6"])
    assert "No students in registry" in output


def test_menu_course_statistics(sample_registry, console):
    """Test statistics through the menu."""
    output = run_menu(sample_registry, console, ["5", "6"])
    assert "Go → 2" in output
    assert "Databases → 1" in output


def test_menu_invalid_choice(registry, console):
    """Test out-of-range and non-numeric selections."""
    output = run_menu(registry, console, ["0", "7", "x", "6"])
    assert output.count("Invalid choice! Please select 1-6.") == 3
    assert "Exiting Course Registry System..." in output


def test_handle_choice_exit(registry, console):
    """Test handle_choice returns False only for Exit."""
    menu = MenuLoop(registry, console=console, stream=io.StringIO())
    assert menu.handle_choice("6") is False
    assert menu.handle_choice("9") is True


def test_menu_list_students_unsorted(registry, console):
    """Test sort_students=False lists students in insertion order."""
    output = run_menu(
        registry,
        console,
        ["1", "9", "Zed", "1", "2", "Amy", "4", "6"],
        sort_students=False,
    )
    assert output.index("Zed") < output.index("Amy")


def test_menu_list_students_sorted_by_id(registry, console):
    """Test sorted listing orders by ID regardless of insertion order."""
    output = run_menu(registry, console, ["1", "9", "Zed", "1", "2", "Amy", "4", "6"])
    assert output.index("Amy") < output.index("Zed")


def test_parse_student_id_max():
    """Test the largest unsigned 64-bit ID is accepted."""
    assert parse_student_id(str(2**64 - 1)) == 2**64 - 1


@pytest.mark.parametrize("value", [str(2**64), "9" * 25, "9" * 5000])
def test_parse_student_id_out_of_range(value):
    """Test IDs beyond the unsigned 64-bit range are rejected."""
    with pytest.raises(InvalidInputError):
        parse_student_id(value)


def test_menu_add_student_out_of_range_id(registry, console):
    """Test an oversized ID is reported and nothing is added."""
    output = run_menu(registry, console, ["1", str(2**64), "6"])
    assert f"Error: Invalid student ID: '{2**64}'" in output
    assert len(registry) == 0
