"""Interactive text menu driving a registry."""

import logging
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from course_registry.exceptions import RegistryError
from course_registry.models.student import MAX_STUDENT_ID, Student
from course_registry.registry import Registry
from course_registry.statistics import build_enrollment_statistics
from cli.display.console import console as default_console
from cli.display.stats_renderer import StatsRenderer
from cli.display.table_renderer import StudentRenderer

logger = logging.getLogger(__name__)

MENU_OPTIONS = [
    "Add Student",
    "Enroll Course",
    "Remove Course",
    "List Students",
    "Course Statistics",
    "Exit",
]


class InvalidInputError(ValueError):
    """User input could not be parsed."""

    pass


def parse_student_id(value: str) -> int:
    """Parse an unsigned 64-bit student ID.

    Raises:
        InvalidInputError: If value is not an integer in 0..MAX_STUDENT_ID.
    """
    value = value.strip()
    # Length check first: int() refuses very long digit strings
    if (
        not value.isdecimal()
        or len(value) > len(str(MAX_STUDENT_ID))
        or int(value) > MAX_STUDENT_ID
    ):
        raise InvalidInputError(f"Invalid student ID: '{value}'")
    return int(value)


class MenuLoop:
    """Six-option console menu over an explicitly supplied registry.

    Registry errors are shown to the user and the loop carries on; only the
    Exit option or end of input stops it.
    """

    def __init__(
        self,
        registry: Registry,
        console: Console | None = None,
        stream: TextIO | None = None,
        sort_students: bool = True,
    ):
        """Initialize the menu.

        Args:
            registry: Registry the menu reads and mutates
            console: Console for prompts and output (shared console if None)
            stream: Optional text stream to read input from instead of stdin
            sort_students: List students ordered by ID
        """
        self.registry = registry
        self.console = console or default_console
        self.stream = stream
        self.sort_students = sort_students
        self.student_renderer = StudentRenderer(self.console)
        self.stats_renderer = StatsRenderer(self.console)

        self._handlers = {
            1: self.add_student,
            2: self.enroll_course,
            3: self.remove_course,
            4: self.list_students,
            5: self.course_statistics,
        }

    def run(self) -> None:
        """Show the menu until the user exits."""
        while True:
            self.render_menu()
            try:
                choice = self._ask(f"Select option (1-{len(MENU_OPTIONS)})")
                if not self.handle_choice(choice):
                    break
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break

        self.console.print("Exiting Course Registry System...")

    def render_menu(self) -> None:
        self.console.print()
        self.console.print("[bold]=== Course Registry System ===[/bold]")
        for number, label in enumerate(MENU_OPTIONS, start=1):
            self.console.print(f"{number}. {label}")

    def handle_choice(self, choice: str) -> bool:
        """Run one menu selection.

        Returns:
            False if the user chose to exit, True otherwise.
        """
        try:
            option = int(choice)
        except ValueError:
            option = None

        if option == len(MENU_OPTIONS):
            return False

        handler = self._handlers.get(option)
        if handler is None:
            self.console.print(
                f"Invalid choice! Please select 1-{len(MENU_OPTIONS)}."
            )
            return True

        try:
            handler()
        except InvalidInputError as e:
            self.console.print(f"Error: {escape(str(e))}")
        except RegistryError as e:
            logger.warning(f"Registry error: {e}")
            self.console.print(f"Error: {escape(str(e))}")
        return True

    def add_student(self) -> None:
        student_id = parse_student_id(self._ask("Enter student ID"))
        name = self._ask("Enter student name")
        self.registry.add_student(Student(id=student_id, name=name))
        self.console.print("Student added successfully!")

    def enroll_course(self) -> None:
        student_id = parse_student_id(self._ask("Enter student ID"))
        course = self._ask("Enter course name")
        self.registry.enroll_course(student_id, course)
        self.console.print("Course enrolled successfully!")

    def remove_course(self) -> None:
        student_id = parse_student_id(self._ask("Enter student ID"))
        course = self._ask("Enter course name")
        self.registry.remove_course(student_id, course)
        self.console.print("Course removed successfully!")

    def list_students(self) -> None:
        self.student_renderer.render_student_list(
            self.registry.list_students(sort=self.sort_students)
        )

    def course_statistics(self) -> None:
        self.stats_renderer.render_course_statistics(
            build_enrollment_statistics(self.registry)
        )

    def _ask(self, prompt: str) -> str:
        """Prompt for one line of input, stripped of surrounding whitespace.

        Raises:
            EOFError: When input is exhausted.
        """
        line = self.console.input(f"{prompt}: ", stream=self.stream)
        # input() raises EOFError itself; a stream signals EOF with ""
        if self.stream is not None and line == "":
            raise EOFError
        return line.strip()
