"""Table renderer for student lists."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from course_registry.models.student import Student
from cli.display.console import console as default_console
from cli.display.formatters import format_courses


class StudentRenderer:
    """Render registry students.

    Uses Rich's Table class for consistent, well-formatted output.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or default_console

    def render_student_list(self, students: list[Student]) -> None:
        """Render a list of students as a table.

        Args:
            students: Students to display, in display order.
        """
        if not students:
            self.console.print("No students in registry")
            return

        self.console.print()
        self.console.print("[bold]=== Students in Registry ===[/bold]")

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("ID", justify="right", style="dim")
        table.add_column("NAME", style="cyan")
        table.add_column("COURSES")

        for student in students:
            # Text cells keep user input and brackets out of markup parsing
            table.add_row(
                str(student.id),
                Text(student.name),
                Text(format_courses(student.courses)),
            )

        self.console.print(table)
