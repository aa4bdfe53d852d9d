"""Stats renderer for course enrollment statistics."""

from rich.console import Console
from rich.markup import escape

from course_registry.statistics import EnrollmentStatistics
from cli.display.console import console as default_console
from cli.display.formatters import format_course_count


class StatsRenderer:
    """Render course enrollment statistics."""

    def __init__(self, console: Console | None = None):
        self.console = console or default_console

    def render_course_statistics(self, stats_data: EnrollmentStatistics) -> None:
        """Render per-course enrollment counts.

        Args:
            stats_data: EnrollmentStatistics computed from the registry.
        """
        if not stats_data.course_counts:
            self.console.print("No course enrollments")
            return

        self.console.print()
        self.console.print("[bold]=== Course Enrollment Statistics ===[/bold]")

        # Busiest courses first, ties by name
        for course, count in sorted(
            stats_data.course_counts.items(), key=lambda x: (-x[1], x[0])
        ):
            self.console.print(format_course_count(course, count))

        top = stats_data.most_popular
        top_count = stats_data.course_counts[top[0]]
        noun = "student" if top_count == 1 else "students"
        self.console.print(
            f"Most popular: {escape(', '.join(top))} ({top_count} {noun})"
        )

        self.console.print(
            f"[dim]{stats_data.total_students} students, "
            f"{stats_data.total_enrollments} enrollments, "
            f"{len(stats_data.students_without_courses)} without courses[/dim]"
        )
