"""Pure formatting functions for display output."""

from rich.markup import escape


def format_courses(courses: list[str]) -> str:
    """Format a course list for display.

    Args:
        courses: Course names in enrollment order.

    Returns:
        Bracketed, comma-separated string (e.g., "[Go, Databases]"), or "[]".
    """
    if not courses:
        return "[]"
    return "[" + ", ".join(courses) + "]"


def format_course_count(course: str, count: int) -> str:
    """Format one course statistics line (e.g., "Go → 2").

    Course names are escaped so user input is never read as Rich markup.
    """
    return f"{escape(course)} → {count}"
