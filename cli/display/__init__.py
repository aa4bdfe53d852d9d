"""Display module for rendering registry output.

This module provides renderers for the console menu:
- StudentRenderer: Student list table
- StatsRenderer: Course enrollment statistics

It also provides:
- console: Shared Rich console instance
- Formatting functions for course lists and statistics lines
"""

from cli.display.console import console
from cli.display.formatters import format_course_count, format_courses
from cli.display.stats_renderer import StatsRenderer
from cli.display.table_renderer import StudentRenderer

__all__ = [
    # Console
    "console",
    # Renderers
    "StudentRenderer",
    "StatsRenderer",
    # Formatters
    "format_courses",
    "format_course_count",
]
