"""Enrollment statistics derived from a registry."""

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from course_registry.registry import Registry


class EnrollmentStatistics(BaseModel):
    """Aggregate enrollment figures for a registry."""

    total_students: int
    total_enrollments: int
    course_counts: dict[str, int]  # course -> enrolled students
    students_without_courses: list[int]

    @property
    def most_popular(self) -> list[str]:
        """Courses sharing the highest enrollment count, sorted by name."""
        if not self.course_counts:
            return []
        top = max(self.course_counts.values())
        return sorted(c for c, n in self.course_counts.items() if n == top)


def build_enrollment_statistics(registry: "Registry") -> EnrollmentStatistics:
    """Build enrollment statistics for a registry.

    Args:
        registry: Registry to analyze.

    Returns:
        EnrollmentStatistics computed from the registry's read operations.
    """
    students = registry.list_students()
    course_counts = registry.course_enrollment_counts()

    return EnrollmentStatistics(
        total_students=len(students),
        total_enrollments=sum(course_counts.values()),
        course_counts=course_counts,
        students_without_courses=sorted(s.id for s in students if not s.courses),
    )
