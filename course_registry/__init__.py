"""In-memory course registry."""

from course_registry.exceptions import (
    AlreadyEnrolledError,
    CourseNotFoundError,
    DuplicateIDError,
    EmptyCourseNameError,
    EmptyNameError,
    RegistryError,
    StudentNotFoundError,
)
from course_registry.models.student import Student
from course_registry.registry import Registry

__all__ = [
    "Registry",
    "Student",
    "RegistryError",
    "DuplicateIDError",
    "EmptyNameError",
    "StudentNotFoundError",
    "EmptyCourseNameError",
    "AlreadyEnrolledError",
    "CourseNotFoundError",
]
