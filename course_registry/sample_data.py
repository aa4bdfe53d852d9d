"""Initial students loaded when the console starts."""

import logging

from course_registry.models.student import Student
from course_registry.registry import Registry

logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    {"id": 1, "name": "Alice", "courses": ["Go", "Databases"]},
    {"id": 2, "name": "Bob", "courses": ["Go"]},
    {"id": 3, "name": "Charlie", "courses": []},
]


def load_sample_students(registry: Registry) -> int:
    """Add the sample students to a registry.

    Returns:
        Number of students added.
    """
    for data in SAMPLE_STUDENTS:
        registry.add_student(Student.model_validate(data))
    logger.debug(f"Loaded {len(SAMPLE_STUDENTS)} sample students")
    return len(SAMPLE_STUDENTS)
