"""In-memory registry of students and their course enrollments."""

import logging
from collections import defaultdict

from course_registry.exceptions import (
    AlreadyEnrolledError,
    CourseNotFoundError,
    DuplicateIDError,
    EmptyCourseNameError,
    EmptyNameError,
    StudentNotFoundError,
)
from course_registry.models.student import Student

logger = logging.getLogger(__name__)


class Registry:
    """Owns every Student and is the only place enrollments change.

    Students are copied on the way in and on the way out, so callers never
    hold a reference into the registry's mapping. Every failed operation
    leaves the mapping untouched.

    Usage:
        registry = Registry()
        registry.add_student(Student(id=1, name="Alice"))
        registry.enroll_course(1, "Go")
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._students: dict[int, Student] = {}

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, student_id: object) -> bool:
        return student_id in self._students

    def add_student(self, student: Student) -> Student:
        """Store a new student.

        Args:
            student: Student to add. A missing course list is stored as empty.

        Returns:
            A copy of the stored student.

        Raises:
            DuplicateIDError: If the ID is already registered.
            EmptyNameError: If the name is empty.
            EmptyCourseNameError: If the initial course list has an empty name.
            AlreadyEnrolledError: If the initial course list repeats a course.
        """
        if student.id in self._students:
            raise DuplicateIDError(
                f"Student ID {student.id} already exists", student_id=student.id
            )

        if not student.name:
            raise EmptyNameError("Student name cannot be empty", student_id=student.id)

        seen: set[str] = set()
        for course in student.courses:
            if not course:
                raise EmptyCourseNameError(
                    "Course name cannot be empty", student_id=student.id
                )
            if course in seen:
                raise AlreadyEnrolledError(
                    f"Student {student.id} is already enrolled in '{course}'",
                    student_id=student.id,
                    course=course,
                )
            seen.add(course)

        stored = student.model_copy(deep=True)
        self._students[stored.id] = stored
        logger.info(f"Added student {stored.id} ({stored.name})")
        return stored.model_copy(deep=True)

    def enroll_course(self, student_id: int, course: str) -> Student:
        """Append a course to a student's course list.

        Raises:
            StudentNotFoundError: If the ID is not registered.
            EmptyCourseNameError: If course is empty.
            AlreadyEnrolledError: If the student already takes the course.
        """
        student = self._get(student_id)

        if not course:
            raise EmptyCourseNameError(
                "Course name cannot be empty", student_id=student_id
            )

        if student.is_enrolled(course):
            raise AlreadyEnrolledError(
                f"Student {student_id} is already enrolled in '{course}'",
                student_id=student_id,
                course=course,
            )

        updated = student.model_copy(update={"courses": [*student.courses, course]})
        self._students[student_id] = updated
        logger.info(f"Enrolled student {student_id} in '{course}'")
        return updated.model_copy(deep=True)

    def remove_course(self, student_id: int, course: str) -> Student:
        """Drop the first matching course from a student's course list.

        Raises:
            StudentNotFoundError: If the ID is not registered.
            CourseNotFoundError: If the student is not enrolled in course.
        """
        student = self._get(student_id)

        found = False
        remaining: list[str] = []
        for c in student.courses:
            if not found and c == course:
                found = True
                continue
            remaining.append(c)

        if not found:
            raise CourseNotFoundError(
                f"Course '{course}' not found for student {student_id}",
                student_id=student_id,
                course=course,
            )

        updated = student.model_copy(update={"courses": remaining})
        self._students[student_id] = updated
        logger.info(f"Removed '{course}' from student {student_id}")
        return updated.model_copy(deep=True)

    def get_student(self, student_id: int) -> Student:
        """Return a copy of one student.

        Raises:
            StudentNotFoundError: If the ID is not registered.
        """
        return self._get(student_id).model_copy(deep=True)

    def list_students(self, sort: bool = False) -> list[Student]:
        """Return copies of all students.

        Args:
            sort: Order by student ID instead of insertion order.
        """
        students = [s.model_copy(deep=True) for s in self._students.values()]
        if sort:
            students.sort(key=lambda s: s.id)
        return students

    def course_enrollment_counts(self) -> dict[str, int]:
        """Count enrolled students per course.

        Courses nobody is enrolled in do not appear in the result.
        """
        counts: dict[str, int] = defaultdict(int)
        for student in self._students.values():
            for course in student.courses:
                counts[course] += 1
        return dict(counts)

    def _get(self, student_id: int) -> Student:
        student = self._students.get(student_id)
        if student is None:
            raise StudentNotFoundError(
                f"Student {student_id} does not exist", student_id=student_id
            )
        return student
