"""Exception hierarchy for registry operations."""


class RegistryError(Exception):
    """Base exception for registry operations."""

    def __init__(
        self,
        message: str,
        student_id: int | None = None,
        course: str | None = None,
    ):
        super().__init__(message)
        self.student_id = student_id
        self.course = course


class DuplicateIDError(RegistryError):
    """Student ID already exists."""

    pass


class EmptyNameError(RegistryError):
    """Student name is empty."""

    pass


class StudentNotFoundError(RegistryError):
    """Student ID not present in the registry."""

    pass


class EmptyCourseNameError(RegistryError):
    """Course name is empty."""

    pass


class AlreadyEnrolledError(RegistryError):
    """Student is already enrolled in the course."""

    pass


class CourseNotFoundError(RegistryError):
    """Student is not enrolled in the course."""

    pass
