"""Student model with Pydantic v2 validation."""

from pydantic import BaseModel, Field, field_validator

# IDs are unsigned 64-bit integers
MAX_STUDENT_ID = 2**64 - 1


class Student(BaseModel):
    """A student and the courses they are enrolled in.

    Name and course values are not checked here; the registry enforces
    non-empty names and unique courses so it can report named errors.
    """

    id: int = Field(ge=0, le=MAX_STUDENT_ID)
    name: str
    courses: list[str] = Field(default_factory=list)

    @field_validator("courses", mode="before")
    @classmethod
    def normalize_courses(cls, v):
        """Treat a missing course list as empty."""
        if v is None:
            return []
        return v

    def is_enrolled(self, course: str) -> bool:
        """Return True if the student's course list contains course."""
        return course in self.courses
