"""Pydantic models for registry data."""

from course_registry.models.student import Student

__all__ = ["Student"]
