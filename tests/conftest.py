import io

import pytest
from rich.console import Console

from course_registry.models.student import Student
from course_registry.registry import Registry
from course_registry.sample_data import load_sample_students


@pytest.fixture
def registry():
    """Create an empty registry for testing."""
    return Registry()


@pytest.fixture
def sample_registry():
    """Create a registry seeded with the sample students."""
    registry = Registry()
    load_sample_students(registry)
    return registry


@pytest.fixture
def alice():
    """A student with no courses."""
    return Student(id=1, name="Alice")


@pytest.fixture
def console():
    """Console writing plain text to an in-memory buffer."""
    return Console(file=io.StringIO(), width=120, force_terminal=False, color_system=None)
