"""Configuration for the course registry."""

import os
from pathlib import Path
from typing import Literal, get_args

from dotenv import load_dotenv
from pydantic import BaseModel, Field

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


def _parse_bool(value: str) -> bool | None:
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


class RegistryConfig(BaseModel):
    """Registry configuration with Pydantic validation."""

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="course_registry.log")
    log_level: LogLevel = Field(default="DEBUG")  # log file threshold

    # Startup
    load_sample_data: bool = Field(default=True)

    # Display
    sort_students: bool = Field(default=True)

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]
        if "LOG_LEVEL" in os.environ:
            level = os.environ["LOG_LEVEL"].strip().upper()
            if level in get_args(LogLevel):  # Keep default if invalid
                config_dict["log_level"] = level

        for env_var, field in (
            ("LOAD_SAMPLE_DATA", "load_sample_data"),
            ("SORT_STUDENTS", "sort_students"),
        ):
            if env_var in os.environ:
                parsed = _parse_bool(os.environ[env_var])
                if parsed is not None:  # Keep default if invalid
                    config_dict[field] = parsed

        return cls(**config_dict)
