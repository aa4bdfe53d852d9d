"""CLI package for the course registry console."""

import logging
import sys

from course_registry.config import RegistryConfig

# Registry mutations log at INFO; registry errors the menu already shows the
# user log at WARNING. The console handler sits above both unless verbose.
CONSOLE_LEVEL_DEFAULT = logging.ERROR
CONSOLE_LEVEL_VERBOSE = logging.INFO
CONSOLE_LEVEL_QUIET = logging.CRITICAL


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: RegistryConfig | None = None
) -> None:
    """Configure a session log file and a stderr console handler.

    The file receives everything at or above ``config.log_level`` so a
    session's enrollments and rejected operations can be reviewed afterwards.
    The console stays quiet by default because the menu prints its own
    success and error lines.

    Args:
        verbose: If True, echo registry mutations (INFO) on the console
        quiet: If True, only critical failures reach the console
        config: Optional RegistryConfig for log directory/filename/level
    """
    if config is None:
        config = RegistryConfig.from_env()

    config.log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(config.log_dir / config.log_filename)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    file_handler.setLevel(config.log_level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    if quiet:
        console_handler.setLevel(CONSOLE_LEVEL_QUIET)
    elif verbose:
        console_handler.setLevel(CONSOLE_LEVEL_VERBOSE)
    else:
        console_handler.setLevel(CONSOLE_LEVEL_DEFAULT)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
