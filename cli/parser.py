"""Typer application and command routing."""

import logging

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.context import CLIContext
from cli.menu import MenuLoop

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="In-memory course registry with an interactive menu.",
    add_completion=False,
)


@app.command()
def run(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Echo registry changes (INFO logging) on the console"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show critical failures on the console"),
    ] = False,
    sample_data: Annotated[
        bool | None,
        typer.Option(
            "--sample-data/--no-sample-data",
            help="Start with the sample students (default: from LOAD_SAMPLE_DATA config)",
        ),
    ] = None,
    sort: Annotated[
        bool | None,
        typer.Option(
            "--sort/--no-sort",
            help="List students ordered by ID (default: from SORT_STUDENTS config)",
        ),
    ] = None,
) -> None:
    """Start the interactive course registry menu."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    config = ctx.config
    if sample_data is not None:
        config.load_sample_data = sample_data
    if sort is not None:
        config.sort_students = sort

    setup_logging(verbose=verbose, quiet=quiet, config=config)

    try:
        menu = MenuLoop(ctx.registry, sort_students=config.sort_students)
        if config.load_sample_data:
            menu.console.print("Initial test data loaded:")
            menu.list_students()
            menu.course_statistics()
        menu.run()
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        raise typer.Exit(1)
