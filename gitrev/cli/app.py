"""Main CLI application."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from .. import pipeline
from ..core.errors import ErrorType, GitRevError
from ..settings import get_settings
from .report import print_banner, print_result

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="gitrev",
    help="Replaces revision information in a tagged text file.",
    add_completion=False,
)


@app.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "help_option_names": []},
)
def stamp(
    arguments: Annotated[
        Optional[list[str]],
        typer.Argument(
            help="Repository path, template file and destination file.",
            metavar="<RepositoryPath> <SourceFile> <DestinationFile>",
            show_default=False,
        ),
    ] = None,
) -> None:
    """Write SourceFile to DestinationFile with $WC...$ tokens replaced."""
    settings = get_settings()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if settings.verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    print_banner()

    error = ErrorType.NONE
    try:
        pipeline.run(arguments or [], settings)
    except GitRevError as exc:
        logger.debug(f"{type(exc).__name__}: {exc}")
        error = exc.error_type

    raise typer.Exit(code=print_result(error))


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
