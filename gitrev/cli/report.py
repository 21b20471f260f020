"""Console report: banner, usage block and final status."""

from __future__ import annotations

import typer

from .. import __version__
from ..core.errors import ErrorType

USAGE = """\
Replaces revision information in a tagged text file.

GitRev <RepositoryPath> <SourceFile> <DestinationFile>

Tags:
    $WCREVNUM$        Revision number
    $WCREVID$         Short revision hash
    $WCBRANCH$        Current branch
    $WCTAG$           Tag (version) of working copy
    $WCREV$           Working copy revision
    $WCDATE$          Current date in ISO format
    $WCDATE2$         Current date in yyyy-MM-dd format
    $WCYEAR$          Current year
"""


def banner() -> str:
    return f"GitRev v{__version__} by realloc.dev (https://github.com/realloc-dev/gitrev)"


def print_banner() -> None:
    typer.echo(banner())
    typer.echo("")


def print_result(error: ErrorType) -> int:
    """Print the status for ``error`` and return the process exit code."""
    if error is ErrorType.NONE:
        typer.echo("Done!")
    else:
        typer.echo(USAGE)
        typer.echo(f"Error: {error.description}")
    return error.exit_code
