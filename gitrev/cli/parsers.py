"""CLI argument parsers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

from ..core.models import InvocationArguments

_SEPARATORS = ("/", "\\")


def strip_trailing_separator(value: str) -> str:
    """Drop exactly one trailing path separator; a bare root is kept."""
    if len(value) > 1 and value.endswith(_SEPARATORS):
        return value[:-1]
    return value


def resolve_repository_path(value: str, cwd: Path) -> Path:
    """Make a repository path absolute against ``cwd``, collapsing ``..``."""
    path = Path(strip_trailing_separator(value))
    if not path.is_absolute():
        path = cwd / path
    return Path(os.path.normpath(path))


def parse_arguments(
    values: Sequence[str], cwd: Path | None = None
) -> InvocationArguments | None:
    """Parse RepositoryPath SourceFile DestinationFile.

    Returns None unless exactly three values are given.
    """
    if len(values) != 3:
        return None
    repository, source, dest = values
    return InvocationArguments(
        repository_path=resolve_repository_path(repository, cwd or Path.cwd()),
        source_path=Path(source),
        dest_path=Path(dest),
    )
