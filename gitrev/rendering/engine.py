"""Token substitution engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from ..core.errors import DestFileError, HandleFileError, SourceFileError
from ..core.models import RepositoryFacts, TimestampFacts
from .io import atomic_write_text, read_text

logger = logging.getLogger(__name__)

_Getter = Callable[[RepositoryFacts, TimestampFacts], str]

# Applied top to bottom, each replacing every occurrence in the current text.
# $WCREVNUM$ must precede $WCREV$. $WCTAG carries no closing "$", so a
# template's "$WCTAG$" renders as "<tag>$"; existing templates rely on it.
TOKENS: list[tuple[str, _Getter]] = [
    ("$WCREVNUM$", lambda repo, _: repo.revision_count),
    ("$WCREVID$", lambda repo, _: repo.commit_id),
    ("$WCBRANCH$", lambda repo, _: repo.branch),
    ("$WCTAG", lambda repo, _: repo.tag),
    ("$WCREV$", lambda repo, _: repo.revision_count),
    ("$WCDATE$", lambda _, stamp: stamp.iso_instant),
    ("$WCDATE2$", lambda _, stamp: stamp.date_only),
    ("$WCYEAR$", lambda _, stamp: stamp.year_only),
]


def build_replacements(
    facts: RepositoryFacts, stamps: TimestampFacts
) -> list[tuple[str, str]]:
    """Pair every token with its value, keeping the table order."""
    return [(token, getter(facts, stamps)) for token, getter in TOKENS]


def substitute(text: str, replacements: list[tuple[str, str]]) -> str:
    """Apply literal replacements in order.

    Args:
        text: Template text
        replacements: Ordered (token, value) pairs

    Returns:
        Text with every occurrence of every token replaced
    """
    for token, value in replacements:
        count = text.count(token)
        if count:
            logger.debug(f"Replacing {count} occurrence(s) of {token}")
            text = text.replace(token, value)
    return text


def load_template(template_path: Path) -> str:
    """Load the template text.

    Args:
        template_path: Path to the template file

    Returns:
        Template contents

    Raises:
        SourceFileError: Missing, unreadable or not valid UTF-8
    """
    try:
        return read_text(template_path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug(f"Cannot read template {template_path}: {exc}")
        raise SourceFileError(str(exc)) from exc


def write_output(output_path: Path, text: str, file_mode: int | None) -> None:
    """Write the rendered text, replacing any existing file or symlink target.

    Raises:
        DestFileError: The parent directory is missing or the path is a directory
        HandleFileError: The write itself failed
    """
    if output_path.is_dir() or not output_path.parent.is_dir():
        logger.debug(f"Destination not writable as a file: {output_path}")
        raise DestFileError(f"Cannot write to {output_path}")

    try:
        atomic_write_text(output_path, text, mode=file_mode)
    except OSError as exc:
        logger.debug(f"Writing {output_path} failed: {exc}")
        raise HandleFileError(str(exc)) from exc


def render(
    template_path: Path,
    output_path: Path,
    facts: RepositoryFacts,
    stamps: TimestampFacts,
    file_mode: int | None = None,
) -> Path:
    """Render one template to its destination.

    Args:
        template_path: Template file path
        output_path: Destination file path
        facts: Repository facts
        stamps: Date strings of this run
        file_mode: File permissions; None keeps the existing file's mode

    Returns:
        Output file path
    """
    logger.debug(f"Rendering template: {template_path}")

    text = load_template(template_path)
    rendered_text = substitute(text, build_replacements(facts, stamps))
    write_output(output_path, rendered_text, file_mode)

    logger.info(f"Rendered {template_path} → {output_path}")
    return output_path
