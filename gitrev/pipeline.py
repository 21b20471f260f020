"""The stamping run: arguments, repository facts, substitution, output."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from .cli.parsers import parse_arguments
from .core.errors import ArgumentError
from .core.models import TimestampFacts
from .rendering import engine
from .repository import collect_facts
from .settings import Settings

logger = logging.getLogger(__name__)


def run(
    arguments: Sequence[str],
    settings: Settings,
    stamps: TimestampFacts | None = None,
) -> Path:
    """Run every stage in order, stopping at the first failure.

    Args:
        arguments: Raw positional arguments
        settings: Runtime configuration
        stamps: Date strings to use instead of the current time

    Returns:
        Destination file path

    Raises:
        GitRevError: Subclass matching the failed stage
    """
    invocation = parse_arguments(arguments)
    if invocation is None:
        raise ArgumentError(f"Expected 3 arguments, got {len(arguments)}")

    logger.debug(f"Repository: {invocation.repository_path}")
    facts = collect_facts(invocation.repository_path, settings)

    return engine.render(
        invocation.source_path,
        invocation.dest_path,
        facts,
        stamps or TimestampFacts.now(),
        file_mode=settings.file_mode,
    )
