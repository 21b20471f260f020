"""Collection of the four repository facts."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import GitError
from ..core.models import RepositoryFacts
from ..settings import Settings
from .git import GitQueryError, run_git, working_directory

logger = logging.getLogger(__name__)

# Executed in this order. rev-list --count is not an exact revision number,
# only stable while builds come from the same repository history.
QUERIES: list[tuple[str, list[str]]] = [
    ("commit_id", ["log", "-n1", "--format=%h"]),
    ("revision_count", ["rev-list", "--count", "--all"]),
    ("branch", ["rev-parse", "--abbrev-ref", "HEAD"]),
    ("tag", ["describe", "--all", "--tags", "HEAD"]),
]


def collect_facts(repository_path: Path, settings: Settings) -> RepositoryFacts:
    """Query git inside ``repository_path`` for the revision facts.

    Args:
        repository_path: Absolute path of the working copy
        settings: Git executable and timeout to use

    Returns:
        All four facts

    Raises:
        GitError: The directory is unusable or any query fails
    """
    logger.debug(f"Querying repository: {repository_path}")

    values: dict[str, str] = {}
    try:
        with working_directory(repository_path):
            for field, args in QUERIES:
                values[field] = run_git(
                    args,
                    executable=settings.git_executable,
                    timeout=settings.git_timeout,
                )
                logger.debug(f"git {' '.join(args)} -> {values[field]!r}")
    except (GitQueryError, OSError) as exc:
        logger.debug(f"Repository query failed: {exc}")
        raise GitError(str(exc)) from exc

    return RepositoryFacts(**values)
