"""Repository queries against a git working copy."""

from .facts import QUERIES, collect_facts
from .git import GitQueryError, run_git, working_directory

__all__ = ["QUERIES", "GitQueryError", "collect_facts", "run_git", "working_directory"]
