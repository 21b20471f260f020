from __future__ import annotations

import logging
import os
import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence

logger = logging.getLogger(__name__)


class GitQueryError(Exception):
    """Raised when a git query yields no usable output line."""


@contextmanager
def working_directory(path: Path) -> Iterator[Path]:
    """Switch the process working directory to ``path`` for the block.

    The previous directory is restored on every exit path.
    """
    previous = Path.cwd()
    os.chdir(path)
    try:
        yield path
    finally:
        os.chdir(previous)


def run_git(
    args: Sequence[str],
    *,
    executable: str = "git",
    timeout: float | None = None,
) -> str:
    """
    Run one git query in the current directory and return its first stdout line.
    Missing executable, non-zero exit, timeout and empty output all raise GitQueryError.
    """
    cmd = [executable, *args]
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as exc:
        raise GitQueryError(f"executable not found: {executable}") from exc
    except subprocess.TimeoutExpired as exc:
        raise GitQueryError(f"timed out after {timeout}s: {' '.join(cmd)}") from exc

    if result.stderr:
        logger.debug(f"{' '.join(cmd)} stderr: {result.stderr.strip()}")
    if result.returncode != 0:
        raise GitQueryError(f"{' '.join(cmd)} exited with status {result.returncode}")

    lines = result.stdout.splitlines()
    if not lines:
        raise GitQueryError(f"{' '.join(cmd)} produced no output")
    return lines[0]
