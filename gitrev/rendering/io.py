"""File I/O operations for rendering."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path


def read_text(path: Path) -> str:
    """Read a whole UTF-8 text file, keeping its line endings.

    Args:
        path: File to read
    """
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def _default_mode(path: Path) -> int:
    """Mode of the existing file, else 0o666 filtered by the umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def atomic_write_text(path: Path, text: str, mode: int | None = None) -> Path:
    """Write text to a file atomically using a temporary file.

    A symlinked destination is written through to its target. The parent
    directory must already exist.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal); None keeps the existing file's mode

    Returns:
        The file actually written
    """
    target = path.resolve() if path.is_symlink() else path
    if mode is None:
        mode = _default_mode(target)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=str(target.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
    return target
