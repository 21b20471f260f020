"""Command-line surface."""

from .app import main

__all__ = ["main"]
