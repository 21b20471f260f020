"""GitRev - revision information stamper for git working copies.

Replaces $WC...$ tokens in a template file with facts queried from git.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
