"""texcli - Quick LaTeX document scaffolder.

Renders a LaTeX template with title, author and date, lays out the
workspace on disk and opens the result in an editor.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
