"""Lookups against the host: date, user name and documents directory."""

from __future__ import annotations

import datetime as dt
import getpass
import logging
import os
from pathlib import Path

from ..core.errors import DirectoryUnavailableError

logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "Unknown"


def today() -> str:
    """Return today's local date as ``YYYY-MM-DD``."""
    return dt.date.today().strftime("%Y-%m-%d")


def _gecos_name() -> str:
    try:
        import pwd
    except ImportError:  # Windows has no passwd database
        return ""
    try:
        gecos = pwd.getpwuid(os.getuid()).pw_gecos
    except KeyError:
        return ""
    return gecos.split(",", 1)[0].strip()


def real_name() -> str:
    """Return the invoking user's display name.

    Uses the full name from the passwd database, falling back to the login
    name.
    """
    name = _gecos_name()
    if name:
        return name
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        logger.debug("Could not resolve login name")
        return UNKNOWN_AUTHOR


def documents_dir() -> Path:
    """Return the user's documents directory.

    ``XDG_DOCUMENTS_DIR`` wins when set, otherwise ``~/Documents``.
    """
    xdg = os.environ.get("XDG_DOCUMENTS_DIR", "").strip()
    if xdg:
        return Path(os.path.expandvars(xdg)).expanduser()
    try:
        home = Path.home()
    except RuntimeError as e:
        raise DirectoryUnavailableError(
            f"Could not find Documents directory: {e}"
        ) from e
    return home / "Documents"
