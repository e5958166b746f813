"""Open a written document in an external editor."""

from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditorResult:
    """Outcome of an editor launch. Never affects the exit status."""

    ok: bool
    message: str
    returncode: int | None = None


def launch_editor(path: Path, command: str = "code") -> EditorResult:
    """Run ``command`` with ``path`` appended and wait for it to return.

    Args:
        path: File to open
        command: Editor command line, may contain arguments

    Returns:
        Editor result; launch errors are reported, not raised
    """
    try:
        argv = shlex.split(command)
    except ValueError as e:
        return EditorResult(
            ok=False, message=f"Invalid editor command {command!r}: {e}"
        )
    if not argv:
        return EditorResult(ok=False, message="No editor command configured")
    argv.append(str(path))

    logger.debug(f"Launching editor: {argv}")
    try:
        completed = subprocess.run(argv, check=False)
    except (OSError, ValueError) as e:
        logger.debug(f"Editor launch failed: {e}")
        return EditorResult(ok=False, message=f"Failed to open {argv[0]}: {e}")

    if completed.returncode != 0:
        return EditorResult(
            ok=False,
            message=f"{argv[0]} exited with status: {completed.returncode}",
            returncode=completed.returncode,
        )
    return EditorResult(
        ok=True, message=f"Opened file in {argv[0]}.", returncode=0
    )
