"""Lay out the workspace on disk and write the rendered document."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path

from ..core.errors import (
    AlreadyExistsError,
    DirectoryUnavailableError,
    WriteFailureError,
)
from ..core.models import (
    LayoutKind,
    MaterializeConfig,
    MaterializeResult,
    Separator,
    WorkspaceLayout,
)
from .io import (
    copy_if_absent,
    ensure_directory,
    exclusive_write_text,
    write_text_if_absent,
)

logger = logging.getLogger(__name__)

DOCUMENT_DIR = "document"
FIGURE_DIR = "figure"
NOTEBOOK_DIR = "notebook"
FIGURE_ASSET_NAME = "sample.png"

NOTEBOOK_SKELETON = {
    "cells": [],
    "metadata": {},
    "nbformat": 4,
    "nbformat_minor": 5,
}


def sanitize_title(title: str, separator: Separator = "_") -> str:
    """Replace every space in ``title`` with ``separator``."""
    return title.replace(" ", separator)


def plan_layout(root: Path, title: str, config: MaterializeConfig) -> WorkspaceLayout:
    """Compute every path of the workspace without touching the disk.

    Args:
        root: Base directory, usually the documents directory
        title: Unsanitized document title
        config: Layout configuration

    Returns:
        Workspace layout
    """
    name = sanitize_title(title, config.separator)
    filename = f"{name}.{config.extension}"

    if config.layout is LayoutKind.FLAT:
        return WorkspaceLayout(root=root, primary_path=root / filename)

    project_dir = root / name
    document_dir = project_dir / DOCUMENT_DIR
    figure_dir = document_dir / FIGURE_DIR
    return WorkspaceLayout(
        root=root,
        project_dir=project_dir,
        primary_path=document_dir / filename,
        figure_dir=figure_dir,
        figure_asset_path=figure_dir / FIGURE_ASSET_NAME,
        notebook_path=project_dir / NOTEBOOK_DIR / f"{name}.ipynb",
    )


def _create_directories(layout: WorkspaceLayout) -> None:
    for directory in layout.directories():
        try:
            ensure_directory(directory)
        except OSError as e:
            raise DirectoryUnavailableError(
                f"Could not create directory '{directory}': {e}", directory
            ) from e
        logger.debug(f"Directory ready: {directory}")


def _write_auxiliary(layout: WorkspaceLayout, result: MaterializeResult) -> None:
    """Write fixed-content files, leaving existing ones alone.

    Failures here are logged and recorded as skipped; they never abort.
    """
    auxiliaries = []
    if layout.figure_asset_path is not None:
        asset = resources.files("texcli") / "assets" / FIGURE_ASSET_NAME
        auxiliaries.append(
            (layout.figure_asset_path, lambda p: copy_if_absent(asset, p))
        )
    if layout.notebook_path is not None:
        notebook = json.dumps(NOTEBOOK_SKELETON, indent=1) + "\n"
        auxiliaries.append(
            (layout.notebook_path, lambda p: write_text_if_absent(p, notebook))
        )

    for path, write in auxiliaries:
        try:
            written = write(path)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not write auxiliary file {path}: {e}")
            result.skipped.append(path)
            continue
        if written:
            logger.debug(f"Wrote {path}")
            result.written.append(path)
        else:
            logger.debug(f"Keeping existing {path}")
            result.skipped.append(path)


def materialize(
    root: Path, config: MaterializeConfig, document: str, title: str
) -> MaterializeResult:
    """Create the workspace for ``title`` under ``root`` and write ``document``.

    The primary document is never overwritten: an existing file aborts the
    run with :class:`AlreadyExistsError`. Directories created before the
    abort are left in place.

    Args:
        root: Base directory
        config: Layout configuration
        document: Rendered document text
        title: Unsanitized document title

    Returns:
        Paths written and skipped
    """
    layout = plan_layout(root, title, config)
    logger.debug(f"Materializing {config.layout.value} layout under {root}")

    _create_directories(layout)

    primary = layout.primary_path
    if primary.exists():
        raise AlreadyExistsError(primary)

    result = MaterializeResult(layout=layout, primary_path=primary)
    _write_auxiliary(layout, result)

    try:
        exclusive_write_text(primary, document, mode=config.file_mode)
    except FileExistsError as e:
        raise AlreadyExistsError(primary) from e
    except (OSError, ValueError) as e:
        raise WriteFailureError(f"Failed to write '{primary}': {e}", primary) from e

    logger.debug(f"Wrote primary document {primary}")
    result.written.append(primary)
    return result
