"""Domain models for rendering requests and workspace layouts."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Separator = Literal["_", "-"]


class LayoutKind(str, Enum):
    """Supported workspace layouts."""

    FLAT = "flat"
    PROJECT = "project"


class RenderRequest(BaseModel):
    """Values substituted into a template."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Document title")
    date: str = Field(..., description="Document date, free-form")
    author: str = Field(..., description="Author name")
    template_id: str = Field(default="default", description="Template identifier")


class RenderedDocument(BaseModel):
    """Result of rendering a template."""

    model_config = ConfigDict(frozen=True)

    text: str
    template_id: str = Field(..., description="Template actually rendered")
    requested_id: str = Field(..., description="Template asked for")
    used_fallback: bool = False


class MaterializeConfig(BaseModel):
    """How the workspace is laid out on disk."""

    layout: LayoutKind = Field(default=LayoutKind.FLAT)
    separator: Separator = Field(default="_", description="Replaces spaces in titles")
    extension: str = Field(default="tex", min_length=1)
    file_mode: int = Field(default=0o644, description="Primary file permissions (octal)")


class WorkspaceLayout(BaseModel):
    """Paths derived from a root directory and a sanitized title."""

    model_config = ConfigDict(frozen=True)

    root: Path
    primary_path: Path
    project_dir: Path | None = None
    figure_dir: Path | None = None
    figure_asset_path: Path | None = None
    notebook_path: Path | None = None

    def directories(self) -> list[Path]:
        """Every directory that must exist before writing."""
        dirs = [self.primary_path.parent]
        if self.figure_dir is not None:
            dirs.append(self.figure_dir)
        if self.notebook_path is not None:
            dirs.append(self.notebook_path.parent)
        return dirs


class MaterializeResult(BaseModel):
    """Paths written or left untouched by a materialization."""

    layout: WorkspaceLayout
    primary_path: Path
    written: list[Path] = Field(default_factory=list)
    skipped: list[Path] = Field(default_factory=list)
