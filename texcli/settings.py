from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.models import LayoutKind, Separator


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TEXCLI_", case_sensitive=False)

    documents_dir: Path | None = None
    template_dir: Path | None = None
    editor: str = "code"
    layout: LayoutKind = LayoutKind.FLAT
    separator: Separator = "_"
    extension: str = Field(default="tex", min_length=1)
    file_mode: str = "0644"
