"""Shared fixtures."""

from __future__ import annotations

import os

import pytest

from texcli.rendering.registry import TemplateRegistry


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep TEXCLI_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("TEXCLI_"):
            monkeypatch.delenv(key)


@pytest.fixture
def registry() -> TemplateRegistry:
    return TemplateRegistry.load()


@pytest.fixture
def tiny_registry() -> TemplateRegistry:
    return TemplateRegistry(
        {
            "default": "T=\\VAR{title};A=\\VAR{author};D=\\VAR{date}\n",
            "short": "\\VAR{title} by \\VAR{author}",
        }
    )
