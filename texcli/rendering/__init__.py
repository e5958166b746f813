"""Template registry and rendering."""

from .engine import render, render_request
from .registry import DEFAULT_TEMPLATE_ID, TemplateRegistry

__all__ = ["DEFAULT_TEMPLATE_ID", "TemplateRegistry", "render", "render_request"]
