"""Filesystem layout and materialization."""

from .materializer import materialize, plan_layout, sanitize_title

__all__ = ["materialize", "plan_layout", "sanitize_title"]
