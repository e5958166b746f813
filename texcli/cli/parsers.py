"""CLI argument parsers and validators."""

from __future__ import annotations

import typer

from ..core.models import Separator

SEPARATORS: tuple[Separator, ...] = ("_", "-")


def parse_file_mode(value: str) -> int:
    """Parse octal file mode string."""
    try:
        return int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value!r}") from e


def parse_separator(value: str) -> Separator:
    """Validate the title separator."""
    if value not in SEPARATORS:
        raise typer.BadParameter(
            f"Separator must be one of {', '.join(SEPARATORS)}, got: {value!r}"
        )
    return value  # type: ignore[return-value]
