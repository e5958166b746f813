"""Registry of named template bodies."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from importlib import resources
from pathlib import Path

from ..core.errors import TemplateRegistryError

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_ID = "default"
TEMPLATE_SUFFIX = ".tex.j2"


def _read_templates(directory) -> dict[str, str]:
    """Collect ``<id>.tex.j2`` files from a directory or resource tree."""
    found: dict[str, str] = {}
    for entry in directory.iterdir():
        if not entry.is_file() or not entry.name.endswith(TEMPLATE_SUFFIX):
            continue
        template_id = entry.name[: -len(TEMPLATE_SUFFIX)]
        try:
            found[template_id] = entry.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise TemplateRegistryError(
                f"Template {entry.name} is not valid UTF-8: {e}"
            ) from e
    return found


def load_bundled_templates() -> dict[str, str]:
    """Load the templates shipped inside the package."""
    return _read_templates(resources.files("texcli").joinpath("templates"))


def load_directory_templates(template_dir: Path) -> dict[str, str]:
    """Load user templates from a directory.

    Args:
        template_dir: Directory holding ``<id>.tex.j2`` files

    Returns:
        Mapping of template id to template body
    """
    if not template_dir.is_dir():
        raise TemplateRegistryError(
            f"Template directory not found: {template_dir}", template_dir
        )
    templates = _read_templates(template_dir)
    logger.debug(f"Loaded {len(templates)} template(s) from {template_dir}")
    return templates


class TemplateRegistry:
    """Maps template identifiers to template bodies.

    The registry is read-only once built and always knows ``default``.
    """

    def __init__(self, templates: Mapping[str, str]) -> None:
        if DEFAULT_TEMPLATE_ID not in templates:
            raise TemplateRegistryError(
                f"Template registry must define '{DEFAULT_TEMPLATE_ID}'"
            )
        self._templates = dict(templates)

    @classmethod
    def load(cls, template_dir: Path | None = None) -> TemplateRegistry:
        """Build a registry from bundled templates plus an optional directory.

        Templates in ``template_dir`` shadow bundled ones with the same id.
        """
        templates = load_bundled_templates()
        if template_dir is not None:
            templates.update(load_directory_templates(template_dir))
        return cls(templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates

    def get(self, template_id: str) -> str:
        return self._templates[template_id]

    def ids(self) -> list[str]:
        return sorted(self._templates)

    def as_dict(self) -> dict[str, str]:
        return dict(self._templates)
