"""Template rendering engine."""

from __future__ import annotations

import logging

from jinja2 import (
    DictLoader,
    Environment,
    StrictUndefined,
    Template,
    TemplateError,
)

from ..core.errors import TemplateRegistryError
from ..core.models import RenderedDocument, RenderRequest
from .registry import DEFAULT_TEMPLATE_ID, TemplateRegistry

logger = logging.getLogger(__name__)

FALLBACK_NOTICE = "Template unrecognised, will use default"


def create_environment(registry: TemplateRegistry) -> Environment:
    """Create a Jinja2 environment with LaTeX-friendly delimiters.

    Braces are everywhere in LaTeX, so variables are written ``\\VAR{name}``,
    blocks ``\\BLOCK{...}`` and comments ``\\#{...}``.

    Args:
        registry: Templates exposed by name through the loader

    Returns:
        Configured Jinja2 environment
    """
    return Environment(
        loader=DictLoader(registry.as_dict()),
        block_start_string=r"\BLOCK{",
        block_end_string="}",
        variable_start_string=r"\VAR{",
        variable_end_string="}",
        comment_start_string=r"\#{",
        comment_end_string="}",
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def load_template(registry: TemplateRegistry, template_id: str) -> Template:
    """Compile a registered template."""
    return create_environment(registry).get_template(template_id)


def render(
    template_id: str,
    title: str,
    author: str,
    date: str,
    registry: TemplateRegistry | None = None,
) -> RenderedDocument:
    """Render a template with title, author and date substituted verbatim.

    Unknown template ids render the default template and set
    ``used_fallback``.

    Args:
        template_id: Registered template identifier
        title: Document title
        author: Author name
        date: Document date
        registry: Template registry (default: bundled templates)

    Returns:
        Rendered document
    """
    if registry is None:
        registry = TemplateRegistry.load()

    used_fallback = template_id not in registry
    resolved_id = DEFAULT_TEMPLATE_ID if used_fallback else template_id
    if used_fallback:
        logger.debug(f"{FALLBACK_NOTICE} (requested {template_id!r})")

    logger.debug(f"Rendering template: {resolved_id}")
    try:
        template = load_template(registry, resolved_id)
        text = template.render(title=title, author=author, date=date)
    except TemplateError as e:
        raise TemplateRegistryError(
            f"Template {resolved_id!r} could not be rendered: {e}"
        ) from e

    return RenderedDocument(
        text=text,
        template_id=resolved_id,
        requested_id=template_id,
        used_fallback=used_fallback,
    )


def render_request(
    request: RenderRequest, registry: TemplateRegistry | None = None
) -> RenderedDocument:
    """Render a :class:`RenderRequest`."""
    return render(
        request.template_id,
        request.title,
        request.author,
        request.date,
        registry=registry,
    )
