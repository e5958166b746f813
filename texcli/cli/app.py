"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from ..core.errors import TexcliError
from ..core.models import LayoutKind, MaterializeConfig, RenderRequest
from ..environment import editor, host
from ..rendering import engine
from ..rendering.registry import DEFAULT_TEMPLATE_ID, TemplateRegistry
from ..settings import Settings
from ..workspace import materializer
from .parsers import parse_file_mode, parse_separator

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="texcli",
    help="Quick LaTeX file generator.",
    add_completion=False,
)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

EPILOG = (
    "Spaces in TITLE are replaced with the separator in file and folder "
    "names. The program aborts if the document already exists."
)


@app.command(epilog=EPILOG, context_settings=CONTEXT_SETTINGS)
def scaffold(
    title: Annotated[
        Optional[str],
        typer.Argument(help='Title of the document (default: "Opgave YYYY-MM-DD").'),
    ] = None,
    date: Annotated[
        Optional[str],
        typer.Argument(help="Document date (default: today's date)."),
    ] = None,
    author: Annotated[
        Optional[str],
        typer.Argument(help="Author name (default: your real name)."),
    ] = None,
    template: Annotated[
        str,
        typer.Argument(help='Template name (default: "default").'),
    ] = DEFAULT_TEMPLATE_ID,
    layout: Annotated[
        Optional[LayoutKind],
        typer.Option(
            "--layout",
            help="flat writes one file; project adds document/, figure/ and notebook/ folders.",
        ),
    ] = None,
    root: Annotated[
        Optional[Path],
        typer.Option(
            "--root",
            help="Base output directory (default: your Documents directory).",
            metavar="DIR",
        ),
    ] = None,
    separator: Annotated[
        Optional[str],
        typer.Option(
            "--separator",
            help="Character replacing spaces in names: _ or - (default: _).",
        ),
    ] = None,
    editor_command: Annotated[
        Optional[str],
        typer.Option(
            "--editor",
            help="Editor command used to open the document (default: code).",
            metavar="CMD",
        ),
    ] = None,
    no_editor: Annotated[
        bool,
        typer.Option("--no-editor", help="Do not open the document afterwards."),
    ] = False,
    file_mode: Annotated[
        Optional[str],
        typer.Option(
            "--mode",
            help="Document file permissions in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = None,
    list_templates: Annotated[
        bool,
        typer.Option("--list-templates", help="List available templates and exit."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render a LaTeX template and open it in an editor."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    try:
        settings = Settings()
    except ValidationError as e:
        typer.echo(f"Error: invalid TEXCLI_* configuration: {e}", err=True)
        raise typer.Exit(code=2) from e
    logger.debug(f"Settings: {settings!r}")

    try:
        registry = TemplateRegistry.load(settings.template_dir)
    except TexcliError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if list_templates:
        for template_id in registry.ids():
            typer.echo(template_id)
        raise typer.Exit()

    # Fill in defaults from the host
    cur_date = host.today()
    request = RenderRequest(
        title=title if title is not None else f"Opgave {cur_date}",
        date=date if date is not None else cur_date,
        author=author if author is not None else host.real_name(),
        template_id=template,
    )

    config = MaterializeConfig(
        layout=layout or settings.layout,
        separator=parse_separator(separator or settings.separator),
        extension=settings.extension,
        file_mode=parse_file_mode(file_mode or settings.file_mode),
    )

    try:
        document = engine.render_request(request, registry=registry)
    except TexcliError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    if document.used_fallback:
        typer.echo(engine.FALLBACK_NOTICE)

    typer.echo(f"Title: {request.title}")
    typer.echo(f"Date: {request.date}")
    typer.echo(f"Author: {request.author}")
    typer.echo(f"Template name: {request.template_id}")

    try:
        dest_root = root or settings.documents_dir or host.documents_dir()
        result = materializer.materialize(
            dest_root, config, document.text, request.title
        )
    except TexcliError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    for path in result.written:
        if path != result.primary_path:
            typer.echo(f"Created: {path}")
    for path in result.skipped:
        typer.echo(f"Kept existing: {path}")
    typer.echo(f"Written LaTeX file to: {result.primary_path}")

    if no_editor:
        logger.debug("Editor launch disabled")
        return

    outcome = editor.launch_editor(
        result.primary_path, editor_command or settings.editor
    )
    typer.echo(outcome.message)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
