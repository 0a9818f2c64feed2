"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from sysname.config import Settings, load_config
from sysname.core.classify import classify, split_identifiers
from sysname.core.hook import prepopulate, run_post
from sysname.core.loader import load_page


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def generate_cmd(
    page_file: Annotated[Path, typer.Argument(help="YAML or JSON page snapshot")],
    field_ids: Annotated[Optional[str], typer.Option("--field-ids", help="Comma-delimited field identifiers")] = None,
    space_token: Annotated[Optional[str], typer.Option("--space-token", help="Replaces spaces within a value")] = None,
    concat_token: Annotated[Optional[str], typer.Option("--concat-token", help="Joins consecutive values")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log each resolved field")] = False,
    ):
    """Compute the system name a page snapshot would be created with."""
    _setup_logging(verbose)
    settings = _settings(overrides={
        "field_ids": field_ids, "space_token": space_token, "concat_token": concat_token,
    })
    try:
        page = load_page(page_file)
    except (OSError, ValueError) as e:
        _fail(f"Could not load {page_file}", e)

    prepopulate(page, settings.placeholder_name)
    result = run_post(page, settings)
    if not result.allow:
        _fail(result.message)
    typer.echo(page.name)


def classify_cmd(
    identifiers: Annotated[list[str], typer.Argument(help="Field identifiers (comma-delimited lists allowed)")],
    ):
    """Show how each field identifier is addressed."""
    for arg in identifiers:
        for raw in split_identifiers(arg):
            field = classify(raw)
            typer.echo(f"  {raw}: {field.mode.value} {'/'.join(field.path)}")


def config_cmd():
    """Print the effective settings with their descriptions."""
    settings = _settings()
    for name, info in Settings.model_fields.items():
        typer.echo(f"{name} = {getattr(settings, name)!r}  # {info.description}")
