"""CLI command: cssbuilder render -- render a JSON selector document."""

from __future__ import annotations

import dataclasses
import sys
from pathlib import Path

import click

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import SelectorError
from cssbuilder.loader import load_selector


@click.command()
@click.argument("docfile", type=click.Path(exists=True))
@click.option("--strict/--no-strict", default=None, help="Reject unknown combinators")
@click.pass_obj
def render(config: BuilderConfig | None, docfile: str, strict: bool | None) -> None:
    """Render the selector described by a JSON document file.

    Exits with code 1 if the document is malformed or describes an
    invalid selector.
    """
    config = config or BuilderConfig()
    if strict is not None:
        config = dataclasses.replace(config, strict_combinators=strict)

    doc_path = Path(docfile)
    try:
        builder = load_selector(doc_path.read_text(encoding="utf-8"), config)
    except (SelectorError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(builder.render())
