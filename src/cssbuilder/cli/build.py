"""CLI command: cssbuilder build -- compose a compound selector from options."""

from __future__ import annotations

import sys

import click

from cssbuilder.builder import SelectorBuilder
from cssbuilder.config import BuilderConfig
from cssbuilder.errors import SelectorError


@click.command()
@click.option("--element", "element_name", default=None, help="Element (type) name")
@click.option("--id", "id_name", default=None, help="Id, without the leading #")
@click.option("--class", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attrs", multiple=True, help='Attribute expression, e.g. href$=".png"')
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)")
@click.option("--pseudo-element", default=None, help="Pseudo-element name")
@click.pass_obj
def build(
    config: BuilderConfig | None,
    element_name: str | None,
    id_name: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Print the compound selector described by the options.

    Options are applied in selector order (element, id, classes,
    attributes, pseudo-classes, pseudo-element), whatever their order on
    the command line.
    """
    builder = SelectorBuilder(config)
    try:
        if element_name is not None:
            builder.element(element_name)
        if id_name is not None:
            builder.id(id_name)
        for name in classes:
            builder.class_(name)
        for spec in attrs:
            builder.attr(spec)
        for name in pseudo_classes:
            builder.pseudo_class(name)
        if pseudo_element is not None:
            builder.pseudo_element(pseudo_element)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    selector = builder.render()
    if not selector:
        click.echo("Error: no selector parts given", err=True)
        sys.exit(1)
    click.echo(selector)
