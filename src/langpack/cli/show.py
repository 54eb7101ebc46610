"""langpack show command - print a registered descriptor."""

import json

import click
import yaml

from langpack.cli.utils import get_registry
from langpack.descriptor.codec import descriptor_to_dict, dump_descriptor


@click.command()
@click.argument("name")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["toml", "json", "yaml"]),
    default="toml",
    show_default=True,
    help="Output format",
)
@click.pass_context
def show_command(ctx: click.Context, name: str, fmt: str) -> None:
    """Print the descriptor registered as NAME (case-insensitive)."""
    registry = get_registry(ctx)
    descriptor = registry.get(name)
    if descriptor is None:
        known = ", ".join(registry.names()) or "none"
        raise click.ClickException(f"Unknown language '{name}'. Known: {known}")

    if fmt == "toml":
        click.echo(dump_descriptor(descriptor), nl=False)
    elif fmt == "json":
        click.echo(json.dumps(descriptor_to_dict(descriptor), indent=2))
    else:
        click.echo(yaml.safe_dump(descriptor_to_dict(descriptor), sort_keys=False), nl=False)
