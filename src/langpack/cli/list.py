"""langpack list command - show registered languages."""

import click
from rich.console import Console
from rich.table import Table

from langpack.cli.utils import get_registry


@click.command()
@click.option("--all", "show_all", is_flag=True, help="Include hidden languages")
@click.pass_context
def list_command(ctx: click.Context, show_all: bool) -> None:
    """List registered languages."""
    registry = get_registry(ctx)
    config = (ctx.find_root().obj or {}).get("config")
    include_hidden = show_all or (config is not None and config.registry.include_hidden)

    table = Table(box=None, padding=(0, 2), pad_edge=False)
    table.add_column("Language", style="bold cyan", no_wrap=True)
    table.add_column("Grammar", no_wrap=True)
    table.add_column("Suffixes")
    table.add_column("Debuggers")

    for descriptor in registry:
        if descriptor.hidden and not include_hidden:
            continue
        table.add_row(
            descriptor.name,
            descriptor.grammar or "-",
            ", ".join(sorted(descriptor.path_suffixes)) or "-",
            ", ".join(sorted(descriptor.debuggers)) or "-",
        )

    Console().print(table)
