"""langpack detect command - report the language of a file."""

import json
import sys
from pathlib import Path

import click

from langpack.cli.utils import get_registry, read_first_line


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def detect_command(ctx: click.Context, file: Path, as_json: bool) -> None:
    """Detect the language of FILE.

    Tries path suffixes first, then the first line of the file.
    Exits with status 1 if no language matches.
    """
    registry = get_registry(ctx)

    via = "suffix"
    descriptor = registry.for_suffix(file)
    if descriptor is None:
        via = "first_line"
        first_line = read_first_line(file)
        if first_line is not None:
            descriptor = registry.for_first_line(first_line)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "path": str(file),
                    "language": descriptor.name if descriptor else None,
                    "grammar": descriptor.grammar if descriptor else None,
                    "matched_by": via if descriptor else None,
                }
            )
        )
    elif descriptor is not None:
        click.echo(f"{descriptor.name} (by {via.replace('_', ' ')})")
    else:
        click.echo("unknown")

    if descriptor is None:
        sys.exit(1)
