"""langpack check command - validate descriptor files."""

import json
import sys
from pathlib import Path

import click

from langpack.cli.utils import expand_descriptor_paths
from langpack.descriptor.validation import check_file


@click.command()
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, path_type=Path),
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def check_command(paths: tuple[Path, ...], as_json: bool) -> None:
    """Validate descriptor files.

    PATHS are config.toml files, language directories, or directories of
    language directories. Exits with status 1 if any problem is found.
    """
    files = expand_descriptor_paths(paths)
    if not files:
        raise click.ClickException("No config.toml files found")

    results = {str(path): check_file(path) for path in files}
    failed = any(results.values())

    if as_json:
        click.echo(json.dumps({"ok": not failed, "files": results}, indent=2))
    else:
        for path, problems in results.items():
            if not problems:
                click.echo(f"{path}: ok")
                continue
            click.echo(f"{path}: {len(problems)} problem(s)")
            for problem in problems:
                click.echo(f"  - {problem}")

    if failed:
        sys.exit(1)
