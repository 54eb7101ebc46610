"""langpack CLI - langpack command."""

from pathlib import Path

import click

from langpack.cli.check import check_command
from langpack.cli.detect import detect_command
from langpack.cli.list import list_command
from langpack.cli.show import show_command
from langpack.cli.utils import config_error_exception
from langpack.config import load_config
from langpack.core.errors import ConfigError
from langpack.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="langpack")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--languages-dir",
    "languages_dirs",
    multiple=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Extra directory of <name>/config.toml descriptors (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, languages_dirs: tuple[Path, ...]) -> None:
    """langpack - editor language descriptors."""
    ctx.ensure_object(dict)
    try:
        config = load_config()
    except ConfigError as e:
        raise config_error_exception(e) from e

    logging_config = config.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)

    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["languages_dirs"] = list(languages_dirs)


cli.add_command(check_command, name="check")
cli.add_command(show_command, name="show")
cli.add_command(detect_command, name="detect")
cli.add_command(list_command, name="list")


if __name__ == "__main__":
    cli()
