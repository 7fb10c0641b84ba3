"""
Generates a table of contents for a Markdown file and prints it to stdout.
"""

from __future__ import annotations

from pathlib import Path

import click
from .config import MALFORMED_POLICIES, ConfigError, build_config
from .constants import DEFAULT_FILENAME
from .exceptions import TocError
from .filesystem import collect_file_stat, enforce_file_size, get_max_file_size, read_lines
from .generator import TocBuilder

__all__ = ["cli"]


@click.command()
@click.version_option()
@click.option(
    "-d",
    "--toc-heading",
    is_flag=True,
    help="Emit a top level 'Table Of Content' entry and nest every heading under it",
)
@click.option("-s", "--indent-string", help="String used as indent unit (default: two spaces)")
@click.option(
    "--malformed",
    type=click.Choice(MALFORMED_POLICIES),
    help="How to handle '#' lines without heading text",
)
@click.argument("filepath", default=DEFAULT_FILENAME, type=click.Path(dir_okay=False))
def cli(
    filepath: str,
    toc_heading: bool = False,
    indent_string: str | None = None,
    malformed: str | None = None,
):
    """
    Print a linked table of contents for a Markdown file.

    Args:
        filepath: Path to the Markdown file to process. Defaults to ./README.md.
        toc_heading: Whether to emit a synthetic top-level TOC entry.
        indent_string: Indentation unit; repeated three times per level.
        malformed: Policy for `#` lines with no heading text (`skip` or `error`).

    Returns:
        None.

    Raises:
        click.BadParameter: If configuration values are invalid.
        click.ClickException: If the file cannot be read or contains no
            usable heading.

    Examples:
        gtoc README.md -d -s "\t"
    """
    path = Path(filepath)

    try:
        file_stat = collect_file_stat(path)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    try:
        config = build_config(
            path.parent,
            # Only an explicit flag overrides a configured value
            toc_heading=toc_heading or None,
            indent_string=indent_string,
            malformed_headings=malformed,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        enforce_file_size(file_stat, max_file_size, path)
        lines = read_lines(path)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    builder = TocBuilder(lines, config, warn=lambda message: click.echo(message, err=True))
    try:
        toc = builder.build()
    except TocError as error:
        raise click.ClickException(f"failed to parse {path}: {error}") from error

    click.echo(toc, nl=False)


if __name__ == "__main__":
    cli()
