"""csstrim CLI entry point: Click group with subcommands."""

import logging

import click

from csstrim import __version__


@click.group()
@click.version_option(version=__version__, prog_name="csstrim")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """csstrim - remove unused CSS rules from stylesheets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from csstrim.cli.reduce import reduce_command  # noqa: E402
from csstrim.cli.resolve import resolve_command  # noqa: E402

cli.add_command(reduce_command)
cli.add_command(resolve_command)
