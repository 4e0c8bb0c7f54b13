"""CLI command: csstrim resolve -- show where a stylesheet reference points."""

from __future__ import annotations

import click

from csstrim.paths import resolve


@click.command("resolve")
@click.argument("source")
@click.argument("reference")
@click.option("--htmlroot", default=None, help="Root directory for absolute references")
@click.option("--csspath", default="", help="Path from documents to their stylesheets")
def resolve_command(source: str, reference: str, htmlroot: str | None, csspath: str) -> None:
    """Resolve REFERENCE as written in the document at SOURCE."""
    click.echo(resolve(source, reference, htmlroot=htmlroot, csspath=csspath))
