"""CLI command: csstrim reduce -- write the CSS used by a set of documents."""

from __future__ import annotations

import sys

import click

from csstrim.config import ReduceOptions
from csstrim.errors import CsstrimError
from csstrim.runner import Runner


@click.command("reduce")
@click.argument("sources", nargs=-1)
@click.option("--stylesheets", multiple=True, help="Stylesheet to use instead of the linked ones (repeatable)")
@click.option("--ignore", multiple=True, help="Selector to keep; /regex/ values are patterns (repeatable)")
@click.option("--ignore-sheets", multiple=True, help="Regex of stylesheets to skip (repeatable)")
@click.option("--htmlroot", default=None, help="Root directory for absolute stylesheet references")
@click.option("--csspath", default="", help="Path from documents to their stylesheets")
@click.option("--raw", "raw_css", default="", help="Extra CSS to reduce along with the stylesheets")
@click.option("--timeout", default=10.0, type=float, help="Seconds to wait for each fetch")
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None, help="Write CSS here instead of stdout")
@click.option("--report", is_flag=True, help="Print a summary to stderr")
def reduce_command(
    sources: tuple[str, ...],
    stylesheets: tuple[str, ...],
    ignore: tuple[str, ...],
    ignore_sheets: tuple[str, ...],
    htmlroot: str | None,
    csspath: str,
    raw_css: str,
    timeout: float,
    output: str | None,
    report: bool,
) -> None:
    """Reduce the stylesheets of SOURCES (files or URLs) to the rules they use.

    Pass "-" as the only source to read HTML from stdin.
    """
    raw_html = ""
    if list(sources) == ["-"]:
        raw_html = click.get_text_stream("stdin").read()
        sources = ()
    if not sources and not raw_html:
        click.echo("Error: no documents given", err=True)
        sys.exit(1)

    options = ReduceOptions(
        htmlroot=htmlroot,
        csspath=csspath,
        stylesheets=stylesheets,
        ignore=ignore,
        ignore_sheets=ignore_sheets,
        raw_css=raw_css,
        raw_html=raw_html,
        timeout=timeout,
    )

    try:
        result = Runner(options).run_sync(list(sources))
    except CsstrimError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(result.css)
    else:
        click.echo(result.css, nl=False)

    if report:
        click.echo(result.report.summary(), err=True)
