"""Reduce a stylesheet to the rules used by a set of documents."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable

from csstrim._gather import gather_all
from csstrim.collector import collect_used
from csstrim.filter import filter_rules
from csstrim.oracle import Document, DomOracle
from csstrim.selectors import IgnoreEntry, build_ignore_list
from csstrim.stylesheet.model import Stylesheet

__all__ = ["reduce", "reduce_sync"]

logger = logging.getLogger("csstrim")


async def reduce(
    documents: list[Document],
    stylesheet: Stylesheet,
    ignore: Iterable[IgnoreEntry | object],
    oracle: DomOracle,
) -> Stylesheet:
    """Keep only the rules of *stylesheet* used by at least one document.

    Usage is collected for all documents concurrently and unioned; a
    selector used on any document is kept everywhere. If any collection
    fails the error propagates and *stylesheet* is left untouched, so a
    missing usage signal is never mistaken for "unused".
    """
    ignore_list = build_ignore_list(ignore)
    usage = await gather_all(
        [collect_used(doc, stylesheet, oracle) for doc in documents]
    )
    used: set[str] = set().union(*usage)
    logger.info(
        "Collected %d used selectors from %d document(s)", len(used), len(documents)
    )
    return filter_rules(stylesheet, ignore_list, used)


def reduce_sync(
    documents: list[Document],
    stylesheet: Stylesheet,
    ignore: Iterable[IgnoreEntry | object],
    oracle: DomOracle,
) -> Stylesheet:
    """Blocking wrapper around :func:`reduce`."""
    return asyncio.run(reduce(documents, stylesheet, ignore, oracle))
