"""Collect the selectors of a stylesheet that are used in a document."""

from __future__ import annotations

from csstrim.oracle import Document, DomOracle
from csstrim.selectors import normalize_selector
from csstrim.stylesheet.model import Rule, RuleKind, Stylesheet

__all__ = ["collect_used", "flatten_selectors"]


def flatten_selectors(rules: list[Rule]) -> list[str]:
    """Return every raw selector in *rules*, descending into media blocks."""
    selectors: list[str] = []
    for rule in rules:
        if rule.kind is RuleKind.RULE:
            selectors.extend(rule.selectors)
        elif rule.kind is RuleKind.MEDIA:
            selectors.extend(flatten_selectors(rule.rules))
    return selectors


async def collect_used(
    document: Document, stylesheet: Stylesheet, oracle: DomOracle
) -> set[str]:
    """Ask *oracle* which normalized selectors of *stylesheet* match *document*.

    All selectors go to the oracle in a single call.
    """
    selectors = [normalize_selector(s) for s in flatten_selectors(stylesheet.rules)]
    if not selectors:
        return set()
    return set(await oracle.match_any(document, selectors))
