"""Resolve stylesheet references found in documents to fetchable locations."""

from __future__ import annotations

import logging
import os.path
from urllib.parse import urljoin, urlsplit

__all__ = ["is_url", "resolve", "resolve_all"]

logger = logging.getLogger("csstrim")


def is_url(location: str) -> bool:
    """True if *location* should be fetched over http(s)."""
    return location.startswith("http")


def resolve(
    source: str,
    reference: str,
    htmlroot: str | None = None,
    csspath: str = "",
) -> str:
    """Turn *reference*, as written in the document at *source*, into a location.

    - ``http...`` references are returned unchanged.
    - ``//host/x.css`` takes the scheme of *source*, or ``http:``.
    - With a URL *source*, the reference is joined using URL rules.
    - With a filesystem *source*, the query string and fragment are dropped;
      ``/x.css`` is joined onto *htmlroot* when one is given, anything else
      onto the document's directory plus *csspath*.
    """
    if reference.startswith("http"):
        return reference

    scheme = urlsplit(source).scheme if is_url(source) else ""

    if reference.startswith("//"):
        return f"{scheme or 'http'}:{reference}"

    if scheme:
        return urljoin(source, reference)

    reference = reference.split("?")[0].split("#")[0]
    if reference.startswith("/") and htmlroot:
        return os.path.normpath(os.path.join(htmlroot, reference.lstrip("/")))
    if reference.startswith("/"):
        logger.debug(
            "Absolute reference %r in %s with no htmlroot; joining onto document directory",
            reference,
            source,
        )
        reference = reference.lstrip("/")
    return os.path.normpath(
        os.path.join(os.path.dirname(source), csspath or "", reference)
    )


def resolve_all(
    source: str,
    references: list[str],
    htmlroot: str | None = None,
    csspath: str = "",
) -> list[str]:
    """Resolve every reference from *source*, preserving order."""
    return [resolve(source, ref, htmlroot=htmlroot, csspath=csspath) for ref in references]
