"""DOM query oracles: report which selectors match at least one element."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import cssselect2
import lxml.html
from lxml import etree

from csstrim.errors import OracleError

__all__ = ["Document", "DomOracle", "StaticOracle"]

logger = logging.getLogger("csstrim")

_HTML_PARSER = lxml.html.HTMLParser(encoding="utf-8")


@dataclass(frozen=True)
class Document:
    """A loaded document: where it came from and its HTML source."""

    location: str
    html: str


class DomOracle(Protocol):
    """Answers "which of these selectors match something in *document*"."""

    async def match_any(self, document: Document, selectors: list[str]) -> list[str]:
        """Return the subset of *selectors* matching at least one element.

        Raises OracleError if the document cannot be evaluated.
        """
        ...


class StaticOracle:
    """Match selectors against the document's static markup.

    Scripts are not executed, so content injected at runtime is invisible
    to this oracle; list such selectors in the ignore list.
    """

    def __init__(self) -> None:
        self._elements: dict[str, list[cssselect2.ElementWrapper]] = {}

    def _load(self, document: Document) -> list[cssselect2.ElementWrapper]:
        elements = self._elements.get(document.location)
        if elements is not None:
            return elements
        if not document.html.strip():
            logger.debug("%s is empty; no selectors can match", document.location)
            self._elements[document.location] = []
            return []
        try:
            root = lxml.html.document_fromstring(
                document.html.encode("utf-8"), parser=_HTML_PARSER
            )
        except (etree.ParserError, ValueError) as exc:
            raise OracleError(
                f"Could not parse {document.location}: {exc}",
                document=document.location,
                cause=exc,
            ) from exc
        elements = list(cssselect2.ElementWrapper.from_html_root(root).iter_subtree())
        self._elements[document.location] = elements
        return elements

    @staticmethod
    def _matches(elements: list[cssselect2.ElementWrapper], selector: str) -> bool:
        try:
            compiled = cssselect2.compile_selector_list(selector)
        except cssselect2.SelectorError as exc:
            logger.debug("Unsupported selector %r treated as unused: %s", selector, exc)
            return False
        return any(sel.test(element) for element in elements for sel in compiled)

    async def match_any(self, document: Document, selectors: list[str]) -> list[str]:
        elements = self._load(document)
        found = [s for s in selectors if self._matches(elements, s)]
        logger.debug(
            "%s: %d of %d selectors matched", document.location, len(found), len(selectors)
        )
        return found
