"""Pipeline: documents -> linked stylesheets -> reduced CSS text."""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass, field

import lxml.html
from lxml import etree

from csstrim._gather import gather_all
from csstrim.config import ReduceOptions
from csstrim.engine import reduce
from csstrim.errors import ConfigurationError
from csstrim.fetch import StylesheetFetcher
from csstrim.oracle import Document, DomOracle, StaticOracle
from csstrim.paths import resolve_all
from csstrim.stylesheet import parse_stylesheet, serialize_stylesheet

__all__ = ["ReductionReport", "RunResult", "Runner", "find_stylesheet_links"]

logger = logging.getLogger("csstrim")

RAW_HTML_LOCATION = "<raw html>"


def find_stylesheet_links(html: str) -> list[str]:
    """Return the hrefs of ``<link rel="stylesheet">`` elements, in document order."""
    if not html.strip():
        return []
    try:
        root = lxml.html.document_fromstring(html.encode("utf-8"))
    except etree.ParserError:
        return []
    hrefs: list[str] = []
    for link in root.iter("link"):
        rel = (link.get("rel") or "").lower().split()
        href = (link.get("href") or "").strip()
        if "stylesheet" in rel and href:
            hrefs.append(href)
    return hrefs


@dataclass
class ReductionReport:
    """Counts describing what a run removed."""

    documents: list[str] = field(default_factory=list)
    stylesheets: list[str] = field(default_factory=list)
    rules_before: int = 0
    rules_after: int = 0
    selectors_before: int = 0
    selectors_after: int = 0

    def summary(self) -> str:
        return (
            f"{len(self.documents)} document(s), {len(self.stylesheets)} stylesheet(s): "
            f"rules {self.rules_before} -> {self.rules_after}, "
            f"selectors {self.selectors_before} -> {self.selectors_after}"
        )


@dataclass
class RunResult:
    css: str
    report: ReductionReport


class Runner:
    """Wire the fetcher, parser, oracle and reducer together for one run."""

    def __init__(
        self,
        options: ReduceOptions | None = None,
        *,
        oracle: DomOracle | None = None,
        fetcher: StylesheetFetcher | None = None,
    ) -> None:
        self.options = options or ReduceOptions()
        self._oracle = oracle or StaticOracle()
        self._fetcher = fetcher or StylesheetFetcher(
            timeout=self.options.timeout,
            user_agent=self.options.user_agent,
        )

    async def load_documents(self, sources: list[str]) -> list[Document]:
        documents = list(
            await gather_all([self._fetcher.load_document(s) for s in sources])
        )
        if self.options.raw_html:
            documents.append(Document(location=RAW_HTML_LOCATION, html=self.options.raw_html))
        if not documents:
            raise ConfigurationError("No documents to process")
        return documents

    def stylesheet_locations(self, documents: list[Document]) -> list[str]:
        """Resolve the stylesheets to reduce, de-duplicated in first-seen order."""
        opts = self.options
        if opts.stylesheets:
            pairs = [(documents[0], list(opts.stylesheets))]
        else:
            pairs = [(doc, find_stylesheet_links(doc.html)) for doc in documents]

        locations: list[str] = []
        for doc, refs in pairs:
            source = "" if doc.location == RAW_HTML_LOCATION else doc.location
            locations.extend(
                resolve_all(source, refs, htmlroot=opts.htmlroot, csspath=opts.csspath)
            )
        locations = list(dict.fromkeys(locations))

        try:
            skip = [re.compile(p) for p in opts.ignore_sheets]
        except re.error as exc:
            raise ConfigurationError(
                f"Invalid ignore-sheets pattern: {exc}", cause=exc
            ) from exc
        kept = [loc for loc in locations if not any(p.search(loc) for p in skip)]
        for loc in locations:
            if loc not in kept:
                logger.info("Skipping ignored stylesheet %s", loc)
        return kept

    async def run(self, sources: list[str]) -> RunResult:
        documents = await self.load_documents(sources)
        locations = self.stylesheet_locations(documents)
        if not locations and not self.options.raw_css:
            raise ConfigurationError("No stylesheets found")

        texts = await self._fetcher.fetch_all(locations)
        if self.options.raw_css:
            texts.append(self.options.raw_css)
        stylesheet = parse_stylesheet("\n".join(texts))

        report = ReductionReport(
            documents=[d.location for d in documents],
            stylesheets=locations,
            rules_before=stylesheet.count_rules(),
            selectors_before=stylesheet.count_selectors(),
        )
        await reduce(documents, stylesheet, self.options.ignore, self._oracle)
        report.rules_after = stylesheet.count_rules()
        report.selectors_after = stylesheet.count_selectors()
        logger.info(report.summary())
        return RunResult(css=serialize_stylesheet(stylesheet), report=report)

    def run_sync(self, sources: list[str]) -> RunResult:
        return asyncio.run(self.run(sources))
