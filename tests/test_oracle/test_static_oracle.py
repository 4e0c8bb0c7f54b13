"""Tests for the static lxml/cssselect2 oracle."""

import asyncio

from csstrim.oracle import Document, StaticOracle

HTML = """<!DOCTYPE html>
<html>
  <head><title>t</title></head>
  <body>
    <!-- navigation -->
    <nav id="main" class="nav"><a href="#" class="link">home</a></nav>
    <div class="card featured"><p>text</p><input type="checkbox"></div>
  </body>
</html>
"""


def _match(selectors, html=HTML, location="index.html"):
    oracle = StaticOracle()
    return asyncio.run(oracle.match_any(Document(location=location, html=html), selectors))


class TestStaticOracle:
    def test_simple_selectors(self):
        assert _match([".nav", "#main", "p", ".missing"]) == [".nav", "#main", "p"]

    def test_combinators(self):
        selectors = ["nav > a.link", "div.card.featured p", "nav + div", "body > p"]
        assert _match(selectors) == ["nav > a.link", "div.card.featured p", "nav + div"]

    def test_attribute_selector(self):
        assert _match(['input[type="checkbox"]', 'input[type="text"]']) == [
            'input[type="checkbox"]'
        ]

    def test_structural_pseudo_class(self):
        assert _match(["div p:first-child", "li:first-child"]) == ["div p:first-child"]

    def test_unsupported_selector_is_unused(self):
        assert _match(["}{", ".nav"]) == [".nav"]

    def test_preserves_input_order(self):
        assert _match(["p", "#main", "body"]) == ["p", "#main", "body"]

    def test_empty_document_matches_nothing(self):
        assert _match([".a", "body"], html="   ", location="blank.html") == []

    def test_tree_cached_per_location(self):
        oracle = StaticOracle()
        doc = Document(location="index.html", html=HTML)
        asyncio.run(oracle.match_any(doc, ["p"]))
        asyncio.run(oracle.match_any(doc, ["nav"]))
        assert list(oracle._elements) == ["index.html"]
