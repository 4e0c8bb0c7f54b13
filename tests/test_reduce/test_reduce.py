"""Tests for usage collection and the reduce entry point."""

import asyncio
import copy

import pytest

from csstrim.collector import collect_used, flatten_selectors
from csstrim.engine import reduce, reduce_sync
from csstrim.errors import OracleError
from csstrim.oracle import Document
from csstrim.stylesheet import MediaRule, OtherRule, SelectorRule, Stylesheet


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class FakeOracle:
    """Reports a fixed set of matching selectors per document location."""

    def __init__(self, matches: dict[str, set[str]], fail: set[str] | None = None) -> None:
        self.matches = matches
        self.fail = fail or set()
        self.calls: list[tuple[str, list[str]]] = []

    async def match_any(self, document, selectors):
        self.calls.append((document.location, list(selectors)))
        await asyncio.sleep(0)
        if document.location in self.fail:
            raise OracleError("evaluation failed", document=document.location)
        found = self.matches.get(document.location, set())
        return [s for s in selectors if s in found]


def _doc(name: str) -> Document:
    return Document(location=name, html="<html></html>")


def _sheet() -> Stylesheet:
    return Stylesheet(
        rules=[
            SelectorRule([".used"], ["color: red"]),
            SelectorRule([".unused"], ["color: blue"]),
            MediaRule("screen", [SelectorRule([".cond"], ["margin: 0"])]),
        ]
    )


# ---------------------------------------------------------------------------
# Collector
# ---------------------------------------------------------------------------


class TestFlattenSelectors:
    def test_recurses_into_media(self):
        ss = _sheet()
        ss.rules.append(OtherRule("@font-face {}"))
        assert flatten_selectors(ss.rules) == [".used", ".unused", ".cond"]


class TestCollectUsed:
    def test_single_batch_of_normalized_selectors(self):
        ss = Stylesheet(rules=[SelectorRule([".a:hover", ".b::before"], [])])
        oracle = FakeOracle({"page": {".a"}})
        used = asyncio.run(collect_used(_doc("page"), ss, oracle))
        assert used == {".a"}
        assert oracle.calls == [("page", [".a", ".b"])]

    def test_empty_stylesheet(self):
        oracle = FakeOracle({})
        assert asyncio.run(collect_used(_doc("page"), Stylesheet(), oracle)) == set()
        assert oracle.calls == []


# ---------------------------------------------------------------------------
# reduce
# ---------------------------------------------------------------------------


class TestReduce:
    def test_end_to_end_scenario(self):
        oracle = FakeOracle({"page": {".used", ".cond"}})
        ss = asyncio.run(reduce([_doc("page")], _sheet(), [], oracle))
        assert ss.rules == [
            SelectorRule([".used"], ["color: red"]),
            MediaRule("screen", [SelectorRule([".cond"], ["margin: 0"])]),
        ]

    def test_usage_is_unioned_across_documents(self):
        oracle = FakeOracle({"one": {".used"}, "two": {".cond"}})
        ss = asyncio.run(reduce([_doc("one"), _doc("two")], _sheet(), [], oracle))
        assert [type(r).__name__ for r in ss.rules] == ["SelectorRule", "MediaRule"]
        assert len(oracle.calls) == 2

    def test_ignore_values_accepted(self):
        oracle = FakeOracle({"page": set()})
        ss = asyncio.run(reduce([_doc("page")], _sheet(), [".unused", "/^\\.co/"], oracle))
        assert ss.rules == [
            SelectorRule([".unused"], ["color: blue"]),
            MediaRule("screen", [SelectorRule([".cond"], ["margin: 0"])]),
        ]

    def test_oracle_failure_aborts_without_filtering(self):
        oracle = FakeOracle({"one": {".used"}}, fail={"two"})
        ss = _sheet()
        original = copy.deepcopy(ss)
        with pytest.raises(OracleError) as exc_info:
            asyncio.run(reduce([_doc("one"), _doc("two")], ss, [], oracle))
        assert exc_info.value.document == "two"
        assert ss == original

    def test_no_documents_keeps_only_unfilterable_rules(self):
        ss = Stylesheet(rules=[SelectorRule([".a"], []), OtherRule("@charset 'x';")])
        result = asyncio.run(reduce([], ss, [], FakeOracle({})))
        assert result.rules == [OtherRule("@charset 'x';")]

    def test_idempotent(self):
        oracle = FakeOracle({"page": {".used"}})
        once = asyncio.run(reduce([_doc("page")], _sheet(), [], oracle))
        twice = asyncio.run(reduce([_doc("page")], copy.deepcopy(once), [], oracle))
        assert twice == once

    def test_reduce_sync(self):
        oracle = FakeOracle({"page": {".unused"}})
        ss = reduce_sync([_doc("page")], _sheet(), [], oracle)
        assert ss.rules == [SelectorRule([".unused"], ["color: blue"])]


class DelayedOracle:
    """Fails "bad" at once and "late-bad" after a delay; others finish after a delay."""

    def __init__(self) -> None:
        self.completed: list[str] = []

    async def match_any(self, document, selectors):
        if document.location == "bad":
            raise OracleError("evaluation failed", document="bad")
        await asyncio.sleep(0.05)
        if document.location == "late-bad":
            raise OracleError("evaluation failed", document="late-bad")
        self.completed.append(document.location)
        return list(selectors)


class TestReduceFailureInFlight:
    def test_running_collections_finish_before_error(self):
        oracle = DelayedOracle()
        ss = _sheet()
        original = copy.deepcopy(ss)
        with pytest.raises(OracleError) as exc_info:
            reduce_sync([_doc("slow"), _doc("bad")], ss, [], oracle)
        assert exc_info.value.document == "bad"
        assert oracle.completed == ["slow"]
        assert ss == original

    def test_first_failure_reported_when_several_fail(self):
        oracle = DelayedOracle()
        with pytest.raises(OracleError) as exc_info:
            reduce_sync([_doc("late-bad"), _doc("slow"), _doc("bad")], _sheet(), [], oracle)
        assert exc_info.value.document == "bad"
        assert oracle.completed == ["slow"]
