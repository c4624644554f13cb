"""Tests for StrategySyncEngine."""

from __future__ import annotations

from datetime import datetime, timezone

from changelog_sync.core.repository import InMemoryToolsRepository
from changelog_sync.core.types import ChangelogEntry, SyncStatus, Tool
from changelog_sync.engine import StrategySyncEngine
from changelog_sync.strategies import (
    ExtractionStrategy,
    GitHubReleasesStrategy,
    ScrapeStrategy,
    StrategyRegistry,
)


class FakeContext:
    def __init__(self, html: str = "<html></html>"):
        self.html = html

    def fetch_html(self, url: str) -> str:
        return self.html

    def fetch_json(self, url: str):
        return {}


class RaisingContext:
    def fetch_html(self, url: str) -> str:
        raise RuntimeError(f"offline: {url}")

    def fetch_json(self, url: str):
        raise RuntimeError(f"offline: {url}")


def _entry(tool_id: str, title: str) -> ChangelogEntry:
    return ChangelogEntry(id=f"{tool_id}-{title}", tool_id=tool_id, date=datetime.now(timezone.utc), title=title)


class StaticStrategy(ExtractionStrategy):
    name = "static"

    def __init__(self, titles: list[str], handles: bool = True):
        self.titles = titles
        self.handles = handles
        self.calls: list[str] = []

    def can_handle(self, tool: Tool) -> bool:
        return self.handles

    def extract(self, tool, context):
        self.calls.append(tool.id)
        return [_entry(tool.id, title) for title in self.titles]


class FailingStrategy(ExtractionStrategy):
    name = "failing"

    def __init__(self, message: str):
        self.message = message
        self.calls = 0

    def can_handle(self, tool: Tool) -> bool:
        return True

    def extract(self, tool, context):
        self.calls += 1
        raise RuntimeError(self.message)


def _engine(tools: list[Tool], strategies: list[ExtractionStrategy], context=None) -> StrategySyncEngine:
    return StrategySyncEngine(
        InMemoryToolsRepository(tools),
        context or FakeContext(),
        registry=StrategyRegistry(strategies),
    )


def test_happy_path_counts_entries():
    engine = _engine([Tool(id="tool-1", name="t")], [StaticStrategy(["a", "b"])])

    res = engine.run_tool_sync("tool-1")

    assert res.status == SyncStatus.SUCCESS
    assert res.synced_count == 2
    assert res.skipped_count == 0
    assert res.errors == []


def test_unknown_tool_is_an_error_result():
    engine = _engine([Tool(id="known", name="k")], [StaticStrategy(["a"])])

    res = engine.run_tool_sync("missing")

    assert res.status == SyncStatus.ERROR
    assert res.synced_count == 0
    assert res.errors == ["tool not found: missing"]


def test_no_candidate_strategy():
    engine = _engine([Tool(id="t", name="t")], [StaticStrategy(["a"], handles=False)])

    res = engine.run_tool_sync("t")

    assert res.status == SyncStatus.ERROR
    assert res.errors == ["no strategy found"]


def test_falls_back_when_primary_raises():
    primary = FailingStrategy("primary failed")
    fallback = StaticStrategy(["x"])
    engine = _engine([Tool(id="t", name="t")], [primary, fallback])

    res = engine.run_tool_sync("t")

    assert primary.calls == 1
    assert res.status == SyncStatus.SUCCESS
    assert res.synced_count == 1
    assert "primary failed" not in " ".join(res.errors)


def test_first_success_wins_without_merging():
    first = StaticStrategy(["a"])
    second = StaticStrategy(["b", "c"])
    engine = _engine([Tool(id="t", name="t")], [first, second])

    res = engine.run_tool_sync("t")

    assert res.synced_count == 1
    assert second.calls == []


def test_empty_result_is_success_and_stops_fallback():
    empty = StaticStrategy([])
    later = StaticStrategy(["a"])
    engine = _engine([Tool(id="t", name="t")], [empty, later])

    res = engine.run_tool_sync("t")

    assert res.status == SyncStatus.SUCCESS
    assert res.synced_count == 0
    assert later.calls == []


def test_only_last_error_is_kept():
    engine = _engine([Tool(id="t", name="t")], [FailingStrategy("boom"), FailingStrategy("kaboom")])

    res = engine.run_tool_sync("t")

    assert res.status == SyncStatus.ERROR
    assert res.synced_count == 0
    assert res.errors == ["kaboom"]


def test_empty_error_message_becomes_unknown():
    engine = _engine([Tool(id="t", name="t")], [FailingStrategy("")])
    assert engine.run_tool_sync("t").errors == ["unknown error"]


def test_github_fetch_failure_does_not_fall_back():
    tool = Tool(
        id="gh",
        name="gh",
        github_url="https://github.com/acme/tool",
        changelog_url="https://example.com/changelog",
    )
    scrape = ScrapeStrategy()
    engine = _engine([tool], [GitHubReleasesStrategy(), scrape], context=RaisingContext())

    res = engine.run_tool_sync("gh")

    assert res.status == SyncStatus.SUCCESS
    assert res.synced_count == 0


def test_scrape_failure_reports_fetch_error():
    tool = Tool(id="s", name="s", changelog_url="https://example.com/changelog")
    engine = _engine([tool], [ScrapeStrategy()], context=RaisingContext())

    res = engine.run_tool_sync("s")

    assert res.status == SyncStatus.ERROR
    assert res.errors == ["offline: https://example.com/changelog"]


def test_call_context_overrides_default():
    tool = Tool(id="s", name="s", changelog_url="https://example.com/changelog")
    engine = _engine([tool], [ScrapeStrategy()], context=RaisingContext())

    res = engine.run_tool_sync("s", FakeContext("<div><h2>One</h2></div><div><h2>Two</h2></div>"))

    assert res.status == SyncStatus.SUCCESS
    assert res.synced_count == 2


def test_run_bulk_sync_keeps_input_order():
    tools = [Tool(id="a", name="a"), Tool(id="b", name="b")]
    strategy = StaticStrategy(["x"])
    engine = _engine(tools, [strategy])

    results = engine.run_bulk_sync(["b", "missing", "a"])

    assert len(results) == 3
    assert results[0].status == SyncStatus.SUCCESS
    assert results[1].errors == ["tool not found: missing"]
    assert results[2].status == SyncStatus.SUCCESS
    assert strategy.calls == ["b", "a"]
