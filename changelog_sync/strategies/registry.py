"""Ordered collection of extraction strategies."""

from __future__ import annotations

from ..core.types import Tool
from .base import ExtractionStrategy
from .firecrawl import FirecrawlStrategy
from .github_releases import GitHubReleasesStrategy
from .manual import ManualStrategy
from .rss import RssStrategy
from .scrape import ScrapeStrategy


def default_strategies() -> list[ExtractionStrategy]:
    """Return a fresh list of the built-in strategies, most specific first."""
    return [
        ManualStrategy(),
        GitHubReleasesStrategy(),
        RssStrategy(),
        FirecrawlStrategy(),
        ScrapeStrategy(),
    ]


class StrategyRegistry:
    """Fixed, ordered list of strategies.

    Order matters: candidates are always reported in this order and the sync
    engine tries them in this order.
    """

    def __init__(self, strategies: list[ExtractionStrategy] | None = None):
        self._strategies = tuple(strategies if strategies is not None else default_strategies())

    @property
    def strategies(self) -> list[ExtractionStrategy]:
        return list(self._strategies)

    def candidates_for(self, tool: Tool) -> list[ExtractionStrategy]:
        """All strategies whose can_handle accepts tool, in registry order."""
        return [strategy for strategy in self._strategies if strategy.can_handle(tool)]

    def pick_strategy_for_tool(self, tool: Tool) -> ExtractionStrategy | None:
        for strategy in self._strategies:
            if strategy.can_handle(tool):
                return strategy
        return None
