"""
Extraction strategies.

Each strategy knows how to pull changelog entries from one class of source:
- ManualStrategy: hand-maintained tools, never extracts anything
- GitHubReleasesStrategy: GitHub releases JSON API
- RssStrategy: RSS (and Atom) feeds
- FirecrawlStrategy: list page plus optional per-entry detail pages
- ScrapeStrategy: heading-based scraping of a changelog page
"""

from .base import ExtractionContext, ExtractionStrategy
from .firecrawl import FirecrawlStrategy
from .github_releases import GitHubReleasesStrategy, releases_api_url
from .manual import ManualStrategy
from .registry import StrategyRegistry, default_strategies
from .rss import RssStrategy
from .scrape import ScrapeStrategy

__all__ = [
    "ExtractionContext",
    "ExtractionStrategy",
    "ManualStrategy",
    "GitHubReleasesStrategy",
    "RssStrategy",
    "FirecrawlStrategy",
    "ScrapeStrategy",
    "StrategyRegistry",
    "default_strategies",
    "releases_api_url",
]
