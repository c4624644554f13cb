"""Generic heading-based changelog page scraping."""

from __future__ import annotations

from ..core.types import ChangelogEntry, StrategyType, Tool
from ..parser.dates import date_or_now
from ..parser.html_entries import parse_heading_entries
from ..parser.metadata import extract_version_from_text, make_soup
from .base import ExtractionContext, ExtractionStrategy, now_ms


class ScrapeStrategy(ExtractionStrategy):
    """Treats every heading on the changelog page as one entry.

    Link and date come from the heading's nearest article/li/div ancestor
    (see parser.html_entries); a missing or unparseable date becomes now.
    """

    name = "scrape"

    def can_handle(self, tool: Tool) -> bool:
        config = tool.scrape_config
        if config and config.selectors and config.selectors.entries:
            return True
        if tool.strategy_type in (StrategyType.LIST_PAGE, StrategyType.CARD_DETAIL):
            return True
        url = tool.changelog_url or tool.website or ""
        return "/changelog" in url

    def extract(self, tool: Tool, context: ExtractionContext) -> list[ChangelogEntry]:
        url = tool.changelog_url
        if not url:
            return []

        html = context.fetch_html(url)
        if not html or not html.strip():
            return []

        date_format = tool.scrape_config.date_format if tool.scrape_config else None
        stamp = now_ms()
        return [
            ChangelogEntry(
                id=f"{tool.id}-{idx}-{stamp}",
                tool_id=tool.id,
                date=date_or_now(parsed.date, date_format),
                version=extract_version_from_text(parsed.title or ""),
                title=parsed.title,
                url=parsed.url,
            )
            for idx, parsed in enumerate(parse_heading_entries(make_soup(html)))
        ]
