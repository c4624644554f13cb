"""
Two-step list/detail extraction.

The list page is fetched once and every anchor on it becomes one entry. With
``two_step_extraction`` enabled each anchor's target is fetched as a detail
page, which then supplies the entry's date and content; otherwise the list
page itself is used for both.
"""

from __future__ import annotations

from urllib.parse import urljoin

from ..core.types import ChangelogEntry, Tool
from ..parser.dates import date_or_now
from ..parser.metadata import extract_version_from_text, make_soup, time_value
from .base import ExtractionContext, ExtractionStrategy, logger, now_ms

CONTENT_LIMIT = 100


class FirecrawlStrategy(ExtractionStrategy):
    name = "firecrawl"

    def can_handle(self, tool: Tool) -> bool:
        url = tool.changelog_url or ""
        if "firecrawl" in url:
            return True
        return bool(tool.scrape_config and tool.scrape_config.two_step_extraction)

    def extract(self, tool: Tool, context: ExtractionContext) -> list[ChangelogEntry]:
        url = tool.changelog_url
        if not url:
            return []

        list_html = context.fetch_html(url)
        if not list_html:
            return []

        config = tool.scrape_config
        two_step = bool(config and config.two_step_extraction)
        detail_selector = config.detail_page_selector if config else None
        date_format = config.date_format if config else None

        stamp = now_ms()
        entries: list[ChangelogEntry] = []
        # Detail pages are fetched one after another, never in parallel.
        for idx, anchor in enumerate(make_soup(list_html).find_all("a")):
            href = anchor.get("href") or None
            title = (anchor.get_text() or anchor.get("title") or "").strip() or None

            detail_html = list_html
            if two_step and href:
                try:
                    detail_html = context.fetch_html(urljoin(url, href))
                except Exception as exc:  # noqa: BLE001
                    logger.warning("Detail page fetch failed for %s (%s): %s", tool.id, href, exc)
                    detail_html = ""

            detail_soup = make_soup(detail_html or "")
            entries.append(
                ChangelogEntry(
                    id=f"{tool.id}-fire-{idx}-{stamp}",
                    tool_id=tool.id,
                    date=date_or_now(time_value(detail_soup.find("time")), date_format),
                    version=extract_version_from_text(title or ""),
                    title=title,
                    url=href,
                    content=_detail_content(detail_soup, detail_html or "", detail_selector),
                )
            )
        return entries


def _detail_content(soup, detail_html: str, selector: str | None) -> str:
    """Return the first 100 characters of the detail page.

    When a detail_page_selector is configured and matches, the text of the
    matched element is used instead of the raw markup.
    """
    if selector:
        block = soup.select_one(selector)
        if block is not None:
            return block.get_text().strip()[:CONTENT_LIMIT]
    return detail_html[:CONTENT_LIMIT]
