"""
RSS feed extraction.

Feeds are scanned with regular expressions rather than an XML parser so that
slightly malformed feeds (unescaped ampersands, stray HTML) still yield
entries. Atom ``<entry>`` blocks are read when the feed has no ``<item>``.
"""

from __future__ import annotations

import html
import re

from ..core.types import ChangelogEntry, StrategyType, Tool
from ..parser.dates import date_or_now
from .base import ExtractionContext, ExtractionStrategy, now_ms

ITEM_RE = re.compile(r"<item\b[^>]*>(.*?)</item>", re.IGNORECASE | re.DOTALL)
ATOM_ENTRY_RE = re.compile(r"<entry\b[^>]*>(.*?)</entry>", re.IGNORECASE | re.DOTALL)
CDATA_RE = re.compile(r"<!\[CDATA\[(.*?)\]\]>", re.DOTALL)
ATOM_LINK_RE = re.compile(r"<link\b[^>]*\bhref=[\"']([^\"']+)[\"']", re.IGNORECASE)


def _tag_text(block: str, tag: str) -> str | None:
    match = re.search(rf"<{tag}\b[^>]*>(.*?)</{tag}>", block, re.IGNORECASE | re.DOTALL)
    if not match:
        return None
    text = CDATA_RE.sub(r"\1", match.group(1))
    text = html.unescape(text).strip()
    return text or None


class RssStrategy(ExtractionStrategy):
    name = "rss"

    def can_handle(self, tool: Tool) -> bool:
        url = tool.changelog_url or ""
        return tool.strategy_type == StrategyType.RSS_FEED or "/feed" in url or url.endswith(".xml")

    def extract(self, tool: Tool, context: ExtractionContext) -> list[ChangelogEntry]:
        url = tool.changelog_url
        if not url:
            return []

        xml = context.fetch_html(url)
        if not xml or not xml.strip():
            return []

        stamp = now_ms()
        entries: list[ChangelogEntry] = []
        items = ITEM_RE.findall(xml)
        if items:
            for block in items:
                title = _tag_text(block, "title")
                link = _tag_text(block, "link")
                if title is None and link is None:
                    continue
                entries.append(
                    ChangelogEntry(
                        id=f"{tool.id}-rss-{len(entries)}-{stamp}",
                        tool_id=tool.id,
                        date=date_or_now(_tag_text(block, "pubDate")),
                        title=title,
                        url=link,
                        content=_tag_text(block, "description"),
                    )
                )
            return entries

        for block in ATOM_ENTRY_RE.findall(xml):
            title = _tag_text(block, "title")
            link_match = ATOM_LINK_RE.search(block)
            link = html.unescape(link_match.group(1)) if link_match else None
            if title is None and link is None:
                continue
            entries.append(
                ChangelogEntry(
                    id=f"{tool.id}-rss-{len(entries)}-{stamp}",
                    tool_id=tool.id,
                    date=date_or_now(_tag_text(block, "published") or _tag_text(block, "updated")),
                    title=title,
                    url=link,
                    content=_tag_text(block, "summary"),
                )
            )
        return entries
