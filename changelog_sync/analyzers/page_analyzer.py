"""
Quick listing-vs-single-item classification of a page.

Pure function over raw HTML; used to decide whether a changelog URL points at
an index of entries or at one entry.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from ..parser.html_entries import parse_entries_from_html

HEADING_RE = re.compile(r"<h[1-6]", re.IGNORECASE)
LINK_RE = re.compile(r"<a\s+", re.IGNORECASE)


@dataclass
class PageAnalysis:
    is_list: bool
    link_count: int
    heading_count: int
    probable_entries: int


def analyze_page(html: str) -> PageAnalysis:
    """Classify a page as a listing or a single item.

    A page is a list when it has at least two headings, at least three
    links, or at least three parsed candidate entries.
    """
    html = html or ""
    entries = parse_entries_from_html(html)
    heading_count = len(HEADING_RE.findall(html))
    link_count = len(LINK_RE.findall(html))

    is_list = heading_count >= 2 or link_count >= 3 or len(entries) >= 3
    return PageAnalysis(
        is_list=is_list,
        link_count=link_count,
        heading_count=heading_count,
        probable_entries=len(entries),
    )
