"""Summary of a single changelog entry page."""

from __future__ import annotations

from dataclasses import dataclass

from ..parser.metadata import extract_date_from_html, extract_title, make_soup

SNIPPET_LIMIT = 400


@dataclass
class DetailAnalysis:
    title: str | None
    date: str | None
    content_snippet: str | None
    length: int


def analyze_detail_page(html: str) -> DetailAnalysis:
    """Extract title, date and a short content snippet from a detail page.

    The snippet is the text of the first ``<p>`` element, cut to 400
    characters, or None when that paragraph is empty. length is the size of
    the raw HTML.
    """
    html = html or ""
    snippet = None
    if html.strip():
        paragraph = make_soup(html).find("p")
        if paragraph is not None:
            snippet = paragraph.get_text().strip()[:SNIPPET_LIMIT] or None

    return DetailAnalysis(
        title=extract_title(html),
        date=extract_date_from_html(html),
        content_snippet=snippet,
        length=len(html),
    )
