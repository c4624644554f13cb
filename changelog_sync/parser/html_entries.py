"""
Heading-based entry discovery for changelog-style HTML pages.

Each heading (h1-h6) is treated as the title of one entry. The entry's link
and date come from the heading's nearest ``article``/``li``/``div`` ancestor,
or from the heading's direct parent when no such ancestor exists: the first
anchor inside that container supplies the URL and the first ``<time>``
supplies the date.
"""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup

from .metadata import make_soup, time_value

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
CONTAINER_TAGS = ["article", "li", "div"]
ARTICLE_CONTENT_LIMIT = 200


@dataclass
class ParsedEntry:
    """A candidate entry found on a page, before it is bound to a tool.

    Attributes:
        title: Heading text, or None if empty
        url: href of the first anchor in the entry's container
        date: Raw date string (datetime attribute or text of the first <time>)
        content: Short text excerpt (only set by the <article> fallback)
    """
    title: str | None = None
    url: str | None = None
    date: str | None = None
    content: str | None = None


def entry_container(heading):
    """Return the nearest article/li/div ancestor of heading, else its parent."""
    container = heading.find_parent(CONTAINER_TAGS)
    if container is not None:
        return container
    return heading.parent


def parse_heading_entries(soup: BeautifulSoup) -> list[ParsedEntry]:
    entries: list[ParsedEntry] = []
    for heading in soup.find_all(HEADING_TAGS):
        container = entry_container(heading)
        link = container.find("a") if container is not None else None
        time_tag = container.find("time") if container is not None else None
        entries.append(
            ParsedEntry(
                title=heading.get_text().strip() or None,
                url=link.get("href") if link is not None else None,
                date=time_value(time_tag),
            )
        )
    return entries


def _parse_article_entries(soup: BeautifulSoup) -> list[ParsedEntry]:
    entries: list[ParsedEntry] = []
    for article in soup.find_all("article"):
        heading = article.find(["h1", "h2"])
        link = article.find("a")
        entries.append(
            ParsedEntry(
                title=(heading.get_text().strip() or None) if heading is not None else None,
                url=link.get("href") if link is not None else None,
                date=time_value(article.find("time")),
                content=article.get_text().strip()[:ARTICLE_CONTENT_LIMIT],
            )
        )
    return entries


def parse_entries_from_html(html: str) -> list[ParsedEntry]:
    """Parse a page into candidate entries.

    Falls back to scanning ``<article>`` elements when the page has no
    headings at all.

    Args:
        html: Raw HTML document or fragment

    Returns:
        Candidate entries in document order; [] for blank input
    """
    if not html or not html.strip():
        return []
    soup = make_soup(html)
    entries = parse_heading_entries(soup)
    if not entries:
        entries = _parse_article_entries(soup)
    return entries
