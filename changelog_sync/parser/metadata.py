"""
Metadata extraction from raw HTML.

Pure functions: no IO, deterministic for a given input. All of them accept
blank input and return an empty result rather than raising.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

# Matches "v1.2.3", "1.2.3" and "2.0"
VERSION_RE = re.compile(r"v?\d+\.\d+(?:\.\d+)?", re.IGNORECASE)


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def extract_title(html: str) -> str | None:
    """Return the page title.

    Priority: ``og:title`` meta content, then ``<title>`` text, then the
    first ``<h1>`` text.
    """
    if not html or not html.strip():
        return None
    soup = make_soup(html)

    og_title = soup.find("meta", attrs={"property": "og:title"})
    if og_title is not None and og_title.get("content"):
        return og_title["content"].strip()

    title_tag = soup.find("title")
    if title_tag is not None and title_tag.get_text().strip():
        return title_tag.get_text().strip()

    h1 = soup.find("h1")
    if h1 is not None and h1.get_text().strip():
        return h1.get_text().strip()
    return None


def extract_meta_tags(html: str) -> dict[str, str]:
    """Map every meta tag's name (or property) to its content."""
    tags: dict[str, str] = {}
    if not html or not html.strip():
        return tags
    for meta in make_soup(html).find_all("meta"):
        key = meta.get("name") or meta.get("property")
        value = meta.get("content")
        if key and value:
            tags[key] = value
    return tags


def extract_date_from_html(html: str) -> str | None:
    """Return the first ``<time>`` element's datetime attribute, else its text."""
    if not html or not html.strip():
        return None
    return time_value(make_soup(html).find("time"))


def time_value(time_tag) -> str | None:
    """Read the datetime attribute of a ``<time>`` tag, falling back to its text."""
    if time_tag is None:
        return None
    value = time_tag.get("datetime")
    if value is None:
        value = time_tag.get_text()
    value = value.strip()
    return value or None


def extract_version_from_text(text: str) -> str | None:
    if not text:
        return None
    match = VERSION_RE.search(text)
    return match.group(0) if match else None
