"""
HTML parsing helpers.

Pure functions used by the strategies and analyzers: metadata extraction,
heading-based entry discovery and lenient date parsing.
"""

from .dates import date_or_now, parse_date, utc_now
from .html_entries import ParsedEntry, entry_container, parse_entries_from_html, parse_heading_entries
from .metadata import (
    extract_date_from_html,
    extract_meta_tags,
    extract_title,
    extract_version_from_text,
    make_soup,
    time_value,
)

__all__ = [
    "ParsedEntry",
    "parse_entries_from_html",
    "parse_heading_entries",
    "entry_container",
    "extract_title",
    "extract_meta_tags",
    "extract_date_from_html",
    "extract_version_from_text",
    "make_soup",
    "time_value",
    "parse_date",
    "date_or_now",
    "utc_now",
]
