"""Lenient date parsing for scraped and feed-provided timestamps."""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

from dateutil import parser as dateutil_parser


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_date(value: str | None, date_format: str | None = None) -> datetime | None:
    """Parse a timestamp found in markup or a feed.

    When date_format is given it is tried first with ``strptime``. Then ISO
    8601 (``2024-03-01``, ``2024-03-01T10:00:00Z``), the RFC 822 form used by
    RSS ``pubDate``, and finally free-form text such as ``March 1, 2024``.
    Naive results are taken as UTC.

    Returns:
        A timezone-aware datetime, or None if the value is blank or unparseable
    """
    if not value:
        return None
    raw = value.strip()
    if not raw:
        return None

    parsed = None
    if date_format:
        try:
            parsed = datetime.strptime(raw, date_format)
        except ValueError:
            parsed = None
    if parsed is None:
        parsed = _parse_lenient(raw)
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_lenient(raw: str) -> datetime | None:
    iso = f"{raw[:-1]}+00:00" if raw.endswith("Z") else raw
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(raw)
    except (TypeError, ValueError, IndexError):
        pass
    try:
        return dateutil_parser.parse(raw)
    except (ValueError, OverflowError):
        return None


def date_or_now(value: str | None, date_format: str | None = None) -> datetime:
    """Parse value, falling back to the current UTC time."""
    return parse_date(value, date_format) or utc_now()
