from datetime import datetime, timezone

from changelog_sync.parser.dates import parse_date
from changelog_sync.parser.metadata import (
    extract_date_from_html,
    extract_meta_tags,
    extract_title,
    extract_version_from_text,
)


def test_extract_title_prefers_og_title():
    html = '<html><head><title>Page title</title><meta property="og:title" content=" OG Title "/></head></html>'
    assert extract_title(html) == "OG Title"


def test_extract_title_falls_back_to_title_then_h1():
    assert extract_title("<title>Page title</title>") == "Page title"
    assert extract_title("<h1> Heading </h1><h1>Second</h1>") == "Heading"
    assert extract_title("<p>nothing here</p>") is None
    assert extract_title("   ") is None


def test_extract_meta_tags_maps_name_and_property():
    html = (
        '<meta name="description" content="desc"/>'
        '<meta property="og:image" content="img.png"/>'
        '<meta charset="utf-8"/>'
    )
    tags = extract_meta_tags(html)
    assert tags == {"description": "desc", "og:image": "img.png"}


def test_extract_date_prefers_datetime_attribute():
    assert extract_date_from_html('<time datetime="2024-06-01">June</time>') == "2024-06-01"
    assert extract_date_from_html("<time> June 3, 2024 </time>") == "June 3, 2024"
    assert extract_date_from_html("<p>no time</p>") is None


def test_extract_version_from_text():
    assert extract_version_from_text("This release v1.2.3 contains changes") == "v1.2.3"
    assert extract_version_from_text("release 2.0") == "2.0"
    assert extract_version_from_text("no version here") is None
    assert extract_version_from_text("") is None


def test_parse_date_handles_iso_and_rfc822():
    iso = parse_date("2024-03-01")
    assert (iso.year, iso.month, iso.day) == (2024, 3, 1)
    assert iso.tzinfo is not None

    zulu = parse_date("2024-03-01T10:30:00Z")
    assert zulu.hour == 10 and zulu.utcoffset().total_seconds() == 0

    rfc = parse_date("Tue, 05 Mar 2024 08:00:00 GMT")
    assert (rfc.year, rfc.month, rfc.day) == (2024, 3, 5)

    assert parse_date("yesterday-ish") is None
    assert parse_date(None) is None


def test_parse_date_handles_free_form_text():
    assert parse_date("March 1, 2024") == datetime(2024, 3, 1, tzinfo=timezone.utc)
    assert parse_date("May 2, 2024") == datetime(2024, 5, 2, tzinfo=timezone.utc)


def test_parse_date_tries_explicit_format_first():
    assert parse_date("01/03/2024", "%d/%m/%Y") == datetime(2024, 3, 1, tzinfo=timezone.utc)
    # A format that does not match falls back to lenient parsing.
    assert parse_date("2024-03-01", "%d/%m/%Y") == datetime(2024, 3, 1, tzinfo=timezone.utc)
