"""Pagination detection heuristics for changelog listing pages."""

from __future__ import annotations

from dataclasses import dataclass
import re

# Checked in this order; the first hit decides the pagination type.
REL_RE = re.compile(r"""rel=["'](?:next|prev)["']""", re.IGNORECASE)
PREV_NEXT_RE = re.compile(r"\b(next|previous|prev|older|newer|older posts)\b", re.IGNORECASE)
NUMERIC_RE = re.compile(r"page=|page/|>\s*\d+\s*<", re.IGNORECASE)
PAGE_NUMBER_RE = re.compile(r">\s*(\d+)\s*<")


@dataclass
class PaginationDetection:
    """Pagination verdict.

    Attributes:
        has_pagination: Whether any pagination cue was found
        type: "rel", "prev-next" or "numeric"; None without pagination
        pages: Distinct page numbers seen (numeric type only), None if unknown
    """
    has_pagination: bool
    type: str | None = None
    pages: int | None = None


def detect_pagination(html: str) -> PaginationDetection:
    if not html or not html.strip():
        return PaginationDetection(has_pagination=False)

    if REL_RE.search(html):
        return PaginationDetection(has_pagination=True, type="rel")

    if PREV_NEXT_RE.search(html):
        return PaginationDetection(has_pagination=True, type="prev-next")

    if len(NUMERIC_RE.findall(html)) >= 2:
        # Rough estimate: number of distinct ">N<" tokens on the page
        numbers = set(PAGE_NUMBER_RE.findall(html))
        return PaginationDetection(has_pagination=True, type="numeric", pages=len(numbers) or None)

    return PaginationDetection(has_pagination=False)
