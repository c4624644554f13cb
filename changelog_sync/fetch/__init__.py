"""
HTTP fetching.

This package provides the httpx-backed ExtractionContext used outside tests.
"""

from .fetcher import HttpExtractionContext, build_extraction_context

__all__ = [
    "HttpExtractionContext",
    "build_extraction_context",
]
