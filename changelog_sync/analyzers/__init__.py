"""
Heuristic page classifiers.

Pure functions over raw HTML that judge whether a page is a listing or a
single entry, and whether a listing is paginated.
"""

from .detail_page import DetailAnalysis, analyze_detail_page
from .page_analyzer import PageAnalysis, analyze_page
from .pagination import PaginationDetection, detect_pagination

__all__ = [
    "PageAnalysis",
    "analyze_page",
    "PaginationDetection",
    "detect_pagination",
    "DetailAnalysis",
    "analyze_detail_page",
]
