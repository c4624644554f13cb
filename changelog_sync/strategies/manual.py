from __future__ import annotations

from ..core.types import ChangelogEntry, Tool
from .base import ExtractionContext, ExtractionStrategy


class ManualStrategy(ExtractionStrategy):
    """Tools without any scrape config or changelog URL.

    Their entries are written by hand, so there is nothing to extract.
    """

    name = "manual"

    def can_handle(self, tool: Tool) -> bool:
        return tool.scrape_config is None and not tool.changelog_url

    def extract(self, tool: Tool, context: ExtractionContext) -> list[ChangelogEntry]:
        return []
