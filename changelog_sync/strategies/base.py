"""
Abstract interfaces for extraction strategies.

ExtractionContext is the IO capability handed to strategies; strategies never
open network connections themselves. ExtractionStrategy is the pluggable
algorithm that turns one class of source into ChangelogEntry objects.

Contract for extract():
- returning [] means "ran fine, found nothing"
- raising means "cannot service this tool right now" and makes the sync
  engine fall back to the next candidate strategy
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging
import time
from typing import Any

from ..core.types import ChangelogEntry, Tool

logger = logging.getLogger("changelog_sync.strategies")


class ExtractionContext(ABC):
    """IO capability used by strategies for one sync call."""

    @abstractmethod
    def fetch_html(self, url: str) -> str:
        """Return the body of url as text. Raises on transport failure."""
        raise NotImplementedError

    @abstractmethod
    def fetch_json(self, url: str) -> Any:
        """Return the decoded JSON body of url. Raises on transport failure."""
        raise NotImplementedError


class ExtractionStrategy(ABC):
    """A way of pulling changelog entries out of one class of source.

    Attributes:
        name: Short identifier used in logs
    """

    name: str = "base"

    @abstractmethod
    def can_handle(self, tool: Tool) -> bool:
        """Cheap, side-effect-free check over the tool's fields."""
        raise NotImplementedError

    @abstractmethod
    def extract(self, tool: Tool, context: ExtractionContext) -> list[ChangelogEntry]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def now_ms() -> int:
    """Wall-clock epoch milliseconds, embedded in synthesized entry ids."""
    return int(time.time() * 1000)
