"""
changelog_sync - changelog aggregation for third-party software tools.

This package pulls changelog-style updates from heterogeneous public sources
(HTML changelog pages, RSS/Atom feeds, GitHub releases) into one canonical
entry format. Extraction strategies are tried in a fixed order and the sync
engine falls back to the next one when a strategy fails.

Main entry point is the CLI via the `changelog-sync` command.

Example:
    $ changelog-sync sync vite linear --catalog tools.yaml
"""

__all__ = [
    "__version__",
    "StrategySyncEngine",
    "SyncEngine",
    "SyncService",
    "StrategyRegistry",
    "create_sync_service",
]
__version__ = "0.1.0"

from .engine import StrategySyncEngine, SyncEngine
from .service import SyncService, create_sync_service
from .strategies.registry import StrategyRegistry
