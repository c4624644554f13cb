"""
Core domain models and repositories.

This package contains the data types that cross the extraction subsystem and
the repository interfaces the sync engine and service depend on.
"""

from .types import (
    ChangelogEntry,
    ExtractionConfig,
    Selectors,
    StrategyType,
    SyncLog,
    SyncResult,
    SyncStatus,
    Tool,
    ToolStatus,
    ToolSyncStatus,
)
from .repository import (
    InMemorySyncLogsRepository,
    InMemoryToolsRepository,
    JsonlSyncLogsRepository,
    ListToolsInput,
    SyncLogsRepository,
    ToolsRepository,
    YamlToolsRepository,
)

__all__ = [
    "ChangelogEntry",
    "ExtractionConfig",
    "Selectors",
    "StrategyType",
    "SyncLog",
    "SyncResult",
    "SyncStatus",
    "Tool",
    "ToolStatus",
    "ToolSyncStatus",
    "ListToolsInput",
    "ToolsRepository",
    "SyncLogsRepository",
    "InMemoryToolsRepository",
    "YamlToolsRepository",
    "InMemorySyncLogsRepository",
    "JsonlSyncLogsRepository",
]
