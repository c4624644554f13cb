"""
Repository interfaces and the file-backed stores used by the CLI.

The sync core only depends on the two abstract classes: ToolsRepository for
catalog lookups and SyncLogsRepository for audit records. The concrete
classes keep the catalog in a YAML file and the sync logs in an append-only
JSONL file, following the same one-JSON-object-per-line layout as the run log.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import datetime, timezone
import json
from pathlib import Path
import random
import string
import time

import yaml

from ..errors import SyncLogsRepositoryError, ToolsRepositoryError, ValidationError
from .types import SyncLog, SyncStatus, Tool


@dataclass
class ListToolsInput:
    """Filter for ToolsRepository.list_tools. An empty input lists everything."""
    limit: int | None = None
    offset: int | None = None
    search: str | None = None


class ToolsRepository(ABC):
    @abstractmethod
    def list_tools(self, input: ListToolsInput) -> list[Tool]:
        raise NotImplementedError


class SyncLogsRepository(ABC):
    @abstractmethod
    def create_log(self, log: SyncLog) -> SyncLog:
        """Persist a sync log and return it with id and created_at assigned."""
        raise NotImplementedError

    @abstractmethod
    def list_by_tool(self, tool_id: str, limit: int | None = None) -> list[SyncLog]:
        raise NotImplementedError

    @abstractmethod
    def list_recent_failures(self, limit: int | None = None) -> list[SyncLog]:
        raise NotImplementedError


def generate_sync_log_id() -> str:
    """Return an id shaped like ``synclog_<epoch ms>_<7 random chars>``."""
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=7))
    return f"synclog_{int(time.time() * 1000)}_{suffix}"


def _apply_filter(tools: list[Tool], input: ListToolsInput) -> list[Tool]:
    items = tools
    if input.search:
        needle = input.search.lower()
        items = [tool for tool in items if needle in tool.name.lower()]
    start = input.offset or 0
    if input.limit is not None:
        return items[start:start + input.limit]
    return items[start:]


class InMemoryToolsRepository(ToolsRepository):
    def __init__(self, tools: list[Tool] | None = None):
        self._tools = list(tools or [])

    def list_tools(self, input: ListToolsInput) -> list[Tool]:
        return _apply_filter(self._tools, input)


class YamlToolsRepository(ToolsRepository):
    """Tool catalog stored as a YAML file.

    Expected layout::

        tools:
          - id: vite
            name: Vite
            githubUrl: https://github.com/vitejs/vite
          - id: linear
            name: Linear
            changelogUrl: https://linear.app/changelog
            strategyType: list-page

    The file is re-read on every call so edits are picked up between runs.
    """

    def __init__(self, path: Path):
        self.path = path

    def list_tools(self, input: ListToolsInput) -> list[Tool]:
        return _apply_filter(self._load(), input)

    def _load(self) -> list[Tool]:
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                raw = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ToolsRepositoryError(f"Cannot read tool catalog {self.path}: {exc}") from exc

        rows = raw.get("tools", []) if isinstance(raw, dict) else raw
        if not isinstance(rows, list):
            raise ToolsRepositoryError(f"Tool catalog {self.path} must contain a list of tools")
        for row in rows:
            if not isinstance(row, dict):
                raise ToolsRepositoryError(
                    f"Invalid tool in catalog {self.path}: expected a mapping, got {row!r}"
                )
        try:
            return [Tool.from_dict(row) for row in rows]
        except ValidationError as exc:
            raise ToolsRepositoryError(
                f"Invalid tool in catalog {self.path}: {exc.message}", details=exc.details
            ) from exc


def _stamp(log: SyncLog) -> SyncLog:
    return replace(
        log,
        id=log.id or generate_sync_log_id(),
        created_at=log.created_at or datetime.now(timezone.utc),
    )


def _newest_first(logs: list[SyncLog], limit: int | None) -> list[SyncLog]:
    ordered = sorted(logs, key=lambda log: log.started_at, reverse=True)
    return ordered[:limit] if limit is not None else ordered


class InMemorySyncLogsRepository(SyncLogsRepository):
    def __init__(self):
        self.logs: list[SyncLog] = []

    def create_log(self, log: SyncLog) -> SyncLog:
        stored = _stamp(log)
        self.logs.append(stored)
        return stored

    def list_by_tool(self, tool_id: str, limit: int | None = None) -> list[SyncLog]:
        return _newest_first([log for log in self.logs if log.tool_id == tool_id], limit)

    def list_recent_failures(self, limit: int | None = None) -> list[SyncLog]:
        return _newest_first([log for log in self.logs if log.status == SyncStatus.ERROR], limit)


class JsonlSyncLogsRepository(SyncLogsRepository):
    """Append-only sync log store, one JSON object per line."""

    def __init__(self, path: Path):
        self.path = path

    def create_log(self, log: SyncLog) -> SyncLog:
        stored = _stamp(log)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(json.dumps(stored.to_dict(), ensure_ascii=True))
                handle.write("\n")
        except OSError as exc:
            raise SyncLogsRepositoryError(f"Cannot write sync log {self.path}: {exc}") from exc
        return stored

    def list_by_tool(self, tool_id: str, limit: int | None = None) -> list[SyncLog]:
        return _newest_first([log for log in self._read() if log.tool_id == tool_id], limit)

    def list_recent_failures(self, limit: int | None = None) -> list[SyncLog]:
        return _newest_first([log for log in self._read() if log.status == SyncStatus.ERROR], limit)

    def _read(self) -> list[SyncLog]:
        if not self.path.exists():
            return []
        logs: list[SyncLog] = []
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                for line in handle:
                    line = line.strip()
                    if not line:
                        continue
                    logs.append(SyncLog.from_dict(json.loads(line)))
        except (OSError, json.JSONDecodeError) as exc:
            raise SyncLogsRepositoryError(f"Cannot read sync log {self.path}: {exc}") from exc
        return logs
