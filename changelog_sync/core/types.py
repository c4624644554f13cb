"""
Core data types for changelog_sync.

This module defines the value shapes that cross the extraction subsystem:
- Tool / ExtractionConfig: the catalog record being synced (read-only here)
- ChangelogEntry: one extracted release or update item
- SyncResult: the uniform outcome of a sync attempt
- SyncLog: the audit record written by the sync service after every attempt

Status-like fields are plain strings; the holder classes below list the
accepted values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..errors import ValidationError


class SyncStatus:
    SUCCESS = "success"
    ERROR = "error"
    # Part of the result contract; nothing produces it yet.
    PARTIAL = "partial"

    ALL = (SUCCESS, ERROR, PARTIAL)


class StrategyType:
    LIST_PAGE = "list-page"
    CARD_DETAIL = "card-detail"
    RSS_FEED = "rss-feed"

    ALL = (LIST_PAGE, CARD_DETAIL, RSS_FEED)


class ToolStatus:
    REQUESTED = "requested"
    ACTIVE = "active"
    INACTIVE = "inactive"

    ALL = (REQUESTED, ACTIVE, INACTIVE)


class ToolSyncStatus:
    PENDING = "pending"
    SYNCED = "synced"
    FLAGGED = "flagged"
    FAILED = "failed"

    ALL = (PENDING, SYNCED, FLAGGED, FAILED)


@dataclass
class Selectors:
    """CSS selector hints for scraping a changelog page.

    Attributes:
        entries: Selector matching one element per changelog entry
        date: Selector for the entry date inside an entry
        title: Selector for the entry title
        url: Selector for the entry link
        version: Selector for the version label
        description: Selector for a short description
        content: Selector for the full entry body
    """
    entries: str | None = None
    date: str | None = None
    title: str | None = None
    url: str | None = None
    version: str | None = None
    description: str | None = None
    content: str | None = None


@dataclass
class ExtractionConfig:
    """Per-tool extraction hints consumed by strategies.

    Attributes:
        selectors: Optional CSS selector hints
        date_format: Optional date format hint for the source
        two_step_extraction: Fetch every linked detail page from the list page
        detail_page_selector: Selector for the main block of a detail page
    """
    selectors: Selectors | None = None
    date_format: str | None = None
    two_step_extraction: bool = False
    detail_page_selector: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "ExtractionConfig":
        selectors_raw = raw.get("selectors")
        selectors = None
        if isinstance(selectors_raw, dict):
            selectors = Selectors(
                **{key: selectors_raw.get(key) for key in Selectors.__dataclass_fields__}
            )
        return cls(
            selectors=selectors,
            date_format=_pick(raw, "date_format", "dateFormat"),
            two_step_extraction=bool(_pick(raw, "two_step_extraction", "twoStepExtraction")),
            detail_page_selector=_pick(raw, "detail_page_selector", "detailPageSelector"),
        )


@dataclass
class Tool:
    """A tracked software product.

    The sync core only reads the URL fields, strategy_type and scrape_config;
    the remaining fields are catalog bookkeeping.
    """
    id: str
    name: str
    description: str | None = None
    website: str | None = None
    changelog_url: str | None = None
    github_url: str | None = None
    category: str | None = None
    current_version: str | None = None
    strategy_type: str | None = None
    scrape_config: ExtractionConfig | None = None
    is_active: bool = True
    status: str = ToolStatus.ACTIVE
    sync_status: str = ToolSyncStatus.PENDING
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Tool":
        """Build a Tool from a catalog row.

        Accepts both snake_case and camelCase keys and validates every
        enum-valued field.

        Raises:
            ValidationError: On a missing id/name or an unknown enum value
        """
        tool_id = raw.get("id")
        if not tool_id:
            raise ValidationError("tool row is missing an id", details=raw)
        name = raw.get("name") or str(tool_id)

        status = raw.get("status") or ToolStatus.ACTIVE
        if status not in ToolStatus.ALL:
            raise ValidationError(f"Invalid tool status: {status}")

        sync_status = _pick(raw, "sync_status", "syncStatus") or ToolSyncStatus.PENDING
        if sync_status not in ToolSyncStatus.ALL:
            raise ValidationError(f"Invalid tool sync status: {sync_status}")

        strategy_type = _pick(raw, "strategy_type", "strategyType")
        if strategy_type is not None and strategy_type not in StrategyType.ALL:
            raise ValidationError(f"Invalid strategy type: {strategy_type}")

        scrape_raw = _pick(raw, "scrape_config", "scrapeConfig")
        scrape_config = ExtractionConfig.from_dict(scrape_raw) if isinstance(scrape_raw, dict) else None

        is_active = _pick(raw, "is_active", "isActive")
        return cls(
            id=str(tool_id),
            name=str(name),
            description=raw.get("description"),
            website=raw.get("website"),
            changelog_url=_pick(raw, "changelog_url", "changelogUrl"),
            github_url=_pick(raw, "github_url", "githubUrl"),
            category=raw.get("category"),
            current_version=_pick(raw, "current_version", "currentVersion"),
            strategy_type=strategy_type,
            scrape_config=scrape_config,
            is_active=True if is_active is None else bool(is_active),
            status=status,
            sync_status=sync_status,
            metadata=raw.get("metadata"),
        )


@dataclass
class ChangelogEntry:
    """One extracted changelog item.

    Entries are created fresh by every extract call. Their ids embed a
    wall-clock timestamp, so the same source page yields different ids on
    every run; dedupe on (tool_id, url) or content instead.
    """
    id: str
    tool_id: str
    date: datetime
    version: str | None = None
    title: str | None = None
    url: str | None = None
    content: str | None = None


@dataclass
class SyncResult:
    """Outcome of syncing one tool.

    Attributes:
        status: One of SyncStatus.ALL
        synced_count: Number of entries extracted by the winning strategy
        skipped_count: Entries skipped (always 0 today)
        errors: Error messages; empty on success
    """
    status: str
    synced_count: int = 0
    skipped_count: int = 0
    errors: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, message: str) -> "SyncResult":
        return cls(status=SyncStatus.ERROR, synced_count=0, skipped_count=0, errors=[message])

    @property
    def ok(self) -> bool:
        return self.status == SyncStatus.SUCCESS


@dataclass
class SyncLog:
    """Audit record of a single sync attempt."""
    tool_id: str | None
    status: str
    started_at: datetime
    completed_at: datetime | None = None
    items_found: int = 0
    items_created: int = 0
    items_updated: int = 0
    items_skipped: int = 0
    error_message: str | None = None
    sync_from_date: datetime | None = None
    sync_to_date: datetime | None = None
    metadata: dict[str, Any] | None = None
    id: str | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "tool_id": self.tool_id,
            "status": self.status,
            "started_at": _iso(self.started_at),
            "completed_at": _iso(self.completed_at),
            "items_found": self.items_found,
            "items_created": self.items_created,
            "items_updated": self.items_updated,
            "items_skipped": self.items_skipped,
            "error_message": self.error_message,
            "sync_from_date": _iso(self.sync_from_date),
            "sync_to_date": _iso(self.sync_to_date),
            "metadata": self.metadata,
            "created_at": _iso(self.created_at),
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "SyncLog":
        return cls(
            id=raw.get("id"),
            tool_id=raw.get("tool_id"),
            status=raw.get("status", SyncStatus.ERROR),
            started_at=_from_iso(raw.get("started_at")),
            completed_at=_from_iso(raw.get("completed_at")),
            items_found=raw.get("items_found") or 0,
            items_created=raw.get("items_created") or 0,
            items_updated=raw.get("items_updated") or 0,
            items_skipped=raw.get("items_skipped") or 0,
            error_message=raw.get("error_message"),
            sync_from_date=_from_iso(raw.get("sync_from_date")),
            sync_to_date=_from_iso(raw.get("sync_to_date")),
            metadata=raw.get("metadata"),
            created_at=_from_iso(raw.get("created_at")),
        )


def _pick(raw: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _from_iso(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
