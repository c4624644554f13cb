"""
Background job entry points.

Thin wrappers around SyncService for schedulers: a periodic pass over every
active tool, and a consumer for single "sync_tool" queue messages.
"""

from __future__ import annotations

import logging
from typing import Any

from .core.repository import ListToolsInput, ToolsRepository
from .core.types import SyncResult
from .errors import DomainError, ValidationError
from .logging_utils import log_event
from .service import SyncService

SYNC_TOOL_MESSAGE = "sync_tool"
ELIGIBLE_TOOLS_LIMIT = 1000


def run_periodic_sync(
    tools_repo: ToolsRepository,
    sync_service: SyncService,
    logger: logging.Logger | None = None,
) -> dict[str, SyncResult]:
    """Sync every active tool, one after another.

    A failure for one tool is logged and does not stop the pass.

    Returns:
        Mapping of tool id to SyncResult for the tools that completed
    """
    logger = logger or logging.getLogger("changelog_sync.jobs")
    try:
        tools = tools_repo.list_tools(ListToolsInput(limit=ELIGIBLE_TOOLS_LIMIT))
    except Exception as exc:  # noqa: BLE001
        log_event(logger, f"failed to list tools eligible for sync: {exc}", logging.ERROR)
        return {}

    results: dict[str, SyncResult] = {}
    for tool in tools:
        if not tool.is_active:
            continue
        try:
            results[tool.id] = sync_service.run_tool_sync(tool.id)
        except Exception as exc:  # noqa: BLE001
            log_event(
                logger,
                f"failed to run sync for tool {tool.id}: {exc}",
                logging.ERROR,
                tool_id=tool.id,
                error_type=type(exc).__name__,
                error=exc.to_dict() if isinstance(exc, DomainError) else None,
            )
    return results


def process_sync_message(message: dict[str, Any], sync_service: SyncService) -> SyncResult:
    """Handle one queue message of the form ``{"type": "sync_tool", "toolId": "..."}``.

    Raises:
        ValidationError: If the message is malformed (the queue should dead-letter it)
        NotFoundError: If the tool does not exist
    """
    if not isinstance(message, dict) or message.get("type") != SYNC_TOOL_MESSAGE:
        raise ValidationError("Malformed sync message: unexpected type", details=message)
    tool_id = message.get("toolId", message.get("tool_id"))
    if not isinstance(tool_id, str) or not tool_id.strip():
        raise ValidationError("Malformed sync message: missing toolId", details=message)
    return sync_service.run_tool_sync(tool_id)
