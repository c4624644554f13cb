"""
Sync service: the public entry point for syncing one tool.

Wraps a SyncEngine with the bookkeeping around it:
1. Resolve the tool (raises NotFoundError when it is unknown)
2. Build an ExtractionContext for the tool
3. Build an engine for that context and run it
4. Always write a SyncLog, whatever the outcome

The engine is built per call through the injected factory so callers can
rebind the strategy set or the IO context per tool.
"""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from pathlib import Path
from typing import Callable

from .config import AppConfig
from .core.repository import (
    JsonlSyncLogsRepository,
    ListToolsInput,
    SyncLogsRepository,
    ToolsRepository,
    YamlToolsRepository,
)
from .core.types import SyncLog, SyncResult, Tool
from .engine import StrategySyncEngine, SyncEngine
from .errors import NotFoundError
from .fetch.fetcher import build_extraction_context
from .logging_utils import log_event
from .strategies.base import ExtractionContext
from .strategies.registry import StrategyRegistry

EngineFactory = Callable[[ExtractionContext], SyncEngine]
ContextBuilder = Callable[[Tool], ExtractionContext]


class SyncService:
    def __init__(
        self,
        tools_repo: ToolsRepository,
        engine_factory: EngineFactory,
        sync_logs_repo: SyncLogsRepository,
        build_extraction_context: ContextBuilder,
        logger: logging.Logger | None = None,
    ):
        self.tools_repo = tools_repo
        self.engine_factory = engine_factory
        self.sync_logs_repo = sync_logs_repo
        self.build_extraction_context = build_extraction_context
        self.logger = logger or logging.getLogger("changelog_sync.service")

    def get_tool(self, tool_id: str) -> Tool:
        for tool in self.tools_repo.list_tools(ListToolsInput()):
            if tool.id == tool_id:
                return tool
        raise NotFoundError(f"tool not found: {tool_id}")

    def run_tool_sync(self, tool_id: str) -> SyncResult:
        """Sync one tool and record a sync log.

        Args:
            tool_id: Id of the tool in the catalog

        Returns:
            The engine's SyncResult, or a synthesized error result if the
            engine itself raised

        Raises:
            NotFoundError: If the tool is not in the catalog
            SyncLogsRepositoryError: If the sync log cannot be written
        """
        tool = self.get_tool(tool_id)
        context = self.build_extraction_context(tool)
        engine = self.engine_factory(context)

        started_at = datetime.now(timezone.utc)
        try:
            result = engine.run_tool_sync(tool_id, context)
        except Exception as exc:  # noqa: BLE001
            log_event(
                self.logger,
                f"sync engine raised for {tool_id}: {exc}",
                logging.ERROR,
                tool_id=tool_id,
                error_type=type(exc).__name__,
            )
            result = SyncResult.failure(str(exc) or type(exc).__name__)
        finally:
            _close_context(context)
        completed_at = datetime.now(timezone.utc)

        self.sync_logs_repo.create_log(
            SyncLog(
                tool_id=tool.id,
                status=result.status,
                started_at=started_at,
                completed_at=completed_at,
                items_found=result.synced_count,
                items_created=result.synced_count,
                items_updated=0,
                items_skipped=result.skipped_count,
                error_message="\n".join(result.errors) if result.errors else None,
                metadata={"strategy": tool.strategy_type},
            )
        )

        log_event(
            self.logger,
            f"synced {tool_id}: {result.status} ({result.synced_count} entries)",
            tool_id=tool_id,
            status=result.status,
            synced_count=result.synced_count,
            duration_ms=int((completed_at - started_at).total_seconds() * 1000),
        )
        return result


def _close_context(context: ExtractionContext) -> None:
    close = getattr(context, "close", None)
    if callable(close):
        close()


def create_sync_service(
    cfg: AppConfig,
    tools_repo: ToolsRepository | None = None,
    sync_logs_repo: SyncLogsRepository | None = None,
    registry: StrategyRegistry | None = None,
) -> SyncService:
    """Wire a SyncService from configuration.

    Defaults to the YAML tool catalog and the JSONL sync log store named in
    cfg.catalog, HTTP extraction contexts and the built-in strategies.
    """
    tools_repo = tools_repo or YamlToolsRepository(Path(cfg.catalog.tools_file))
    sync_logs_repo = sync_logs_repo or JsonlSyncLogsRepository(Path(cfg.catalog.sync_log_file))
    registry = registry or StrategyRegistry()

    def engine_factory(context: ExtractionContext) -> SyncEngine:
        return StrategySyncEngine(tools_repo, context, registry=registry)

    def context_builder(tool: Tool) -> ExtractionContext:
        return build_extraction_context(tool, cfg.fetch)

    return SyncService(tools_repo, engine_factory, sync_logs_repo, context_builder)
