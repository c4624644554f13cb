"""
Sync engine: turns "sync this tool" into a SyncResult.

The engine resolves the tool, asks the strategy registry for every strategy
that can handle it, and tries them in registry order. The first strategy that
returns without raising wins; a raising strategy makes the engine move on to
the next candidate. Nothing is written anywhere: persistence and logging of
sync runs belong to the sync service.

All foreseeable failures (unknown tool, no strategy, every strategy failing)
are reported through SyncResult.status rather than raised.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging

from .core.repository import ListToolsInput, ToolsRepository
from .core.types import ChangelogEntry, SyncResult, SyncStatus, Tool
from .logging_utils import log_event
from .strategies.base import ExtractionContext, ExtractionStrategy
from .strategies.registry import StrategyRegistry

NO_STRATEGY_MESSAGE = "no strategy found"


class SyncEngine(ABC):
    @abstractmethod
    def run_tool_sync(self, tool_id: str, context: ExtractionContext | None = None) -> SyncResult:
        raise NotImplementedError

    @abstractmethod
    def run_bulk_sync(self, tool_ids: list[str]) -> list[SyncResult]:
        raise NotImplementedError


class StrategySyncEngine(SyncEngine):
    """SyncEngine backed by an ordered StrategyRegistry.

    Args:
        tools_repository: Catalog used to resolve tool ids
        registry: Ordered strategies to try (defaults to the built-in set)
        extraction_context: IO capability used when a call passes none
        logger: Optional logger for strategy attempts and fallbacks
    """

    def __init__(
        self,
        tools_repository: ToolsRepository,
        extraction_context: ExtractionContext,
        registry: StrategyRegistry | None = None,
        logger: logging.Logger | None = None,
    ):
        self.tools_repository = tools_repository
        self.extraction_context = extraction_context
        self.registry = registry if registry is not None else StrategyRegistry()
        self.logger = logger or logging.getLogger("changelog_sync.engine")

    def _get_tool(self, tool_id: str) -> Tool | None:
        # The repository only offers listing, so resolve by scanning.
        for tool in self.tools_repository.list_tools(ListToolsInput()):
            if tool.id == tool_id:
                return tool
        return None

    def _try_strategy(
        self, tool: Tool, strategy: ExtractionStrategy, context: ExtractionContext
    ) -> list[ChangelogEntry]:
        return strategy.extract(tool, context) or []

    def run_tool_sync(self, tool_id: str, context: ExtractionContext | None = None) -> SyncResult:
        tool = self._get_tool(tool_id)
        if tool is None:
            log_event(self.logger, "tool not found", logging.WARNING, tool_id=tool_id)
            return SyncResult.failure(f"tool not found: {tool_id}")

        candidates = self.registry.candidates_for(tool)
        if not candidates:
            log_event(self.logger, "no strategy can handle tool", logging.WARNING, tool_id=tool_id)
            return SyncResult.failure(NO_STRATEGY_MESSAGE)

        ctx = context if context is not None else self.extraction_context
        last_error: str | None = None
        for strategy in candidates:
            log_event(
                self.logger, "trying strategy", logging.DEBUG, tool_id=tool_id, strategy=strategy.name
            )
            try:
                entries = self._try_strategy(tool, strategy, ctx)
            except Exception as exc:  # noqa: BLE001
                # Remember only the latest failure and fall back to the next candidate.
                last_error = str(exc)
                log_event(
                    self.logger,
                    f"strategy {strategy.name} failed: {exc}",
                    logging.WARNING,
                    tool_id=tool_id,
                    strategy=strategy.name,
                    error_type=type(exc).__name__,
                )
                continue

            log_event(
                self.logger,
                f"strategy {strategy.name} extracted {len(entries)} entries",
                logging.DEBUG,
                tool_id=tool_id,
                strategy=strategy.name,
                entries=len(entries),
            )
            return SyncResult(
                status=SyncStatus.SUCCESS,
                synced_count=len(entries),
                skipped_count=0,
                errors=[],
            )

        return SyncResult.failure(last_error or "unknown error")

    def run_bulk_sync(self, tool_ids: list[str]) -> list[SyncResult]:
        # Strictly sequential; results[i] belongs to tool_ids[i].
        results: list[SyncResult] = []
        for tool_id in tool_ids:
            results.append(self.run_tool_sync(tool_id))
        return results
