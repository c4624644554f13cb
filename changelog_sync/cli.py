"""
Command-line interface for changelog_sync.

Uses Typer to expose the sync service, the page analyzers and the sync log
store. Loads a .env file first so GITHUB_TOKEN and friends can live there.
"""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

from dotenv import load_dotenv
import typer
from rich.console import Console
from rich.table import Table

from .analyzers import analyze_detail_page, analyze_page, detect_pagination
from .config import AppConfig, load_config
from .core.repository import JsonlSyncLogsRepository, YamlToolsRepository
from .core.types import SyncResult
from .errors import DomainError
from .fetch.fetcher import HttpExtractionContext
from .jobs import run_periodic_sync
from .logging_utils import setup_logging
from .service import create_sync_service
from .strategies.registry import StrategyRegistry

app = typer.Typer(add_completion=False, help="Aggregate changelog updates for tracked tools.")
console = Console()

ConfigOption = typer.Option(None, "--config", "-c", exists=True, help="YAML config file.")
LogLevelOption = typer.Option(None, "--log-level", help="Logging level.")
CatalogOption = typer.Option(None, "--catalog", help="Override the YAML tool catalog path.")


def _bootstrap(config: Path | None, log_level: str | None, catalog: Path | None) -> AppConfig:
    load_dotenv()
    cfg = load_config(str(config) if config else None)
    if log_level:
        cfg.logging.level = log_level
    if catalog is not None:
        cfg.catalog.tools_file = str(catalog)
    setup_logging(cfg.logging, Path(cfg.logging.directory) if cfg.logging.file else None)
    return cfg


def _results_table(rows: list[tuple[str, SyncResult]]) -> Table:
    table = Table(title="Sync results")
    table.add_column("Tool")
    table.add_column("Status")
    table.add_column("Synced", justify="right")
    table.add_column("Skipped", justify="right")
    table.add_column("Errors")
    for tool_id, result in rows:
        style = "green" if result.ok else "red"
        table.add_row(
            tool_id,
            f"[{style}]{result.status}[/{style}]",
            str(result.synced_count),
            str(result.skipped_count),
            "\n".join(result.errors),
        )
    return table


@app.command()
def sync(
    tool_ids: list[str] = typer.Argument(..., help="Ids of the tools to sync."),
    config: Path | None = ConfigOption,
    log_level: str | None = LogLevelOption,
    catalog: Path | None = CatalogOption,
):
    """Sync the given tools one after another and record a sync log for each."""
    cfg = _bootstrap(config, log_level, catalog)
    service = create_sync_service(cfg)

    rows: list[tuple[str, SyncResult]] = []
    for tool_id in tool_ids:
        try:
            rows.append((tool_id, service.run_tool_sync(tool_id)))
        except DomainError as exc:
            rows.append((tool_id, SyncResult.failure(exc.message)))

    console.print(_results_table(rows))
    if any(not result.ok for _, result in rows):
        raise typer.Exit(code=1)


@app.command("sync-all")
def sync_all(
    config: Path | None = ConfigOption,
    log_level: str | None = LogLevelOption,
    catalog: Path | None = CatalogOption,
):
    """Sync every active tool in the catalog."""
    cfg = _bootstrap(config, log_level, catalog)
    tools_repo = YamlToolsRepository(Path(cfg.catalog.tools_file))
    service = create_sync_service(cfg, tools_repo=tools_repo)

    results = run_periodic_sync(tools_repo, service)
    console.print(_results_table(list(results.items())))
    if any(not result.ok for result in results.values()):
        raise typer.Exit(code=1)


@app.command()
def strategies(
    tool_id: str = typer.Argument(..., help="Tool id to inspect."),
    config: Path | None = ConfigOption,
    log_level: str | None = LogLevelOption,
    catalog: Path | None = CatalogOption,
):
    """Show which strategies can handle a tool, in the order they are tried."""
    cfg = _bootstrap(config, log_level, catalog)
    service = create_sync_service(cfg)
    try:
        tool = service.get_tool(tool_id)
    except DomainError as exc:
        console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(code=1)

    registry = StrategyRegistry()
    picked = registry.pick_strategy_for_tool(tool)
    candidates = registry.candidates_for(tool)
    if not candidates:
        console.print(f"No strategy can handle [bold]{tool_id}[/bold]")
        raise typer.Exit(code=1)
    console.print(f"Primary strategy: [bold]{picked.name}[/bold]")
    console.print("Candidates: " + " -> ".join(strategy.name for strategy in candidates))


@app.command()
def analyze(
    url: str = typer.Argument(..., help="Page to fetch and analyze."),
    config: Path | None = ConfigOption,
    log_level: str | None = LogLevelOption,
):
    """Fetch a page and print the listing, pagination and detail heuristics."""
    cfg = _bootstrap(config, log_level, None)
    try:
        with HttpExtractionContext(cfg.fetch) as context:
            html = context.fetch_html(url)
    except DomainError as exc:
        console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=url)
    table.add_column("Analyzer")
    table.add_column("Field")
    table.add_column("Value")
    for label, analysis in (
        ("page", analyze_page(html)),
        ("pagination", detect_pagination(html)),
        ("detail", analyze_detail_page(html)),
    ):
        for key, value in asdict(analysis).items():
            table.add_row(label, key, "" if value is None else str(value))
    console.print(table)


@app.command()
def logs(
    tool_id: str = typer.Argument(..., help="Tool id whose sync logs to show."),
    limit: int = typer.Option(10, "--limit", "-n", help="Number of logs to show."),
    config: Path | None = ConfigOption,
    log_level: str | None = LogLevelOption,
):
    """Show the most recent sync logs of a tool."""
    cfg = _bootstrap(config, log_level, None)
    store = JsonlSyncLogsRepository(Path(cfg.catalog.sync_log_file))

    table = Table(title=f"Sync logs for {tool_id}")
    table.add_column("Started")
    table.add_column("Status")
    table.add_column("Found", justify="right")
    table.add_column("Strategy")
    table.add_column("Error")
    for log in store.list_by_tool(tool_id, limit=limit):
        strategy = (log.metadata or {}).get("strategy")
        table.add_row(
            log.started_at.isoformat() if log.started_at else "",
            log.status,
            str(log.items_found),
            strategy or "",
            log.error_message or "",
        )
    console.print(table)


if __name__ == "__main__":
    app()
