from typer.testing import CliRunner

from changelog_sync.cli import app

runner = CliRunner()


def _write_files(tmp_path):
    catalog = tmp_path / "tools.yaml"
    catalog.write_text(
        "tools:\n  - id: notes\n    name: Notes\n",
        encoding="utf-8",
    )
    config = tmp_path / "config.yaml"
    config.write_text(
        f"catalog:\n  tools_file: {catalog}\n  sync_log_file: {tmp_path / 'logs.jsonl'}\n"
        "logging:\n  console: false\n",
        encoding="utf-8",
    )
    return config


def test_sync_manual_tool_writes_log(tmp_path):
    config = _write_files(tmp_path)

    result = runner.invoke(app, ["sync", "notes", "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert "success" in result.output
    assert (tmp_path / "logs.jsonl").exists()

    logs = runner.invoke(app, ["logs", "notes", "--config", str(config)])
    assert logs.exit_code == 0, logs.output
    assert "success" in logs.output


def test_sync_unknown_tool_exits_non_zero(tmp_path):
    config = _write_files(tmp_path)

    result = runner.invoke(app, ["sync", "ghost", "--config", str(config)])

    assert result.exit_code == 1
    assert "tool not found" in result.output


def test_strategies_command_lists_candidates(tmp_path):
    config = _write_files(tmp_path)

    result = runner.invoke(app, ["strategies", "notes", "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert "manual" in result.output
