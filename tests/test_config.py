from changelog_sync.config import AppConfig, get_github_token, load_config


def test_load_config_without_path_returns_defaults():
    cfg = load_config(None)
    assert cfg == AppConfig()
    assert cfg.fetch.retries == 2
    assert cfg.catalog.tools_file == "tools.yaml"


def test_load_config_merges_sections_and_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        """
fetch:
  timeout_seconds: 5
  bogus: 1
catalog:
  tools_file: catalog/tools.yaml
logging:
  level: DEBUG
unknown_section:
  x: 1
""",
        encoding="utf-8",
    )

    cfg = load_config(str(path))

    assert cfg.fetch.timeout_seconds == 5
    assert cfg.fetch.retries == 2
    assert cfg.catalog.tools_file == "catalog/tools.yaml"
    assert cfg.catalog.sync_log_file == "data/sync_logs.jsonl"
    assert cfg.logging.level == "DEBUG"


def test_empty_config_file_uses_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == AppConfig()


def test_get_github_token(monkeypatch):
    cfg = AppConfig().fetch
    monkeypatch.setenv("GITHUB_TOKEN", "abc")
    assert get_github_token(cfg) == "abc"

    monkeypatch.setenv("GITHUB_TOKEN", "")
    assert get_github_token(cfg) is None

    cfg.github_token_env = ""
    assert get_github_token(cfg) is None
