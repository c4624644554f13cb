"""GitHub releases API extraction."""

from __future__ import annotations

import re
from typing import Any

from ..core.types import ChangelogEntry, Tool
from ..parser.dates import date_or_now
from .base import ExtractionContext, ExtractionStrategy, logger, now_ms

# https://github.com/<owner>/<repo>[/anything]
GITHUB_REPO_RE = re.compile(r"^https?://(?:www\.)?github\.com/([^/\s]+)/([^/\s#?]+)", re.IGNORECASE)


def releases_api_url(url: str) -> str:
    """Turn a github.com repository URL into its releases API endpoint.

    Examples:
        >>> releases_api_url("https://github.com/vitejs/vite/releases")
        'https://api.github.com/repos/vitejs/vite/releases'

    URLs that are not github.com repository pages (including API URLs) are
    returned unchanged.
    """
    match = GITHUB_REPO_RE.match(url.strip())
    if not match:
        return url
    owner, repo = match.group(1), match.group(2)
    if repo.endswith(".git"):
        repo = repo[:-4]
    return f"https://api.github.com/repos/{owner}/{repo}/releases"


class GitHubReleasesStrategy(ExtractionStrategy):
    """Reads the releases of a GitHub repository as JSON.

    Fetch and decode failures are swallowed and reported as "no entries", so
    a broken GitHub source does not fall back to another strategy.
    """

    name = "github-releases"

    def can_handle(self, tool: Tool) -> bool:
        github_url = tool.github_url or ""
        changelog_url = tool.changelog_url or ""
        return (
            "github.com" in github_url
            or "/releases" in changelog_url
            or "github.com" in changelog_url
        )

    def extract(self, tool: Tool, context: ExtractionContext) -> list[ChangelogEntry]:
        base = _repository_url(tool)
        if not base:
            return []

        url = releases_api_url(base)
        try:
            raw = context.fetch_json(url)
        except Exception as exc:  # noqa: BLE001
            logger.warning("GitHub releases fetch failed for %s (%s): %s", tool.id, url, exc)
            return []

        if not isinstance(raw, list):
            logger.warning("GitHub releases payload for %s is not a list", tool.id)
            return []

        stamp = now_ms()
        return [
            _release_to_entry(tool, release, idx, stamp)
            for idx, release in enumerate(raw)
            if isinstance(release, dict)
        ]


def _repository_url(tool: Tool) -> str | None:
    """Prefer whichever of changelog_url and github_url names a github.com repository."""
    for candidate in (tool.changelog_url, tool.github_url):
        if candidate and GITHUB_REPO_RE.match(candidate.strip()):
            return candidate
    return tool.changelog_url or tool.github_url


def _release_to_entry(tool: Tool, release: dict[str, Any], idx: int, stamp: int) -> ChangelogEntry:
    release_id = release.get("id")
    if release_id is None:
        release_id = idx
    return ChangelogEntry(
        id=f"{tool.id}-gh-{release_id}-{stamp}",
        tool_id=tool.id,
        date=date_or_now(release.get("published_at")),
        version=release.get("tag_name") or release.get("name"),
        title=release.get("name") or release.get("tag_name"),
        url=release.get("html_url"),
        content=release.get("body"),
    )
