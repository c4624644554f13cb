"""
HTTP implementation of ExtractionContext.

Uses a synchronous httpx client that follows redirects and respects system
proxy settings when trust_env is enabled. Transport failures are retried with
a linear backoff; HTTP error statuses are not retried. Any failure surfaces
as FetchError so the sync engine can fall back to another strategy.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from ..config import FetchConfig, get_github_token
from ..core.types import Tool
from ..errors import FetchError
from ..strategies.base import ExtractionContext

logger = logging.getLogger("changelog_sync.fetch")

GITHUB_API_HOST = "api.github.com"


class HttpExtractionContext(ExtractionContext):
    """Fetches pages and JSON documents over HTTP.

    Args:
        cfg: Fetch settings (timeout, retries, user agent, proxies)
        headers: Extra headers sent with every request
        api_headers: Extra headers sent only to api.github.com
        transport: Optional httpx transport, mainly for tests

    The client is created lazily and reused; close() or a ``with`` block
    releases it.
    """

    def __init__(
        self,
        cfg: FetchConfig,
        headers: dict[str, str] | None = None,
        api_headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.cfg = cfg
        self.headers = {"User-Agent": cfg.user_agent, **(headers or {})}
        self.api_headers = dict(api_headers or {})
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.cfg.timeout_seconds,
                headers=self.headers,
                follow_redirects=True,
                trust_env=self.cfg.trust_env,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HttpExtractionContext":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(self, url: str, accept: str) -> httpx.Response:
        headers = {"Accept": accept}
        if httpx.URL(url).host == GITHUB_API_HOST:
            headers.update(self.api_headers)

        last_error: str | None = None
        for attempt in range(self.cfg.retries + 1):
            try:
                resp = self._get_client().get(url, headers=headers)
            except httpx.HTTPError as exc:
                last_error = f"{type(exc).__name__}: {exc}"
                logger.debug("fetch attempt %d failed for %s: %s", attempt + 1, url, last_error)
                if attempt < self.cfg.retries:
                    # Linear backoff: 0.5s, 1.0s, 1.5s...
                    time.sleep(0.5 * (attempt + 1))
                continue

            if resp.status_code >= 400:
                raise FetchError(f"HTTP {resp.status_code} for {url}", url, resp.status_code)
            return resp

        raise FetchError(f"fetch failed for {url}: {last_error}", url)

    def fetch_html(self, url: str) -> str:
        return self._get(url, "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8").text

    def fetch_json(self, url: str) -> Any:
        resp = self._get(url, "application/json")
        try:
            return resp.json()
        except ValueError as exc:
            raise FetchError(f"invalid JSON from {url}: {exc}", url, resp.status_code) from exc


def build_extraction_context(tool: Tool, cfg: FetchConfig) -> HttpExtractionContext:
    """Build the extraction context used to sync one tool.

    GitHub-backed tools get the configured token attached to GitHub API
    requests so they are not throttled by the anonymous rate limit.
    """
    api_headers: dict[str, str] = {}
    token = get_github_token(cfg)
    if token and (tool.github_url or "github.com" in (tool.changelog_url or "")):
        api_headers["Authorization"] = f"Bearer {token}"
        api_headers["X-GitHub-Api-Version"] = "2022-11-28"
    return HttpExtractionContext(cfg, api_headers=api_headers)
