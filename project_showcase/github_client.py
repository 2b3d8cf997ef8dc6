"""
github_client.py

Responsibility: Isolate all direct GitHub REST API interaction.

This module must be the only place that:
- Constructs GitHub REST endpoints
- Sends HTTP requests to api.github.com
- Interprets GitHub API responses / error payloads

One request per call: no retries, no caching, and no explicit timeout (the
transport default applies).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)

API_BASE = "https://api.github.com"
USER_AGENT = "GitHub-Pages-Builder"
ACCEPT = "application/vnd.github.v3+json"


class GitHubError(RuntimeError):
    pass


class RepositoryNotFoundError(GitHubError):
    pass


def _parse_timestamp(raw: Any) -> datetime:
    if not raw:
        raise ValueError("updated_at is required to build RepositoryMetadata.")
    value = datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


@dataclass(frozen=True)
class RepositoryMetadata:
    name: str
    html_url: str
    description: str | None
    language: str | None
    stars: int
    forks: int
    updated_at: datetime

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "RepositoryMetadata":
        """
        Translate a `GET /repos/{owner}/{repo}` payload.

        Counts default to 0; `updated_at` is mandatory since pages are ordered by it.
        """
        return cls(
            name=str(data.get("name") or ""),
            html_url=str(data.get("html_url") or ""),
            description=data.get("description"),
            language=data.get("language"),
            stars=int(data.get("stargazers_count") or 0),
            forks=int(data.get("forks_count") or 0),
            updated_at=_parse_timestamp(data.get("updated_at")),
        )


class GitHubClient:
    def __init__(self, token: str | None = None, api_base: str = API_BASE) -> None:
        self._token = (token or "").strip() or None
        self._api_base = api_base.rstrip("/")

    @property
    def authenticated(self) -> bool:
        return self._token is not None

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": ACCEPT,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def get_repo(self, owner: str, name: str) -> RepositoryMetadata:
        """
        Fetch metadata for `owner/name`.

        Raises RepositoryNotFoundError on 404 and GitHubError on any other failure,
        including transport errors and malformed payloads.
        """
        path = f"/repos/{quote(owner, safe='')}/{quote(name, safe='')}"
        url = f"{self._api_base}{path}"
        logger.debug("GET %s (authenticated=%s)", url, self.authenticated)

        try:
            r = requests.request("GET", url, headers=self._headers())
        except requests.RequestException as e:
            raise GitHubError(str(e)) from e

        if r.status_code == 404:
            raise RepositoryNotFoundError(f"Repository {owner}/{name} not found")
        if r.status_code != 200:
            raise GitHubError(f"GitHub API error: {r.status_code} - {r.text}")

        try:
            return RepositoryMetadata.from_api(r.json())
        except (ValueError, TypeError, AttributeError) as e:
            raise GitHubError(f"Malformed GitHub API response for {owner}/{name}: {e}") from e
