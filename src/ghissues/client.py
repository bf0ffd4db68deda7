from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx

from .config import DEFAULT_TARGET, RepoTarget
from .errors import ApiError, DecodeError, GhIssuesError, NetworkError
from .models import Issue, only_issues, parse_issues
from .pagination import next_page_url

API_URL = "https://api.github.com"
USER_AGENT = "ghissues"


@dataclass(frozen=True)
class IssuePage:
    records: list[Issue]
    next_url: str | None


class GitHubClient:
    def __init__(self, token: str, user_agent: str = USER_AGENT, base_url: str = API_URL) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "User-Agent": user_agent,
                "Accept": "application/vnd.github+json",
            },
            timeout=httpx.Timeout(30.0),
            follow_redirects=True,
        )

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.aclose()

    async def get_issues_page(self, target: RepoTarget = DEFAULT_TARGET) -> IssuePage:
        """Fetch the first page of open issues for ``target``.

        Records are returned unfiltered: pull requests are still present.

        Raises:
            NetworkError: The request never produced a response.
            ApiError: GitHub answered with a non-2xx status.
            DecodeError: A 2xx body was not a JSON array of issues.
        """
        try:
            response = await self._client.get(target.issues_path)
        except httpx.RequestError as exc:
            raise NetworkError(str(exc)) from exc

        if not response.is_success:
            raise ApiError(
                f"GitHub API returned HTTP {response.status_code} for {target}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(f"Response body for {target} is not valid JSON: {exc}") from exc

        return IssuePage(records=parse_issues(payload), next_url=next_page_url(response.headers))


async def fetch_open_issues(
    client: GitHubClient,
    target: RepoTarget = DEFAULT_TARGET,
    on_error: Callable[[GhIssuesError], None] | None = None,
) -> list[Issue]:
    """Return the open issues of ``target`` with pull requests filtered out.

    Transport failures and non-2xx statuses yield an empty list; ``on_error``,
    when given, receives the swallowed error. A malformed 2xx body raises
    ``DecodeError``. Only the first page is read.
    """
    try:
        page = await client.get_issues_page(target)
    except (NetworkError, ApiError) as exc:
        if on_error is not None:
            on_error(exc)
        return []

    return only_issues(page.records)
