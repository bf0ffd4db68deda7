from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .errors import DecodeError


@dataclass(frozen=True)
class PullRequestMarker:
    """Present on a record when the API returned a pull request, not an issue."""


@dataclass(frozen=True)
class Issue:
    number: int
    title: str
    pull_request: PullRequestMarker | None = None

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request is not None


def _parse_marker(value: Any, number: int) -> PullRequestMarker | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise DecodeError(f"Issue #{number} has an invalid pull_request: {value!r}")
    return PullRequestMarker()


def parse_issue(node: Any) -> Issue:
    if not isinstance(node, dict):
        raise DecodeError(f"Expected an issue object, got {type(node).__name__}")

    number = node.get("number")
    # bool is an int subclass; reject it explicitly.
    if not isinstance(number, int) or isinstance(number, bool) or number < 0:
        raise DecodeError(f"Issue has an invalid number: {number!r}")
    title = node.get("title")
    if not isinstance(title, str):
        raise DecodeError(f"Issue #{number} has an invalid title: {title!r}")

    return Issue(
        number=number,
        title=title,
        pull_request=_parse_marker(node.get("pull_request"), number),
    )


def parse_issues(payload: Any) -> list[Issue]:
    if not isinstance(payload, list):
        raise DecodeError(f"Expected a JSON array of issues, got {type(payload).__name__}")
    return [parse_issue(node) for node in payload]


def only_issues(records: Iterable[Issue]) -> list[Issue]:
    return [record for record in records if not record.is_pull_request]
