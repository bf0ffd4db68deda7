"""Shared factories and fixtures for the test suite."""
from __future__ import annotations

import os

import pytest

from ghissues.models import Issue, PullRequestMarker

ISSUES_URL = "https://api.github.com/repos/freeCodeCamp/freeCodeCamp/issues"

# ---------------------------------------------------------------------------
# REST node factories: return raw dicts that mirror API responses
# ---------------------------------------------------------------------------


def issue_node(
    number: int = 1,
    title: str = "Bug A",
    pull_request: dict | None = None,
    state: str = "open",
) -> dict:
    node = {
        "number": number,
        "title": title,
        "state": state,
        "html_url": f"https://github.com/freeCodeCamp/freeCodeCamp/issues/{number}",
        "user": {"login": "camper"},
        "labels": [],
    }
    if pull_request is not None:
        node["pull_request"] = pull_request
    return node


def pr_node(number: int = 2, title: str = "Feature B") -> dict:
    return issue_node(number=number, title=title, pull_request={})


def scenario_payload() -> list[dict]:
    return [
        issue_node(1, "Bug A"),
        pr_node(2, "Feature B"),
        issue_node(3, "Bug C"),
    ]


# ---------------------------------------------------------------------------
# Model object factories
# ---------------------------------------------------------------------------


def make_issue(number: int = 1, title: str = "Bug A", is_pr: bool = False) -> Issue:
    return Issue(
        number=number,
        title=title,
        pull_request=PullRequestMarker() if is_pr else None,
    )


# ---------------------------------------------------------------------------
# Autouse fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def no_token(mocker):
    """Keep a token from the developer's shell or .env out of the tests."""
    mocker.patch.dict(os.environ)
    os.environ.pop("GITHUB_PAT", None)
