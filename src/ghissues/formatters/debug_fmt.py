from __future__ import annotations

from ..models import Issue


def format_debug(issues: list[Issue]) -> str:
    return repr(issues)
