from __future__ import annotations

import dataclasses
import json

from ..models import Issue


def format_json(issues: list[Issue]) -> str:
    return json.dumps([dataclasses.asdict(issue) for issue in issues], indent=2)
