from __future__ import annotations

from collections.abc import Callable

from .debug_fmt import format_debug
from .json_fmt import format_json
from ..models import Issue

FORMATS = ("debug", "json")


def get_formatter(fmt: str) -> Callable[[list[Issue]], str]:
    if fmt == "debug":
        return format_debug
    if fmt == "json":
        return format_json
    raise ValueError(f"Unknown format: {fmt!r}")
