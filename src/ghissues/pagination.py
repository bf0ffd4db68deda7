from __future__ import annotations

from collections.abc import Mapping


def next_page_url(headers: Mapping[str, str]) -> str | None:
    """Return the raw ``link`` header value, if the response carried one.

    The value is not parsed into ``rel`` parts; callers only use it as a
    candidate for the next page.
    """
    value = headers.get("link")
    if not isinstance(value, str) or not value:
        return None
    return value
