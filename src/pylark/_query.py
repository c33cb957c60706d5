"""Query parameter accumulation and encoding."""

from __future__ import annotations

import httpx

FIELDS = "fields"
FIELDS_TO_EXPAND = "fields_to_expand"


def append_value(params: dict[str, str], key: str, value: str) -> None:
    """Append ``value`` to the comma-joined list stored under ``key``.

    Values already present in the list are not added again.
    """
    current = params.get(key)
    if not current:
        params[key] = value
        return
    if value in current.split(","):
        return
    params[key] = f"{current},{value}"


def encode(params: dict[str, str]) -> str:
    """Percent-encode parameters as ``key=value&...`` with sorted keys.

    Comma-joined values are encoded as one opaque value.
    """
    return str(httpx.QueryParams(sorted(params.items())))
