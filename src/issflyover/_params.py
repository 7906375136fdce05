"""Query parameter builder for the fly-over service."""

from __future__ import annotations

from typing import Any


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    Keys keep their keyword order. ``None`` values are dropped so optional
    parameters are only sent when the caller sets them.

    Args:
        **kwargs: Parameter names mapped to plain values.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        params.append((key, str(value)))
    return params
