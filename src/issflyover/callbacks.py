"""Callback-style front end over :class:`ISSFlyoverClient`.

Every function completes by calling ``callback(error, result)`` exactly once:
``(None, result)`` on success, ``(error, None)`` when a lookup raised an
:class:`ISSFlyoverError`. Exceptions raised inside the callback itself are
not caught.

Usage:
    def show(err, passes):
        if err:
            print(err)
            return
        print(passes)

    next_iss_times_for_my_location(show)
"""

from __future__ import annotations

from contextlib import nullcontext
from typing import Any, Callable, ContextManager

from issflyover.client import ISSFlyoverClient
from issflyover.exceptions import ISSFlyoverError
from issflyover.models.coordinates import Coordinates

Callback = Callable[[ISSFlyoverError | None, Any], None]


def _client_scope(client: ISSFlyoverClient | None) -> ContextManager[ISSFlyoverClient]:
    # A caller-supplied client stays open
    if client is None:
        return ISSFlyoverClient()
    return nullcontext(client)


def _complete(
    callback: Callback,
    client: ISSFlyoverClient | None,
    lookup: Callable[[ISSFlyoverClient], Any],
) -> None:
    try:
        with _client_scope(client) as iss:
            result = lookup(iss)
    except ISSFlyoverError as exc:
        callback(exc, None)
        return
    callback(None, result)


def fetch_my_ip(callback: Callback, client: ISSFlyoverClient | None = None) -> None:
    """Pass the caller's public IP string to ``callback``."""
    _complete(callback, client, lambda iss: iss.fetch_my_ip())


def fetch_coords_by_ip(
    ip: str, callback: Callback, client: ISSFlyoverClient | None = None
) -> None:
    """Pass the :class:`Coordinates` of ``ip`` to ``callback``."""
    _complete(callback, client, lambda iss: iss.fetch_coords_by_ip(ip))


def fetch_iss_flyover_times(
    coords: Coordinates, callback: Callback, client: ISSFlyoverClient | None = None
) -> None:
    """Pass the list of :class:`PassRecord` over ``coords`` to ``callback``."""
    _complete(callback, client, lambda iss: iss.fetch_iss_flyover_times(coords))


def next_iss_times_for_my_location(
    callback: Callback, client: ISSFlyoverClient | None = None
) -> None:
    """Pass the upcoming passes over the caller's location to ``callback``."""
    _complete(callback, client, lambda iss: iss.next_iss_times_for_my_location())


__all__ = [
    "Callback",
    "fetch_coords_by_ip",
    "fetch_iss_flyover_times",
    "fetch_my_ip",
    "next_iss_times_for_my_location",
]
