"""Console entry points printing the next ISS passes over the caller."""

from __future__ import annotations

import asyncio

from issflyover import callbacks
from issflyover.client import AsyncISSFlyoverClient
from issflyover.exceptions import ISSFlyoverError
from issflyover.formatters import format_passes
from issflyover.models.flyover import PassRecord


def _print_passes(err: ISSFlyoverError | None, passes: list[PassRecord] | None) -> None:
    if err is not None:
        print(err)
        return
    print(format_passes(passes or []))


def main() -> None:
    """Callback-style entry point (``iss-flyover``)."""
    callbacks.next_iss_times_for_my_location(_print_passes)


async def run_async() -> list[PassRecord]:
    async with AsyncISSFlyoverClient() as iss:
        return await iss.next_iss_times_for_my_location()


def main_async() -> None:
    """Awaitable-style entry point (``iss-flyover-async``)."""
    try:
        passes = asyncio.run(run_async())
    except ISSFlyoverError as exc:
        print(exc)
        return
    print(format_passes(passes))


if __name__ == "__main__":
    main()
