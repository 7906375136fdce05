"""Basic usage examples for the ISS fly-over client."""

import asyncio

from issflyover import AsyncISSFlyoverClient, ISSFlyoverClient, callbacks, format_passes


def main() -> None:
    with ISSFlyoverClient() as iss:
        # Each lookup on its own
        print("=== Where am I? ===")
        ip = iss.fetch_my_ip()
        coords = iss.fetch_coords_by_ip(ip)
        print(f"  {ip} -> {coords.latitude}, {coords.longitude}")

        # Ask for more passes than the service default
        print("\n=== Next 10 passes ===")
        passes = iss.fetch_iss_flyover_times(coords, passes=10)
        print(format_passes(passes))

    # The whole chain, callback style
    print("\n=== Callback style ===")
    callbacks.next_iss_times_for_my_location(
        lambda err, result: print(err if err else format_passes(result))
    )

    # The whole chain, awaitable style
    print("\n=== Async ===")
    print(format_passes(asyncio.run(_next_passes())))


async def _next_passes():
    async with AsyncISSFlyoverClient() as iss:
        return await iss.next_iss_times_for_my_location()


if __name__ == "__main__":
    main()
