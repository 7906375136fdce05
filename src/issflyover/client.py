"""Public client classes for the ISS fly-over lookups."""

from __future__ import annotations

from issflyover._http import DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from issflyover._logging import log_api_call, log_service_call
from issflyover._params import build_query_params
from issflyover._responses import parse_coordinates, parse_flyover, parse_ip
from issflyover.models.coordinates import Coordinates
from issflyover.models.flyover import PassRecord

IP_URL = "https://api.ipify.org/"
GEO_URL = "http://ipwho.is"
FLYOVER_URL = "https://iss-flyover.herokuapp.com/json/"


class ISSFlyoverClient:
    """Synchronous client for finding the next ISS passes over the caller.

    Usage:
        iss = ISSFlyoverClient()
        passes = iss.next_iss_times_for_my_location()
        iss.close()

        # Or as a context manager:
        with ISSFlyoverClient() as iss:
            coords = iss.fetch_coords_by_ip("162.245.144.188")
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        ip_url: str = IP_URL,
        geo_url: str = GEO_URL,
        flyover_url: str = FLYOVER_URL,
    ) -> None:
        self._transport = SyncTransport(timeout=timeout)
        self._ip_url = ip_url
        self._geo_url = geo_url.rstrip("/")
        self._flyover_url = flyover_url

    def __enter__(self) -> ISSFlyoverClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    # ── Lookups ────────────────────────────────────────────────

    @log_api_call
    def fetch_my_ip(self) -> str:
        """Get the caller's public IP address."""
        response = self._transport.get(self._ip_url, build_query_params(format="json"))
        return parse_ip(response)

    @log_api_call
    def fetch_coords_by_ip(self, ip: str) -> Coordinates:
        """Get the latitude/longitude an IP address geolocates to."""
        response = self._transport.get(f"{self._geo_url}/{ip}")
        return parse_coordinates(response)

    @log_api_call
    def fetch_iss_flyover_times(
        self,
        coords: Coordinates,
        altitude: float | None = None,
        passes: int | None = None,
    ) -> list[PassRecord]:
        """Get upcoming passes over the given coordinates.

        Args:
            coords: Observer location.
            altitude: Observer altitude in metres; service default when omitted.
            passes: Number of passes to return; service default when omitted.
        """
        params = build_query_params(
            lat=coords.latitude, lon=coords.longitude, alt=altitude, n=passes
        )
        response = self._transport.get(self._flyover_url, params)
        return parse_flyover(response)

    @log_service_call
    def next_iss_times_for_my_location(self) -> list[PassRecord]:
        """Resolve IP, then coordinates, then the upcoming passes.

        The first failing lookup raises and the remaining ones are skipped.
        """
        ip = self.fetch_my_ip()
        coords = self.fetch_coords_by_ip(ip)
        return self.fetch_iss_flyover_times(coords)


class AsyncISSFlyoverClient:
    """Asynchronous client for finding the next ISS passes over the caller.

    Usage:
        async with AsyncISSFlyoverClient() as iss:
            passes = await iss.next_iss_times_for_my_location()
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        ip_url: str = IP_URL,
        geo_url: str = GEO_URL,
        flyover_url: str = FLYOVER_URL,
    ) -> None:
        self._transport = AsyncTransport(timeout=timeout)
        self._ip_url = ip_url
        self._geo_url = geo_url.rstrip("/")
        self._flyover_url = flyover_url

    async def __aenter__(self) -> AsyncISSFlyoverClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    # ── Lookups ────────────────────────────────────────────────

    @log_api_call
    async def fetch_my_ip(self) -> str:
        """Get the caller's public IP address."""
        response = await self._transport.get(
            self._ip_url, build_query_params(format="json")
        )
        return parse_ip(response)

    @log_api_call
    async def fetch_coords_by_ip(self, ip: str) -> Coordinates:
        """Get the latitude/longitude an IP address geolocates to."""
        response = await self._transport.get(f"{self._geo_url}/{ip}")
        return parse_coordinates(response)

    @log_api_call
    async def fetch_iss_flyover_times(
        self,
        coords: Coordinates,
        altitude: float | None = None,
        passes: int | None = None,
    ) -> list[PassRecord]:
        """Get upcoming passes over the given coordinates."""
        params = build_query_params(
            lat=coords.latitude, lon=coords.longitude, alt=altitude, n=passes
        )
        response = await self._transport.get(self._flyover_url, params)
        return parse_flyover(response)

    @log_service_call
    async def next_iss_times_for_my_location(self) -> list[PassRecord]:
        """Resolve IP, then coordinates, then the upcoming passes."""
        ip = await self.fetch_my_ip()
        coords = await self.fetch_coords_by_ip(ip)
        return await self.fetch_iss_flyover_times(coords)
