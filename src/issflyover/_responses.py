"""Response validation for the three lookups.

Both clients run every response through these functions, so the status
checks, messages and field validation live in exactly one place.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from issflyover._http import check_status
from issflyover.exceptions import (
    ISSValidationError,
    MissingCoordinatesError,
    UnsuccessfulFetchError,
)
from issflyover.models.coordinates import Coordinates
from issflyover.models.flyover import PassRecord

_PASS_LIST = TypeAdapter(list[PassRecord])


def _json_object(response: httpx.Response, what: str) -> dict[str, Any]:
    """Decode the body as a JSON object."""
    try:
        body = response.json()
    except ValueError as exc:
        raise ISSValidationError(f"Could not decode {what} response: {exc}") from exc
    if not isinstance(body, dict):
        raise ISSValidationError(
            f"Expected a JSON object in {what} response, got {type(body).__name__}"
        )
    return body


def parse_ip(response: httpx.Response) -> str:
    """Extract the caller's IP from an ipify response."""
    check_status(
        response,
        f"Status Code {response.status_code} when fetching IP. Response: {response.text}",
    )
    ip = _json_object(response, "IP").get("ip")
    if not isinstance(ip, str) or not ip:
        raise ISSValidationError("Response did not contain an IP address.")
    return ip


def parse_coordinates(response: httpx.Response) -> Coordinates:
    """Extract latitude/longitude from an ipwho.is response.

    A latitude or longitude of exactly 0 is reported as missing.
    """
    check_status(
        response,
        f"Fetching coordinates of ip resulted in code {response.status_code}",
    )
    body = _json_object(response, "geolocation")
    if not body.get("latitude") or not body.get("longitude"):
        raise MissingCoordinatesError("Response did not contain lat and/or long.")
    try:
        return Coordinates(latitude=body["latitude"], longitude=body["longitude"])
    except ValidationError as exc:
        raise ISSValidationError(f"Failed to validate coordinates: {exc}") from exc


def parse_flyover(response: httpx.Response) -> list[PassRecord]:
    """Extract the list of passes from a fly-over prediction response."""
    check_status(response, f"Fetching ISS flytimes resulted in {response.status_code}")
    body = _json_object(response, "fly-over")
    if body.get("message") != "success":
        raise UnsuccessfulFetchError("Fetching ISS flytimes was unsuccessful.")
    try:
        return _PASS_LIST.validate_python(body.get("response"))
    except ValidationError as exc:
        raise ISSValidationError(f"Failed to validate PassRecord response: {exc}") from exc
