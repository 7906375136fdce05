"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging

import httpx
import pytest
import respx

IP_URL = "https://api.ipify.org/"
GEO_URL = "http://ipwho.is"
FLYOVER_URL = "https://iss-flyover.herokuapp.com/json/"

SAMPLE_IP = "162.245.144.188"

SAMPLE_IP_RESPONSE = {"ip": SAMPLE_IP}

SAMPLE_GEO_RESPONSE = {
    "ip": SAMPLE_IP,
    "success": True,
    "type": "IPv4",
    "country": "United Kingdom",
    "city": "London",
    "latitude": 51.5,
    "longitude": -0.12,
}

SAMPLE_PASS = {"risetime": 134564234, "duration": 600}

SAMPLE_FLYOVER_RESPONSE = {
    "message": "success",
    "request": {
        "altitude": 100,
        "datetime": 1700000000,
        "latitude": 51.5,
        "longitude": -0.12,
        "passes": 5,
    },
    "response": [SAMPLE_PASS],
}


def _or_default(response: httpx.Response | None, payload: dict) -> httpx.Response:
    return httpx.Response(200, json=payload) if response is None else response


def mock_lookups(
    ip: httpx.Response | None = None,
    geo: httpx.Response | None = None,
    flyover: httpx.Response | None = None,
) -> tuple[respx.Route, respx.Route, respx.Route]:
    """Mock all three services inside an active respx router.

    Any response left as ``None`` gets the successful sample payload.
    """
    ip_route = respx.get(IP_URL).mock(
        return_value=_or_default(ip, SAMPLE_IP_RESPONSE)
    )
    geo_route = respx.get(f"{GEO_URL}/{SAMPLE_IP}").mock(
        return_value=_or_default(geo, SAMPLE_GEO_RESPONSE)
    )
    flyover_route = respx.get(FLYOVER_URL).mock(
        return_value=_or_default(flyover, SAMPLE_FLYOVER_RESPONSE)
    )
    return ip_route, geo_route, flyover_route


@pytest.fixture(autouse=True)
def api_log_dir(tmp_path):
    """Reset the module-level logger and redirect log output to tmp_path."""
    import issflyover._logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger("issflyover.api")
    for h in named_logger.handlers[:]:
        if isinstance(h, logging.FileHandler):
            named_logger.removeHandler(h)

    mod._logger = None
    mod._LOG_DIR = str(tmp_path / "logs")
    mod._LOG_FILE = str(tmp_path / "logs" / "api_calls.log")

    yield tmp_path / "logs"

    # Close file handlers to release file locks (important on Windows)
    for h in named_logger.handlers[:]:
        if isinstance(h, logging.FileHandler):
            h.close()
            named_logger.removeHandler(h)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file
