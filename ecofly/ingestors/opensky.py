"""Live traffic ingestor for the Nepal region using the OpenSky REST API."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import IntEnum
import logging
from typing import Any, Optional

import httpx

from ecofly.config import settings
from ecofly.models.air_traffic import FlightState, LiveTrafficSnapshot

logger = logging.getLogger("ecofly.ingestors.opensky")

# Fixed region served by the live overlay.
NEPAL_BOUNDS: dict[str, float] = {
    "lamin": 26.3,
    "lomin": 80.0,
    "lamax": 30.5,
    "lomax": 88.2,
}

MISSING_CALLSIGN = "N/A"


class StateVectorIndex(IntEnum):
    """Field positions inside an OpenSky state vector."""

    ICAO24 = 0
    CALLSIGN = 1
    ORIGIN_COUNTRY = 2
    TIME_POSITION = 3
    LAST_CONTACT = 4
    LONGITUDE = 5
    LATITUDE = 6
    BARO_ALTITUDE = 7
    ON_GROUND = 8
    VELOCITY = 9
    TRUE_TRACK = 10
    VERTICAL_RATE = 11
    SENSORS = 12
    GEO_ALTITUDE = 13
    SQUAWK = 14
    SPI = 15
    POSITION_SOURCE = 16


def _field(entry: list | tuple, index: StateVectorIndex) -> Any:
    return entry[index] if len(entry) > index else None


def _optional_float(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _clean_callsign(raw: Any) -> str:
    if not raw:
        return MISSING_CALLSIGN
    callsign = str(raw).strip()
    return callsign or MISSING_CALLSIGN


def decode_state_vector(entry: Any) -> Optional[FlightState]:
    """Decode one raw state vector into a FlightState.

    Entries without a numeric latitude and longitude are dropped by returning
    None. Optional numeric fields are decoded one by one: a missing or garbled
    altitude, speed or heading becomes None and the rest of the record is kept.
    """

    if not isinstance(entry, (list, tuple)) or len(entry) <= StateVectorIndex.LATITUDE:
        return None

    lon = _optional_float(entry[StateVectorIndex.LONGITUDE])
    lat = _optional_float(entry[StateVectorIndex.LATITUDE])
    if lat is None or lon is None:
        return None

    optional: dict[str, float | None] = {}
    for name, index in (
        ("baro_altitude", StateVectorIndex.BARO_ALTITUDE),
        ("velocity", StateVectorIndex.VELOCITY),
        ("true_track", StateVectorIndex.TRUE_TRACK),
    ):
        raw = _field(entry, index)
        value = _optional_float(raw)
        if value is None and raw is not None:
            logger.debug("Ignoring non-numeric %s %r in state vector", name, raw)
        optional[name] = value

    return FlightState(
        icao24=str(entry[StateVectorIndex.ICAO24] or ""),
        callsign=_clean_callsign(entry[StateVectorIndex.CALLSIGN]),
        origin_country=str(entry[StateVectorIndex.ORIGIN_COUNTRY] or ""),
        latitude=lat,
        longitude=lon,
        **optional,
    )


def normalize_states(payload: Any) -> list[FlightState]:
    """Turn an OpenSky ``/states/all`` body into flights, keeping source order."""

    raw_states: list = []
    if isinstance(payload, dict):
        raw_states = payload.get("states") or []
    if not isinstance(raw_states, (list, tuple)):
        logger.warning("Ignoring non-list OpenSky states field: %r", type(raw_states))
        raw_states = []

    flights: list[FlightState] = []
    for entry in raw_states:
        flight = decode_state_vector(entry)
        if flight is not None:
            flights.append(flight)
    return flights


def _unavailable(reason: str) -> LiveTrafficSnapshot:
    return LiveTrafficSnapshot(
        status="unavailable",
        flights=[],
        fetched_at=datetime.now(tz=timezone.utc),
        error=reason,
    )


class OpenSkyIngestor:
    """Fetch live aircraft states inside the fixed Nepal bounding box."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        bounds: dict[str, float] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.opensky_base_url
        self.timeout = timeout or settings.opensky_timeout
        self.bounds = dict(bounds or NEPAL_BOUNDS)
        self.transport = transport

    async def fetch_live_flights(self) -> LiveTrafficSnapshot:
        """Fetch and normalize current states.

        Transport failures never propagate: they are logged and reported as an
        ``unavailable`` snapshot with no flights.
        """

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(self.base_url, params=self.bounds)
        except httpx.TimeoutException as exc:
            logger.warning("OpenSky request timed out: %s", exc)
            return _unavailable("timeout")
        except httpx.RequestError as exc:
            logger.warning("OpenSky request failed: %s", exc)
            return _unavailable("request failed")

        if response.status_code == 429:
            logger.warning("OpenSky rate limit encountered: %s", response.text)
            return _unavailable("rate limited")
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "OpenSky returned HTTP %s: %s", exc.response.status_code, exc
            )
            return _unavailable(f"HTTP {exc.response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("Failed to parse OpenSky JSON response: %s", exc)
            return _unavailable("malformed response")

        flights = normalize_states(payload)
        logger.debug("Ingested %s live flights", len(flights))
        return LiveTrafficSnapshot(
            status="ok",
            flights=flights,
            fetched_at=datetime.now(tz=timezone.utc),
        )


__all__ = [
    "MISSING_CALLSIGN",
    "NEPAL_BOUNDS",
    "OpenSkyIngestor",
    "StateVectorIndex",
    "decode_state_vector",
    "normalize_states",
]
