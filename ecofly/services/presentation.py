"""Display helpers for the live flight table and map."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from ecofly.models.air_traffic import FlightRow, FlightState

MAP_CENTER: tuple[float, float] = (28.3949, 84.1240)

_MS_TO_KMH = 3.6
_M_TO_FT = 3.28084


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 always going up, as browsers do."""

    return math.floor(value + 0.5)


def format_speed(speed_ms: Optional[float]) -> str:
    if speed_ms is None:
        return "N/A"
    return f"{round_half_up(speed_ms * _MS_TO_KMH)} km/h"


def format_altitude(altitude_m: Optional[float]) -> str:
    if altitude_m is None:
        return "N/A"
    return f"{round_half_up(altitude_m * _M_TO_FT)} ft"


def flight_bounds(flights: Sequence[FlightState]) -> Optional[list[list[float]]]:
    """Return the [[min_lat, min_lon], [max_lat, max_lon]] box around flights."""

    if not flights:
        return None
    lats = [flight.latitude for flight in flights]
    lons = [flight.longitude for flight in flights]
    return [[min(lats), min(lons)], [max(lats), max(lons)]]


def to_rows(flights: Iterable[FlightState]) -> list[FlightRow]:
    return [
        FlightRow(
            **flight.model_dump(),
            speed_display=format_speed(flight.velocity),
            altitude_display=format_altitude(flight.baro_altitude),
        )
        for flight in flights
    ]


__all__ = [
    "MAP_CENTER",
    "flight_bounds",
    "format_altitude",
    "format_speed",
    "round_half_up",
    "to_rows",
]
