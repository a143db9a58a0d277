"""Great-circle distance and per-passenger CO2 estimates for a route."""

from __future__ import annotations

import logging
import math
from typing import Optional

from ecofly.models.airport import Airport
from ecofly.models.route import RouteCalculation

logger = logging.getLogger("ecofly.calculator")

EARTH_RADIUS_KM = 6371.0

# kg CO2 per passenger-km, an industry-average rate.
EMISSION_FACTOR = 0.115

MISSING_AIRPORTS_MESSAGE = "Please select both a departure and an arrival airport."


class RouteInputError(ValueError):
    """Raised when a route is requested without both endpoints selected."""

    def __init__(self, message: str = MISSING_AIRPORTS_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


def _deg_to_rad(deg: float) -> float:
    return deg * (math.pi / 180)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute the great-circle distance between two coordinates in kilometers.

    Inputs are decimal degrees on a spherical earth. No range validation is
    performed.
    """

    d_lat = _deg_to_rad(lat2 - lat1)
    d_lon = _deg_to_rad(lon2 - lon1)
    a = math.sin(d_lat / 2) ** 2 + math.cos(_deg_to_rad(lat1)) * math.cos(
        _deg_to_rad(lat2)
    ) * math.sin(d_lon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def estimate_emissions_kg(distance_km: float) -> float:
    """Estimate CO2 per passenger in kilograms for a flight distance."""

    return distance_km * EMISSION_FACTOR


def calculate_route(
    origin: Optional[Airport], destination: Optional[Airport]
) -> RouteCalculation:
    """Compute distance and emissions for two selected airports."""

    if origin is None or destination is None:
        raise RouteInputError()

    distance = haversine_km(
        origin.latitude, origin.longitude, destination.latitude, destination.longitude
    )
    emissions = estimate_emissions_kg(distance)
    logger.debug(
        "Route %s -> %s: %.1f km, %.1f kg CO2",
        origin.label,
        destination.label,
        distance,
        emissions,
    )
    return RouteCalculation(
        origin=origin,
        destination=destination,
        distance_km=distance,
        emissions_kg=emissions,
    )


__all__ = [
    "EARTH_RADIUS_KM",
    "EMISSION_FACTOR",
    "MISSING_AIRPORTS_MESSAGE",
    "RouteInputError",
    "calculate_route",
    "estimate_emissions_kg",
    "haversine_km",
]
