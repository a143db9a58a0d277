"""Pydantic models for the EcoFly backend."""

from .air_traffic import FlightRow, FlightState, LiveTrafficResponse, LiveTrafficSnapshot
from .airport import Airport, Coordinate
from .route import EcoPlanResponse, RouteCalculation, RouteRequest

__all__ = [
    "Airport",
    "Coordinate",
    "EcoPlanResponse",
    "FlightRow",
    "FlightState",
    "LiveTrafficResponse",
    "LiveTrafficSnapshot",
    "RouteCalculation",
    "RouteRequest",
]
