"""Models for live air traffic decoded from OpenSky state vectors."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class FlightState(BaseModel):
    """Normalized representation of one aircraft state vector."""

    icao24: str = Field(..., description="ICAO 24-bit transponder address")
    callsign: str = Field(..., description="Trimmed callsign, 'N/A' when absent")
    origin_country: str = Field(..., description="Country of registration")
    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")
    baro_altitude: Optional[float] = Field(
        default=None, description="Barometric altitude in meters"
    )
    velocity: Optional[float] = Field(
        default=None, description="Ground speed in meters per second"
    )
    true_track: Optional[float] = Field(
        default=None, description="Track heading in degrees clockwise from north"
    )

    model_config = ConfigDict(extra="ignore", frozen=True)


class LiveTrafficSnapshot(BaseModel):
    """Result of a single live-traffic poll.

    ``status`` separates "no traffic in the region" (``ok`` with no flights)
    from "the fetch failed" (``unavailable``). In both cases ``flights`` is a
    plain list so lenient consumers can ignore the distinction.
    """

    status: Literal["ok", "unavailable"] = Field(..., description="Outcome of the fetch")
    flights: list[FlightState] = Field(
        default_factory=list, description="Flights with a known position, in source order"
    )
    fetched_at: datetime = Field(..., description="When the fetch settled (UTC)")
    error: Optional[str] = Field(
        default=None, description="Short reason when the fetch was unavailable"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def available(self) -> bool:
        return self.status == "ok"


class FlightRow(BaseModel):
    """Flight record enriched with display strings for tables and map popups."""

    icao24: str
    callsign: str
    origin_country: str
    latitude: float
    longitude: float
    baro_altitude: Optional[float] = None
    velocity: Optional[float] = None
    true_track: Optional[float] = None
    speed_display: str = Field(..., description="Ground speed in km/h or 'N/A'")
    altitude_display: str = Field(..., description="Altitude in feet or 'N/A'")


class LiveTrafficResponse(BaseModel):
    """Live traffic view returned to the map and table widgets."""

    status: Literal["ok", "unavailable"]
    fetched_at: Optional[datetime] = None
    total: int = Field(..., description="Number of flights in the latest snapshot")
    map_center: tuple[float, float]
    map_bounds: Optional[list[list[float]]] = Field(
        default=None, description="[[min_lat, min_lon], [max_lat, max_lon]] of all flights"
    )
    markers: list[FlightRow] = Field(
        default_factory=list, description="All flights, unaffected by filter or sort"
    )
    flights: list[FlightRow] = Field(
        default_factory=list, description="Filtered and sorted flights for the table"
    )


__all__ = ["FlightRow", "FlightState", "LiveTrafficResponse", "LiveTrafficSnapshot"]
