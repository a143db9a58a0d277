"""Airport directory models."""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(NamedTuple):
    """Latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


class Airport(BaseModel):
    """Static airport directory entry."""

    iata: str = Field(..., pattern=r"^[A-Z]{3}$", description="IATA airport code")
    name: str = Field(..., description="Airport display name")
    city: str = Field(..., description="City served by the airport")
    country: str = Field(..., description="Country the airport is located in")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(
        ..., ge=-180, le=180, description="Longitude in decimal degrees"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)

    @property
    def label(self) -> str:
        return f"{self.name} ({self.iata})"


__all__ = ["Airport", "Coordinate"]
