"""Route calculation and eco-plan request/response models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ecofly.models.airport import Airport


class RouteCalculation(BaseModel):
    """Distance and emissions for one origin/destination pair."""

    origin: Airport
    destination: Airport
    distance_km: float = Field(..., ge=0, description="Great-circle distance in kilometers")
    emissions_kg: float = Field(
        ..., ge=0, description="Estimated CO2 per passenger in kilograms"
    )

    model_config = ConfigDict(frozen=True)


class RouteRequest(BaseModel):
    """Airport codes selected by the user; either may still be unset."""

    origin: Optional[str] = Field(default=None, description="Departure IATA code")
    destination: Optional[str] = Field(default=None, description="Arrival IATA code")


class EcoPlanResponse(BaseModel):
    """AI-generated eco-plan in raw text and whitelisted HTML."""

    route: RouteCalculation
    plan: str = Field(..., description="Plan text as returned by the AI service")
    plan_html: str = Field(..., description="Plan with bullet and line-break markup applied")


__all__ = ["EcoPlanResponse", "RouteCalculation", "RouteRequest"]
