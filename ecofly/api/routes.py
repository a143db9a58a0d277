"""Route calculation and AI eco-plan endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, status

from ecofly.domain import get_airport
from ecofly.models import Airport, EcoPlanResponse, RouteCalculation, RouteRequest
from ecofly.services import eco_plan
from ecofly.services.calculator import RouteInputError, calculate_route

router = APIRouter(prefix="/api/v1", tags=["routes"])

logger = logging.getLogger("ecofly.routes")


def _resolve_airport(code: Optional[str]) -> Optional[Airport]:
    if not code:
        return None
    airport = get_airport(code)
    if airport is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown airport code: {code}",
        )
    return airport


def _calculate(request: RouteRequest) -> RouteCalculation:
    origin = _resolve_airport(request.origin)
    destination = _resolve_airport(request.destination)
    try:
        return calculate_route(origin, destination)
    except RouteInputError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.message,
        ) from exc


@router.post(
    "/routes/calculate",
    response_model=RouteCalculation,
    summary="Calculate route distance and CO2 emissions",
)
def calculate(request: RouteRequest) -> RouteCalculation:
    """Compute great-circle distance and per-passenger CO2 for two airports."""

    result = _calculate(request)
    logger.info(
        "Route calculated: %s -> %s distance=%.1fkm emissions=%.1fkg",
        result.origin.label,
        result.destination.label,
        result.distance_km,
        result.emissions_kg,
    )
    return result


@router.post(
    "/routes/eco-plan",
    response_model=EcoPlanResponse,
    summary="Generate an AI eco-friendly travel plan",
)
async def create_eco_plan(request: RouteRequest) -> EcoPlanResponse:
    """Request a short eco-plan for the route; not retried on failure."""

    route = _calculate(request)
    try:
        plan = await eco_plan.generate_eco_plan(
            route.origin, route.destination, route.distance_km, route.emissions_kg
        )
    except eco_plan.EcoPlanError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=exc.message,
        ) from exc

    return EcoPlanResponse(
        route=route,
        plan=plan,
        plan_html=eco_plan.format_plan_markup(plan),
    )
