"""Static airport directory endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from ecofly.domain import AIRPORTS, get_airport, search_airports
from ecofly.models import Airport

router = APIRouter(prefix="/api/v1", tags=["airports"])


@router.get("/airports", response_model=list[Airport], summary="List or search airports")
def list_airports(
    q: Optional[str] = Query(
        default=None, description="Substring of airport name, city or IATA code"
    ),
) -> list[Airport]:
    """Return the whole directory, or autocomplete suggestions when ``q`` is given."""

    if q is None:
        return list(AIRPORTS)
    return search_airports(q)


@router.get("/airports/{code}", response_model=Airport, summary="Get airport by code")
def read_airport(code: str) -> Airport:
    airport = get_airport(code)
    if airport is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown airport code: {code}",
        )
    return airport
