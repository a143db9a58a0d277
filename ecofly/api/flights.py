"""Live traffic view endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from ecofly.ingestors import OpenSkyIngestor
from ecofly.models import LiveTrafficResponse, LiveTrafficSnapshot
from ecofly.services.flight_query import SortConfig, SortDirection, SortKey, query_flights
from ecofly.services.live_traffic import LiveTrafficPoller
from ecofly.services.presentation import MAP_CENTER, flight_bounds, to_rows

router = APIRouter(prefix="/api/v1", tags=["flights"])

logger = logging.getLogger("ecofly.flights")


def get_live_traffic_poller(request: Request) -> LiveTrafficPoller:
    """Return the app-wide poller, creating an idle one when lifespan did not."""

    poller = getattr(request.app.state, "live_traffic_poller", None)
    if poller is None:
        poller = LiveTrafficPoller(OpenSkyIngestor())
        request.app.state.live_traffic_poller = poller
    return poller


def _build_response(
    snapshot: LiveTrafficSnapshot,
    q: Optional[str],
    sort: Optional[SortKey],
    direction: SortDirection,
) -> LiveTrafficResponse:
    processed = query_flights(
        snapshot.flights, q, SortConfig(key=sort, direction=direction)
    )
    return LiveTrafficResponse(
        status=snapshot.status,
        fetched_at=snapshot.fetched_at,
        total=len(snapshot.flights),
        map_center=MAP_CENTER,
        map_bounds=flight_bounds(snapshot.flights),
        markers=to_rows(snapshot.flights),
        flights=to_rows(processed),
    )


@router.get(
    "/flights",
    response_model=LiveTrafficResponse,
    summary="Live flights over Nepal",
)
async def list_flights(
    q: Optional[str] = Query(
        default=None, description="Case-insensitive filter on callsign or origin country"
    ),
    sort: Optional[SortKey] = Query(default=None, description="Column to sort on"),
    direction: SortDirection = Query(
        default=SortDirection.ASCENDING, description="Sort direction"
    ),
    poller: LiveTrafficPoller = Depends(get_live_traffic_poller),
) -> LiveTrafficResponse:
    """Return the latest snapshot as map markers plus a filtered, sorted table."""

    snapshot = poller.snapshot
    if snapshot is None:
        snapshot = await poller.refresh()
    return _build_response(snapshot, q, sort, direction)


@router.post(
    "/flights/refresh",
    response_model=LiveTrafficResponse,
    summary="Refresh live flights now",
)
async def refresh_flights(
    q: Optional[str] = Query(default=None),
    sort: Optional[SortKey] = Query(default=None),
    direction: SortDirection = Query(default=SortDirection.ASCENDING),
    poller: LiveTrafficPoller = Depends(get_live_traffic_poller),
) -> LiveTrafficResponse:
    """Trigger a manual poll outside the regular interval."""

    snapshot = await poller.refresh()
    logger.info("Manual live traffic refresh: %s flights", len(snapshot.flights))
    return _build_response(snapshot, q, sort, direction)
