"""Filter and sort views over a live flight set."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Sequence

from ecofly.models.air_traffic import FlightState


class SortKey(str, Enum):
    """Flight fields the live table can be sorted on."""

    CALLSIGN = "callsign"
    ORIGIN_COUNTRY = "origin_country"
    VELOCITY = "velocity"
    BARO_ALTITUDE = "baro_altitude"


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class SortConfig:
    """Current table sort; ``key`` of None means source order."""

    key: Optional[SortKey] = None
    direction: SortDirection = SortDirection.ASCENDING

    def request_sort(self, key: SortKey) -> "SortConfig":
        """Return the config after a header click on ``key``.

        Clicking the active ascending key flips to descending; any other click
        selects that key ascending.
        """

        if self.key == key and self.direction == SortDirection.ASCENDING:
            return SortConfig(key=key, direction=SortDirection.DESCENDING)
        return SortConfig(key=key, direction=SortDirection.ASCENDING)


def filter_flights(flights: Iterable[FlightState], query: str | None) -> list[FlightState]:
    """Keep flights whose callsign or origin country contains ``query``."""

    if not query:
        return list(flights)

    needle = query.lower()
    return [
        flight
        for flight in flights
        if needle in flight.callsign.lower() or needle in flight.origin_country.lower()
    ]


def sort_flights(flights: Iterable[FlightState], sort: SortConfig | None) -> list[FlightState]:
    """Sort flights by ``sort``; missing values always go last.

    The sort is stable, so ties keep their input order in both directions.
    """

    items = list(flights)
    if sort is None or sort.key is None:
        return items

    field_name = sort.key.value
    present: list[FlightState] = []
    missing: list[FlightState] = []
    for flight in items:
        value: Any = getattr(flight, field_name)
        (missing if value is None else present).append(flight)

    ordered = sorted(
        present,
        key=lambda flight: getattr(flight, field_name),
        reverse=sort.direction == SortDirection.DESCENDING,
    )
    return ordered + missing


def query_flights(
    flights: Sequence[FlightState],
    query: str | None = "",
    sort: SortConfig | None = None,
) -> list[FlightState]:
    """Derive the filtered and sorted table view without touching ``flights``."""

    return sort_flights(filter_flights(flights, query), sort)


__all__ = [
    "SortConfig",
    "SortDirection",
    "SortKey",
    "filter_flights",
    "query_flights",
    "sort_flights",
]
