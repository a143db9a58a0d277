"""Static airport directory used for route calculations.

Major hubs plus airports in and around Nepal. The table is read-only and lives
for the lifetime of the process.
"""

from __future__ import annotations

from ecofly.models.airport import Airport

AIRPORTS: tuple[Airport, ...] = (
    Airport(iata="KTM", name="Tribhuvan International Airport", city="Kathmandu", country="Nepal", latitude=27.6966, longitude=85.3592),
    Airport(iata="PKR", name="Pokhara International Airport", city="Pokhara", country="Nepal", latitude=28.1997, longitude=83.9942),
    Airport(iata="DEL", name="Indira Gandhi International Airport", city="Delhi", country="India", latitude=28.5562, longitude=77.1000),
    Airport(iata="BOM", name="Chhatrapati Shivaji Maharaj International Airport", city="Mumbai", country="India", latitude=19.0896, longitude=72.8656),
    Airport(iata="DXB", name="Dubai International Airport", city="Dubai", country="United Arab Emirates", latitude=25.2532, longitude=55.3657),
    Airport(iata="LHR", name="Heathrow Airport", city="London", country="United Kingdom", latitude=51.4700, longitude=-0.4543),
    Airport(iata="JFK", name="John F. Kennedy International Airport", city="New York", country="USA", latitude=40.6413, longitude=-73.7781),
    Airport(iata="SIN", name="Singapore Changi Airport", city="Singapore", country="Singapore", latitude=1.3644, longitude=103.9915),
    Airport(iata="BKK", name="Suvarnabhumi Airport", city="Bangkok", country="Thailand", latitude=13.6900, longitude=100.7501),
    Airport(iata="SYD", name="Sydney Kingsford Smith Airport", city="Sydney", country="Australia", latitude=-33.9461, longitude=151.1772),
    Airport(iata="FRA", name="Frankfurt Airport", city="Frankfurt", country="Germany", latitude=50.0379, longitude=8.5622),
)

_AIRPORTS_BY_CODE: dict[str, Airport] = {airport.iata: airport for airport in AIRPORTS}


def get_airport(code: str | None) -> Airport | None:
    """Look up an airport by IATA code, ignoring case and surrounding whitespace."""

    if not code:
        return None
    return _AIRPORTS_BY_CODE.get(code.strip().upper())


def search_airports(query: str | None) -> list[Airport]:
    """Return airports whose name, city or code contains ``query``.

    Matching is case-insensitive and keeps directory order. An empty query
    yields no suggestions.
    """

    if not query or not query.strip():
        return []

    needle = query.strip().lower()
    return [
        airport
        for airport in AIRPORTS
        if needle in airport.name.lower()
        or needle in airport.city.lower()
        or needle in airport.iata.lower()
    ]


__all__ = ["AIRPORTS", "get_airport", "search_airports"]
