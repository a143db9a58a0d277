"""Static domain data for EcoFly."""

from .airports import AIRPORTS, get_airport, search_airports

__all__ = ["AIRPORTS", "get_airport", "search_airports"]
