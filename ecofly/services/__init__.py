"""Service-layer helpers for the EcoFly backend."""

from .openai_client import generate_text
from .calculator import (
    EMISSION_FACTOR,
    RouteInputError,
    calculate_route,
    estimate_emissions_kg,
    haversine_km,
)
from .eco_plan import EcoPlanError, build_eco_plan_prompt, format_plan_markup, generate_eco_plan
from .flight_query import SortConfig, SortDirection, SortKey, filter_flights, query_flights, sort_flights
from .live_traffic import LiveTrafficPoller

__all__ = [
    "EMISSION_FACTOR",
    "EcoPlanError",
    "LiveTrafficPoller",
    "RouteInputError",
    "SortConfig",
    "SortDirection",
    "SortKey",
    "build_eco_plan_prompt",
    "calculate_route",
    "estimate_emissions_kg",
    "filter_flights",
    "format_plan_markup",
    "generate_eco_plan",
    "generate_text",
    "haversine_km",
    "query_flights",
    "sort_flights",
]
