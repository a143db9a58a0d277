"""Data ingestors for EcoFly."""

from .opensky import (
    NEPAL_BOUNDS,
    OpenSkyIngestor,
    StateVectorIndex,
    decode_state_vector,
    normalize_states,
)

__all__ = [
    "NEPAL_BOUNDS",
    "OpenSkyIngestor",
    "StateVectorIndex",
    "decode_state_vector",
    "normalize_states",
]
