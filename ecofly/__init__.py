"""EcoFly flight-emissions backend."""
