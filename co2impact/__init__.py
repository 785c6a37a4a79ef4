"""CO2 Impact Dashboard: client-side state and compute-service boundary."""

__version__ = "1.0.0"
