"""
Core Package - CO2 Impact Dashboard
co2impact/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from co2impact.core.exceptions import (
    Co2ImpactException,
    ComputeRequestError,
    ComputeResponseError,
    ComputeServiceException,
    ComputeUnavailableError,
    PolicyParamsError,
    RegionFieldError,
    UnknownOperationError,
)
from co2impact.core.logging import configure_logging

__all__ = [
    # Logging
    "configure_logging",
    # Exceptions
    "Co2ImpactException",
    "ComputeRequestError",
    "ComputeResponseError",
    "ComputeServiceException",
    "ComputeUnavailableError",
    "PolicyParamsError",
    "RegionFieldError",
    "UnknownOperationError",
]
