"""
Custom Exceptions - CO2 Impact Dashboard
co2impact/core/exceptions.py

Exception classes for local state operations and remote compute calls.
"""

from typing import Iterable, Optional


class Co2ImpactException(Exception):
    """Base exception for the dashboard core."""

    pass


class RegionFieldError(Co2ImpactException):
    """Update targeted a field that a Region does not have."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Region has no field '{field}'")


class PolicyParamsError(Co2ImpactException):
    """One or more policy parameters could not be coerced to numbers."""

    def __init__(self, fields: Iterable[str]):
        self.fields = tuple(fields)
        super().__init__(
            "Invalid policy parameter(s): " + ", ".join(self.fields)
        )


class ComputeServiceException(Co2ImpactException):
    """Base exception for remote compute failures."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(message)


class UnknownOperationError(ComputeServiceException):
    """Operation name is not served by the compute service."""

    def __init__(self, operation: str):
        super().__init__(operation, f"Unknown compute operation '{operation}'")


class ComputeRequestError(ComputeServiceException):
    """Compute service answered with an error status."""

    def __init__(self, operation: str, status_code: int, detail: Optional[str] = None):
        self.status_code = status_code
        self.detail = detail
        message = f"{operation} failed ({status_code})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(operation, message)


class ComputeUnavailableError(ComputeServiceException):
    """Compute service could not be reached or timed out."""

    def __init__(self, operation: str, reason: str = "Compute service unavailable"):
        self.reason = reason
        super().__init__(operation, f"{operation}: {reason}")


class ComputeResponseError(ComputeServiceException):
    """Compute service returned a body of the wrong shape."""

    def __init__(self, operation: str, reason: str = "Malformed response"):
        self.reason = reason
        super().__init__(operation, f"{operation}: {reason}")
