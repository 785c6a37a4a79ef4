from co2impact.services.compute_client import (
    CO2_DASHBOARD,
    CO2_MARGINAL_REDUCTION,
    CO2_POLICY_PATHWAY,
    OPERATIONS,
    RemoteComputeClient,
)

__all__ = [
    "CO2_DASHBOARD",
    "CO2_MARGINAL_REDUCTION",
    "CO2_POLICY_PATHWAY",
    "OPERATIONS",
    "RemoteComputeClient",
]
