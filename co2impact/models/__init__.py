from co2impact.models.policy import PathwayParams, PolicyParams
from co2impact.models.region import (
    DEFAULT_ENERGY_KWH,
    DEFAULT_GRID_EMISSION_FACTOR,
    DEFAULT_RENEWABLE_SHARE_PCT,
    EDITABLE_FIELDS,
    SEED_REGIONS,
    Region,
)
from co2impact.models.results import (
    DashboardResult,
    MarginalReduction,
    MarginalResult,
    PathwayPoint,
    PathwayResult,
    RegionEmissions,
)

__all__ = [
    "DEFAULT_ENERGY_KWH",
    "DEFAULT_GRID_EMISSION_FACTOR",
    "DEFAULT_RENEWABLE_SHARE_PCT",
    "EDITABLE_FIELDS",
    "SEED_REGIONS",
    "DashboardResult",
    "MarginalReduction",
    "MarginalResult",
    "PathwayParams",
    "PathwayPoint",
    "PathwayResult",
    "PolicyParams",
    "Region",
    "RegionEmissions",
]
