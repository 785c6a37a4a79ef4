"""Response shapes returned by the remote compute service."""

from typing import List

from pydantic import BaseModel, Field


class RegionEmissions(BaseModel):
    id: str
    emissions_kg: float


class DashboardResult(BaseModel):
    """co2_dashboard: emissions per region plus the total."""
    by_region: List[RegionEmissions] = Field(default_factory=list)
    total_emissions_kg: float


class MarginalReduction(BaseModel):
    """Avoided emissions from +1 percentage point of renewable share."""
    id: str
    delta_renew_kWh: float
    avoided_emissions_kg: float


class MarginalResult(BaseModel):
    marginal: List[MarginalReduction] = Field(default_factory=list)


class PathwayPoint(BaseModel):
    year: int
    renewable_share_pct: float
    emissions_kg: float


class PathwayResult(BaseModel):
    """co2_policy_pathway: year-by-year trajectory."""
    pathway: List[PathwayPoint] = Field(default_factory=list)
