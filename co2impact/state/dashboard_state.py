"""
Dashboard State - CO2 Impact Dashboard
co2impact/state/dashboard_state.py

Explicit state container owned by the view for one session:
regions, policy parameters, and one AsyncSlot per remote operation.

Lifecycle: `initial()` when the session starts, `teardown()` before the
view discards it. Actions capture the region snapshot at trigger time.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

import structlog

from co2impact.models.policy import PolicyField, PolicyParams
from co2impact.models.region import SEED_REGIONS, Region
from co2impact.models.results import DashboardResult, MarginalResult, PathwayResult
from co2impact.services.compute_client import RemoteComputeClient
from co2impact.state.async_slot import AsyncSlot
from co2impact.state.region_store import RegionStore

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Kpis:
    region_count: int
    total_energy: float
    avg_share: Optional[str]


@dataclass
class DashboardState:
    client: RemoteComputeClient
    regions: RegionStore = field(default_factory=RegionStore)
    policy: PolicyParams = field(default_factory=PolicyParams)
    dashboard: AsyncSlot[DashboardResult] = field(
        default_factory=lambda: AsyncSlot("dashboard")
    )
    marginal: AsyncSlot[MarginalResult] = field(
        default_factory=lambda: AsyncSlot("marginal")
    )
    pathway: AsyncSlot[PathwayResult] = field(
        default_factory=lambda: AsyncSlot("pathway")
    )

    @classmethod
    def initial(
        cls,
        client: RemoteComputeClient,
        regions: Sequence[Region] = SEED_REGIONS,
    ) -> "DashboardState":
        """New session state seeded with the default regions and policy inputs."""
        logger.info("dashboard_state_created", regions=len(regions))
        return cls(client=client, regions=RegionStore(regions))

    def set_policy(self, name: PolicyField, value) -> PolicyParams:
        self.policy = self.policy.set(name, value)
        return self.policy

    def kpis(self) -> Kpis:
        return Kpis(
            region_count=len(self.regions),
            total_energy=self.regions.total_energy,
            avg_share=self.regions.avg_share,
        )

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def compute_dashboard(self) -> None:
        regions = self.regions.snapshot
        await self.dashboard.run(self.client.co2_dashboard(regions))

    async def compute_marginal(self) -> None:
        regions = self.regions.snapshot
        await self.marginal.run(self.client.co2_marginal_reduction(regions))

    async def compute_pathway(self) -> None:
        regions = self.regions.snapshot
        policy = self.policy
        await self.pathway.run(self._pathway_request(regions, policy))

    async def _pathway_request(
        self, regions: Sequence[Region], policy: PolicyParams
    ) -> PathwayResult:
        # Coercion failures surface as the pathway slot's error, before any I/O
        params = policy.coerce()
        return await self.client.co2_policy_pathway(regions, params)

    def teardown(self) -> None:
        for slot in (self.dashboard, self.marginal, self.pathway):
            slot.reset()
        logger.info("dashboard_state_torn_down")
