from co2impact.state.async_slot import AsyncSlot, SlotState, error_message
from co2impact.state.dashboard_state import DashboardState, Kpis
from co2impact.state.region_store import RegionStore

__all__ = [
    "AsyncSlot",
    "DashboardState",
    "Kpis",
    "RegionStore",
    "SlotState",
    "error_message",
]
