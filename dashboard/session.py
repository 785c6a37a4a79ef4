"""
session.py — Per-session state wiring between Streamlit widgets and DashboardState.
"""

import asyncio
from typing import Awaitable, Callable

import streamlit as st

from co2impact.config import get_settings
from co2impact.models.policy import PolicyField
from co2impact.services.compute_client import RemoteComputeClient
from co2impact.state.dashboard_state import DashboardState

STATE_KEY = "co2_dashboard_state"
# Bumped on add/remove/reset so region widgets are rebuilt with fresh keys
LAYOUT_REV_KEY = "co2_region_layout_rev"

POLICY_WIDGETS = {
    "start_year": "policy_start_year",
    "target_year": "policy_target_year",
    "target_share_pct": "policy_target_share_pct",
}


def get_state() -> DashboardState:
    """Session's DashboardState, created on first access."""
    if STATE_KEY not in st.session_state:
        client = RemoteComputeClient(get_settings())
        st.session_state[STATE_KEY] = DashboardState.initial(client)
    return st.session_state[STATE_KEY]


def reset_state() -> None:
    state = st.session_state.pop(STATE_KEY, None)
    if state is not None:
        state.teardown()
    for key in POLICY_WIDGETS.values():
        st.session_state.pop(key, None)
    _bump_layout()


def run_action(action: Callable[[], Awaitable[None]]) -> None:
    """Drive one state action to completion on a fresh event loop."""
    asyncio.run(action())


# ---------------------------------------------------------------------------
# Region editor callbacks
# ---------------------------------------------------------------------------
def region_widget_key(index: int, field: str) -> str:
    return f"region_{st.session_state.get(LAYOUT_REV_KEY, 0)}_{index}_{field}"


def _bump_layout() -> None:
    st.session_state[LAYOUT_REV_KEY] = st.session_state.get(LAYOUT_REV_KEY, 0) + 1


def on_region_change(index: int, field: str, widget_key: str) -> None:
    get_state().regions.update(index, field, st.session_state[widget_key])


def on_region_add() -> None:
    get_state().regions.add()
    _bump_layout()


def on_region_remove(index: int) -> None:
    get_state().regions.remove(index)
    _bump_layout()


def on_policy_change(field: PolicyField) -> None:
    get_state().set_policy(field, st.session_state[POLICY_WIDGETS[field]])
