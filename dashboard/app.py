"""
CO₂ Impact — Dashboard
Emissions summary, marginal reductions and policy pathways.

Run: streamlit run dashboard/app.py
"""

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from co2impact.config import get_settings
from co2impact.core.logging import configure_logging
from dashboard.components.charts import (
    emissions_bar_chart, marginal_table, pathway_line_chart,
    format_energy, total_emissions_caption,
)
from dashboard.session import (
    POLICY_WIDGETS, get_state, on_policy_change, on_region_add,
    on_region_change, on_region_remove, region_widget_key, reset_state,
    run_action,
)

settings = get_settings()
configure_logging(settings)

st.set_page_config(
    page_title=settings.APP_NAME,
    page_icon="🌍",
    layout="wide",
)

state = get_state()

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
st.sidebar.markdown(f"## 🌍 {settings.APP_NAME}")
st.sidebar.caption(f"Compute service: {settings.COMPUTE_API_URL}")
if st.sidebar.button("🔄 Reset session"):
    reset_state()
    st.rerun()

if settings.HOME_URL:
    st.markdown(f"[← Back to Home]({settings.HOME_URL})")

# ---------------------------------------------------------------------------
# Header + toolbar
# ---------------------------------------------------------------------------
head, toolbar = st.columns([3, 2])
with head:
    st.title("CO₂ Impact — Dashboard")
    st.caption("Emissions summary, marginal reductions and policy pathways.")

with toolbar:
    b1, b2, b3 = st.columns(3)
    if b1.button("Compute", use_container_width=True):
        with st.spinner("Computing emissions..."):
            run_action(state.compute_dashboard)
    if b2.button("Marginal +1%", use_container_width=True):
        with st.spinner("Computing marginal reductions..."):
            run_action(state.compute_marginal)
    if b3.button("Pathway", use_container_width=True):
        with st.spinner("Computing policy pathway..."):
            run_action(state.compute_pathway)

# ---------------------------------------------------------------------------
# KPIs
# ---------------------------------------------------------------------------
kpis = state.kpis()
c1, c2, c3, c4 = st.columns(4)
c1.metric("Regions", kpis.region_count)
c2.metric("Total Energy", format_energy(kpis.total_energy))
c3.metric("Avg Renewable Share", f"{kpis.avg_share}%" if kpis.avg_share is not None else "—")
c4.metric("Inputs Editable", "Yes", help="Modify inputs below")

st.divider()

left, right = st.columns([2, 3])

# ---------------------------------------------------------------------------
# Left column: inputs
# ---------------------------------------------------------------------------
with left:
    with st.container(border=True):
        st.subheader("Regions")
        with st.container(height=480):
            for i, region in enumerate(state.regions.snapshot):
                with st.container(border=True):
                    id_col, rm_col = st.columns([3, 1])
                    key = region_widget_key(i, "id")
                    id_col.text_input(
                        "Region ID", value=region.id, key=key,
                        placeholder="Region ID", label_visibility="collapsed",
                        on_change=on_region_change, args=(i, "id", key),
                    )
                    rm_col.button(
                        "Remove", key=region_widget_key(i, "remove"), type="primary",
                        on_click=on_region_remove, args=(i,),
                    )

                    key = region_widget_key(i, "energy_kWh")
                    st.number_input(
                        "Energy (kWh)", value=float(region.energy_kWh), step=1000.0,
                        key=key, on_change=on_region_change, args=(i, "energy_kWh", key),
                    )
                    key = region_widget_key(i, "renewable_share_pct")
                    st.number_input(
                        "Renewable share %", value=float(region.renewable_share_pct), step=1.0,
                        key=key, on_change=on_region_change, args=(i, "renewable_share_pct", key),
                    )
                    key = region_widget_key(i, "grid_emission_factor_kg_per_kWh")
                    st.number_input(
                        "Grid EF (kg/kWh)", value=float(region.grid_emission_factor_kg_per_kWh),
                        step=0.01, key=key,
                        on_change=on_region_change,
                        args=(i, "grid_emission_factor_kg_per_kWh", key),
                    )

        st.button("➕ Add Region", on_click=on_region_add)

    with st.container(border=True):
        st.subheader("Policy Path Params")
        labels = {
            "start_year": "Start Year",
            "target_year": "Target Year",
            "target_share_pct": "Target Share %",
        }
        for field, widget_key in POLICY_WIDGETS.items():
            st.text_input(
                labels[field], value=getattr(state.policy, field), key=widget_key,
                on_change=on_policy_change, args=(field,),
            )

# ---------------------------------------------------------------------------
# Right column: results
# ---------------------------------------------------------------------------
with right:
    with st.container(border=True):
        st.subheader("Emissions by Region")
        dash = state.dashboard.state
        if dash.data is not None:
            st.plotly_chart(emissions_bar_chart(dash.data), use_container_width=True, key="emissions_bar")
            st.caption(total_emissions_caption(dash.data))
        else:
            st.caption("Click Compute.")
        if dash.err:
            st.warning(dash.err)

    marg_col, path_col = st.columns(2)
    with marg_col:
        with st.container(border=True):
            st.subheader("Marginal +1% Renewable")
            marg = state.marginal.state
            if marg.data is not None:
                st.dataframe(marginal_table(marg.data), use_container_width=True, hide_index=True)
            else:
                st.caption("Click Marginal +1%.")
            if marg.err:
                st.warning(marg.err)

    with path_col:
        with st.container(border=True):
            st.subheader("Policy Pathway")
            path = state.pathway.state
            if path.data is not None:
                st.plotly_chart(pathway_line_chart(path.data), use_container_width=True, key="pathway_line")
            else:
                st.caption("Run Pathway.")
            if path.err:
                st.warning(path.err)
