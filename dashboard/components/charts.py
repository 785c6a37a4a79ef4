"""
components/charts.py — Plotly chart and table builders for the dashboard.
"""

import plotly.graph_objects as go
import pandas as pd

from co2impact.models.results import DashboardResult, MarginalResult, PathwayResult


EMISSIONS_COLOR = "#caff37"
RENEWABLE_COLOR = "#9aff65"

MARGINAL_COLUMNS = ["Region", "ΔRenew kWh", "Avoided kg"]


def emissions_bar_chart(result: DashboardResult) -> go.Figure:
    """Vertical bar chart: emissions per region."""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=[r.id for r in result.by_region],
        y=[r.emissions_kg for r in result.by_region],
        name="emissions_kg",
        marker_color=EMISSIONS_COLOR,
    ))

    fig.update_layout(
        xaxis=dict(title="Region", type="category"),
        yaxis=dict(title="Emissions (kg)"),
        height=260, margin=dict(l=40, r=20, t=20, b=40),
        showlegend=True,
    )
    fig.update_xaxes(showgrid=True, griddash="dash")
    fig.update_yaxes(showgrid=True, griddash="dash")
    return fig


def total_emissions_caption(result: DashboardResult) -> str:
    return f"Total Emissions: {result.total_emissions_kg:.2f} kg"


def format_energy(value: float) -> str:
    """Total energy with thousands separators, up to two decimals."""
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def marginal_table(result: MarginalResult) -> pd.DataFrame:
    """Table rows for the +1% renewable panel, in response order."""
    rows = [
        {
            "Region": m.id,
            "ΔRenew kWh": m.delta_renew_kWh,
            "Avoided kg": m.avoided_emissions_kg,
        }
        for m in result.marginal
    ]
    return pd.DataFrame(rows, columns=MARGINAL_COLUMNS)


def pathway_line_chart(result: PathwayResult) -> go.Figure:
    """Two lines over years: renewable share and emissions."""
    years = [p.year for p in result.pathway]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=years, y=[p.renewable_share_pct for p in result.pathway],
        mode="lines+markers", name="renewable_share_pct",
        line=dict(color=RENEWABLE_COLOR, width=2),
    ))
    fig.add_trace(go.Scatter(
        x=years, y=[p.emissions_kg for p in result.pathway],
        mode="lines+markers", name="emissions_kg",
        line=dict(color=EMISSIONS_COLOR, width=2),
    ))

    fig.update_layout(
        xaxis=dict(title="Year", dtick=1),
        height=240, margin=dict(l=40, r=20, t=20, b=40),
        legend=dict(orientation="h", y=-0.3),
    )
    fig.update_xaxes(showgrid=True, griddash="dash")
    fig.update_yaxes(showgrid=True, griddash="dash")
    return fig
