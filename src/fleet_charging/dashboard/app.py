"""EV Fleet Charging Planner — Streamlit dashboard.

Layout: sidebar fleet inputs → KPI row → four charts
(charge profile, cost vs tariff, flat vs off-peak, capacity fade)
→ hourly profile table.

Run with:
    streamlit run src/fleet_charging/dashboard/app.py
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st
from pydantic import ValidationError

from fleet_charging.config import EngineConfig, FleetInput
from fleet_charging.engine.report import build_dashboard_series, build_report
from fleet_charging.errors import FleetChargingError

# ---------------------------------------------------------------------------
# Default instances — single source of truth for sidebar defaults
# ---------------------------------------------------------------------------
_DEF_F = FleetInput()
_DEF_CFG = EngineConfig.from_env()

_CHART_LAYOUT = dict(
    height=300,
    margin=dict(l=20, r=20, t=30, b=20),
    plot_bgcolor="rgba(0,0,0,0)",
    paper_bgcolor="rgba(0,0,0,0)",
    font=dict(family="Inter", size=11),
)

st.set_page_config(page_title="EV Fleet Charging Planner", page_icon="⚡", layout="wide")
st.title("EV Fleet Charging Planner")

# ---------------------------------------------------------------------------
# SIDEBAR — Inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Fleet Inputs")

with st.sidebar.expander("Fleet", expanded=True):
    c1, c2 = st.columns(2)
    f_num = c1.number_input("Number of EVs", 1, 10_000, _DEF_F.num_ev)
    f_miles = c2.number_input("Daily mileage (mi)", 1.0, 500.0, _DEF_F.daily_mileage, 10.0)
    f_eff = st.number_input("Efficiency (mi/kWh)", 0.1, 10.0, _DEF_F.efficiency, 0.1)
    f_hours = st.slider("Working hours", 0.0, 24.0, tuple(_DEF_F.working_hours), 1.0)

with st.sidebar.expander("Battery & Charger", expanded=True):
    c1, c2 = st.columns(2)
    f_cap = c1.number_input("Battery capacity (kWh)", 5.0, 1_000.0, _DEF_F.battery_capacity, 5.0)
    f_power = c2.number_input("Charge power (kW)", 1.0, 350.0, _DEF_F.charge_power, 1.0)
    f_dod = st.slider("Battery DoD band (%)", 0.0, 100.0, tuple(_DEF_F.battery_dod), 1.0)

with st.sidebar.expander("Tariff"):
    t_flat = st.number_input("Flat rate (£/kWh)", 0.0, 2.0, _DEF_CFG.tariff.flat_rate, 0.005, format="%.3f")
    t_ratio = st.slider("Off-peak as fraction of flat", 0.0, 1.0, _DEF_CFG.tariff.off_peak_ratio, 0.05)

try:
    fleet = FleetInput(
        num_ev=f_num, daily_mileage=f_miles, battery_capacity=f_cap,
        charge_power=f_power, efficiency=f_eff,
        battery_dod=f_dod, working_hours=f_hours,
    )
    config = _DEF_CFG.model_copy(
        update={"tariff": _DEF_CFG.tariff.model_copy(update={"flat_rate": t_flat, "off_peak_ratio": t_ratio})}
    )
    report = build_report(fleet, config)
    series = build_dashboard_series(fleet, config)
except (ValidationError, FleetChargingError) as exc:
    st.error(f"Cannot compute a report for these inputs: {exc}")
    st.stop()

# ---------------------------------------------------------------------------
# KPIs
# ---------------------------------------------------------------------------
k1, k2, k3, k4, k5 = st.columns(5)
k1.metric("Daily energy / EV", f"{report.daily_energy_consumption_per_ev:.1f} kWh")
k2.metric("Charge time / EV", f"{report.charge_time_per_ev:.1f} h")
k3.metric("Mileage / charge", f"{report.mileage_per_charge:.0f} mi")
k4.metric("Fleet demand", f"{report.total_fleet_energy_demand:,.0f} kWh/day")
k5.metric("Discharge cycles / yr", f"{report.num_discharge_cycles_per_year:.0f}")

# ---------------------------------------------------------------------------
# Charts
# ---------------------------------------------------------------------------
profile_df = pd.DataFrame([p.model_dump() for p in series.charge_profile])
rates_df = pd.DataFrame([c.model_dump() for c in series.cost_across_rates])
fade_df = pd.DataFrame([b.model_dump() for b in series.capacity_fade])

left, right = st.columns(2)

with left:
    st.subheader("Charge profile")
    fig_profile = go.Figure()
    if not profile_df.empty:
        fig_profile.add_trace(go.Scatter(
            x=profile_df["time"], y=profile_df["capacity"], name="Capacity (kWh)",
            mode="lines+markers", line=dict(color="#6c5ce7"),
        ))
        fig_profile.add_trace(go.Scatter(
            x=profile_df["time"], y=profile_df["mileage"], name="Remaining mileage (mi)",
            mode="lines+markers", line=dict(color="#00b894"), yaxis="y2",
        ))
    fig_profile.update_layout(
        xaxis_title="Hour of day",
        yaxis=dict(title="Capacity (kWh)"),
        yaxis2=dict(title="Mileage (mi)", overlaying="y", side="right"),
        **_CHART_LAYOUT,
    )
    st.plotly_chart(fig_profile, use_container_width=True)

    st.subheader("Fleet daily cost vs tariff")
    fig_rates = go.Figure(go.Scatter(
        x=rates_df["rate"], y=rates_df["cost"], mode="lines+markers", line=dict(color="#6c5ce7"),
    ))
    fig_rates.update_layout(xaxis_title="Rate (£/kWh)", yaxis_title="Cost (£)", **_CHART_LAYOUT)
    st.plotly_chart(fig_rates, use_container_width=True)

with right:
    st.subheader("Flat vs off-peak (per EV, per day)")
    fig_split = go.Figure(go.Bar(
        x=["Flat rate", "Off-peak first"],
        y=[report.flat_daily_cost, report.reduced_charging_cost],
        marker_color=["#6c5ce7", "#00b894"],
        text=[f"£{report.flat_daily_cost:.2f}", f"£{report.reduced_charging_cost:.2f}"],
    ))
    fig_split.update_layout(yaxis_title="Cost (£)", showlegend=False, **_CHART_LAYOUT)
    st.plotly_chart(fig_split, use_container_width=True)

    st.subheader("Battery capacity fade")
    fig_fade = go.Figure(go.Scatter(
        x=fade_df["time"], y=fade_df["capacity"], mode="lines+markers", line=dict(color="#e17055"),
    ))
    fig_fade.update_layout(xaxis_title="Years", yaxis_title="Remaining capacity (kWh)", **_CHART_LAYOUT)
    st.plotly_chart(fig_fade, use_container_width=True)

# ---------------------------------------------------------------------------
# Hourly table
# ---------------------------------------------------------------------------
with st.expander("Hourly charge profile"):
    st.dataframe(profile_df.round(3), use_container_width=True, hide_index=True)
