"""Dashboard page - clock-in estimate and current stock."""

from typing import Any, Dict, Optional

import pandas as pd
import plotly.express as px
import streamlit as st

from ui.api_client import CrabOpsClient
from ui.config import get_settings


def format_count(value: Optional[float]) -> str:
    """Whole counts without a trailing .0; fractional counts to one place."""
    if value is None:
        return "0"
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.1f}"


def format_generated_at(value: Optional[str], timezone: str) -> str:
    """ISO timestamp from the API as shop-local "Wed 2:05 PM"; naive values are UTC."""
    if not value:
        return ""
    ts = pd.Timestamp(value)
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    ts = ts.tz_convert(timezone)
    return f"{ts:%a} {ts.hour % 12 or 12}:{ts:%M %p}"


def build_stock_frame(stock: Dict[str, Any]) -> pd.DataFrame:
    """Rows for the stock breakdown chart."""
    return pd.DataFrame([
        {"Stock": "Males", "Count": stock.get("total_male_units", 0), "Unit": "dozens"},
        {"Stock": "Females", "Count": stock.get("total_female_units", 0), "Unit": "dozens"},
        {"Stock": "#1 Bushels", "Count": stock.get("bulk_volume_value", 0), "Unit": "bushels"},
        {"Stock": "Ungraded", "Count": stock.get("ungraded_count", 0), "Unit": "boxes"},
    ])


def render_clock_in(estimate: Dict[str, Any], total_dozens: float):
    """Estimated back-of-house clock-in banner."""
    st.caption("ESTIMATED BACK OF HOUSE CLOCK IN TIME")

    col1, col2 = st.columns(2)

    with col1:
        st.metric("Estimated Total Dozen", f"{format_count(total_dozens)} Dozens Total")

    with col2:
        day = estimate.get("target_day_name", "")
        label = f"Clock In ({'tomorrow, ' if estimate.get('is_next_day') else ''}{day})"
        st.metric(label, estimate.get("recommended_time", "N/A"))

    if estimate.get("status") == "scheduled" and estimate.get("workload_minutes"):
        st.caption(f"About {estimate['workload_minutes']:.0f} minutes of prep before the latest start.")


def render_stock(stock: Optional[Dict[str, Any]], show_chart: bool = True):
    """Current stock widget."""
    st.subheader("Current Stock")

    if not stock:
        st.caption("Latest Report: No data available")
        st.info("Waiting for inventory report...")
        return

    st.caption(f"Latest Report: {stock.get('report_date') or 'unknown'}")

    col1, col2, col3 = st.columns(3)

    with col1:
        st.metric("Males", format_count(stock.get("total_male_units")), help="All males, dozens")

    with col2:
        st.metric("Females", format_count(stock.get("total_female_units")), help="All females, dozens")

    with col3:
        st.metric("Bushels", stock.get("total_bulk_volume", "0"), help="All #1 bushels")

    if not show_chart:
        return

    fig = px.bar(
        build_stock_frame(stock),
        x="Stock",
        y="Count",
        hover_data=["Unit"],
        title="Stock Breakdown",
    )
    st.plotly_chart(fig, use_container_width=True)


def render(client: CrabOpsClient):
    """Render the dashboard page."""
    result = client.get_dashboard()

    if not result.success:
        st.error(f"Error loading dashboard: {result.error}")
        return

    data = result.data or {}

    st.title(f"Ready to roll, {data.get('staff_name', '')}?")
    settings = get_settings()
    generated = format_generated_at(data.get("generated_at"), settings.business_timezone)
    st.caption(f"Store Dashboard - as of {generated}" if generated else "Store Dashboard")

    render_clock_in(data.get("estimate", {}), data.get("total_dozens", 0))
    st.divider()
    render_stock(data.get("stock"), show_chart=settings.show_stock_chart)
