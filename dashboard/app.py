"""Peloton Simulation Dashboard.

Interactive front end built with Streamlit and Plotly.  Configures a
population of riders and a wind, runs the deterministic engine and
plots distance and speed against time.

Launch with::

    streamlit run dashboard/app.py
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from peloton.config import load_scenario, parse_scenario
from peloton.report import history_frame, summary_frame

_RIDER_COLUMNS: list[str] = ["power", "cda", "mass"]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _default_riders() -> pd.DataFrame:
    """Rider table seeded from the bundled scenario."""
    scenario = load_scenario()
    return pd.DataFrame(
        [{"power": r.power, "cda": r.cda, "mass": r.mass} for r in scenario.riders],
        columns=_RIDER_COLUMNS,
    )


def _line_chart(
    history: pd.DataFrame,
    column: str,
    title: str,
    y_title: str,
) -> go.Figure:
    fig = go.Figure()
    for rider_id, group in history.groupby("rider_id"):
        fig.add_trace(
            go.Scatter(
                x=group["time"],
                y=group[column],
                mode="lines",
                name=f"Rider {rider_id}",
            )
        )
    fig.update_layout(
        title=title,
        xaxis_title="Time (s)",
        yaxis_title=y_title,
        height=400,
    )
    return fig


# ---------------------------------------------------------------------------
# Streamlit app
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the Streamlit dashboard."""
    st.set_page_config(page_title="Peloton Simulation", layout="wide")
    st.title("Peloton Simulation Dashboard")

    # ── Sidebar ──────────────────────────────────────────────────────────
    st.sidebar.header("Simulation Parameters")

    wind_x: float = st.sidebar.slider(
        "Wind x (m/s, negative = headwind)",
        min_value=-15.0,
        max_value=15.0,
        value=-5.0,
        step=0.5,
    )
    wind_y: float = st.sidebar.slider(
        "Wind y (m/s)",
        min_value=-10.0,
        max_value=10.0,
        value=1.0,
        step=0.5,
    )
    dt: float = st.sidebar.select_slider(
        "Tick length dt (s)",
        options=[0.1, 0.25, 0.5, 1.0, 2.0],
        value=1.0,
    )
    ticks: int = st.sidebar.slider(
        "Ticks",
        min_value=1,
        max_value=600,
        value=120,
    )

    # ── Section 1: Riders ────────────────────────────────────────────────
    st.header("1 -- Riders")
    riders: pd.DataFrame = st.data_editor(
        _default_riders(),
        num_rows="dynamic",
        use_container_width=True,
    )

    if not st.button("Run Simulation"):
        st.info("Edit the riders, then press \"Run Simulation\".")
        return

    try:
        scenario = parse_scenario(
            {
                "dt": float(dt),
                "ticks": int(ticks),
                "wind": {"x": wind_x, "y": wind_y},
                "riders": riders[_RIDER_COLUMNS].dropna().to_dict("records"),
            }
        )
    except ValueError as exc:
        st.error(str(exc))
        return

    simulation = scenario.build()
    with st.spinner("Running simulation..."):
        history = history_frame(simulation, scenario.ticks)

    # ── Section 2: Trajectories ──────────────────────────────────────────
    st.header("2 -- Trajectories")
    col_dist, col_speed = st.columns(2)
    with col_dist:
        st.plotly_chart(
            _line_chart(history, "x", "Distance", "Distance (m)"),
            use_container_width=True,
        )
    with col_speed:
        st.plotly_chart(
            _line_chart(history, "speed", "Speed", "Speed (m/s)"),
            use_container_width=True,
        )

    # ── Section 3: Summary ───────────────────────────────────────────────
    st.header("3 -- Summary")
    st.metric("Elapsed time (s)", f"{simulation.time:.2f}")
    st.dataframe(summary_frame(simulation).round(3), use_container_width=True)

    st.markdown("---")
    st.caption("Peloton engine state is read-only from this dashboard.")


if __name__ == "__main__":
    main()
