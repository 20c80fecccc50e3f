"""Console and tabular reporting built on the simulation's read-only surface."""

from __future__ import annotations

import pandas as pd

from peloton.core.physics import terminal_velocity
from peloton.core.simulation import Simulation

HISTORY_COLUMNS: list[str] = [
    "tick",
    "time",
    "rider_id",
    "x",
    "y",
    "vx",
    "vy",
    "speed",
]


def format_rider_positions(simulation: Simulation) -> list[str]:
    """Return one human-readable line per rider."""
    return [
        f"Rider {snap.rider_id} is at ({snap.position.x:.2f}, "
        f"{snap.position.y:.2f}) moving at {snap.speed:.2f} m/s"
        for snap in simulation.snapshot()
    ]


def _history_rows(simulation: Simulation) -> list[dict]:
    return [
        {
            "tick": simulation.ticks,
            "time": simulation.time,
            "rider_id": snap.rider_id,
            "x": snap.position.x,
            "y": snap.position.y,
            "vx": snap.velocity.x,
            "vy": snap.velocity.y,
            "speed": snap.speed,
        }
        for snap in simulation.snapshot()
    ]


def history_frame(simulation: Simulation, ticks: int) -> pd.DataFrame:
    """Run ``ticks`` ticks and record every rider's state after each one.

    The current state is recorded first, so the frame holds
    ``(ticks + 1) * len(riders)`` rows.

    Args:
        simulation: Simulation to advance.  It is mutated.
        ticks: Number of ticks to run (>= 0).

    Returns:
        DataFrame with columns :data:`HISTORY_COLUMNS`.
    """
    rows = _history_rows(simulation)
    simulation.run(ticks, callback=lambda sim: rows.extend(_history_rows(sim)))
    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)


def summary_frame(simulation: Simulation) -> pd.DataFrame:
    """Current state of every rider alongside its parameters.

    ``terminal_speed`` is the analytic equilibrium speed along x for the
    simulation's wind, ignoring the lateral wind component.
    """
    wind_x = simulation.wind.velocity.x
    rows = []
    for rider in simulation.riders:
        rows.append(
            {
                "rider_id": rider.rider_id,
                "power": rider.power,
                "cda": rider.cda,
                "mass": rider.mass,
                "distance": rider.position.x,
                "lateral": rider.position.y,
                "speed": rider.speed,
                "terminal_speed": terminal_velocity(rider.power, rider.cda, wind_x),
            }
        )
    return pd.DataFrame(rows).set_index("rider_id")
