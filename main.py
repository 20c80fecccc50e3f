"""CLI entrypoint for the peloton simulation engine."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from peloton import __version__
from peloton.config import SCENARIO_PATH, load_scenario
from peloton.log import setup_logging
from peloton.report import format_rider_positions, summary_frame


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a peloton simulation.")
    parser.add_argument(
        "--scenario",
        type=Path,
        default=SCENARIO_PATH,
        help="YAML scenario file (default: %(default)s)",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=None,
        help="Number of ticks to run (default: value from the scenario)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Load a scenario, run it and print rider positions every tick."""
    args = _parse_args(argv)
    setup_logging(args.log_level)

    scenario = load_scenario(args.scenario)
    simulation = scenario.build()
    ticks = scenario.ticks if args.ticks is None else args.ticks

    print(f"Peloton Simulation Engine v{__version__}")
    print("=" * 56)
    wind = simulation.wind.velocity
    print(f"Riders: {len(simulation.riders)}  Wind: {wind} m/s  dt: {simulation.dt} s")
    print("-" * 56)

    def _print_tick(sim) -> None:
        print(f"\nt = {sim.time:.2f} s")
        for line in format_rider_positions(sim):
            print(f"  {line}")

    simulation.run(ticks, callback=_print_tick)

    print("\nSummary:\n")
    print(summary_frame(simulation).round(3).to_string())


if __name__ == "__main__":
    sys.exit(main() or 0)
