"""Scenario loader for the peloton simulation engine."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path

import yaml

from peloton.core.kinematics import Velocity
from peloton.core.rider import RiderFactory
from peloton.core.simulation import Simulation
from peloton.core.wind import Wind

logger = logging.getLogger(__name__)

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
SCENARIO_PATH: Path = DATA_DIR / "default_scenario.yaml"

_RIDER_FIELDS: tuple[str, ...] = ("power", "cda", "mass")
_WIND_FIELDS: tuple[str, ...] = ("x", "y")


@dataclass(frozen=True)
class RiderSpec:
    """Physical parameters of one rider as read from a scenario.

    Attributes:
        power: Power output in watts (> 0).
        cda: Drag area coefficient in m^2 (>= 0).
        mass: Mass in kg (> 0).
    """

    power: float
    cda: float
    mass: float


@dataclass(frozen=True)
class Scenario:
    """A fully validated simulation scenario.

    Attributes:
        dt: Tick duration in seconds (> 0).
        ticks: Default number of ticks to run (>= 0).
        wind: Ambient wind.
        riders: Rider parameters in tick order.
    """

    dt: float
    ticks: int
    wind: Wind
    riders: tuple[RiderSpec, ...]

    def build(self, factory: RiderFactory | None = None) -> Simulation:
        """Instantiate a fresh :class:`Simulation` for this scenario."""
        factory = factory or RiderFactory()
        riders = [factory.create(s.power, s.cda, s.mass) for s in self.riders]
        return Simulation(riders, self.wind, self.dt)


def _number(value: object, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{where} must be numeric, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError(f"{where} must be finite, got {value}")
    return float(value)


def parse_scenario(data: dict) -> Scenario:
    """Validate a raw scenario mapping and convert it to a :class:`Scenario`.

    Args:
        data: Mapping as produced by ``yaml.safe_load``.

    Returns:
        Validated :class:`Scenario`.

    Raises:
        ValueError: If a field is missing, non-numeric or out of range.
    """
    if not isinstance(data, dict):
        raise ValueError("Scenario must be a mapping.")

    for key in ("dt", "riders"):
        if key not in data:
            raise ValueError(f"Scenario is missing required field '{key}'")

    # --- Clock ---
    dt = _number(data["dt"], "'dt'")
    if dt <= 0.0:
        raise ValueError(f"'dt' must be > 0, got {dt}")

    ticks = data.get("ticks", 10)
    if isinstance(ticks, bool) or not isinstance(ticks, int) or ticks < 0:
        raise ValueError(f"'ticks' must be a non-negative integer, got {ticks!r}")

    # --- Wind ---
    raw_wind = data.get("wind") or {}
    if not isinstance(raw_wind, dict):
        raise ValueError("'wind' must be a mapping with 'x' and 'y'")
    components = [
        _number(raw_wind.get(field, 0.0), f"'wind.{field}'") for field in _WIND_FIELDS
    ]
    wind = Wind(Velocity(*components))

    # --- Riders ---
    raw_riders = data["riders"]
    if not isinstance(raw_riders, list) or not raw_riders:
        raise ValueError("'riders' must be a non-empty list")

    riders: list[RiderSpec] = []
    for idx, entry in enumerate(raw_riders):
        if not isinstance(entry, dict):
            raise ValueError(f"Rider entry {idx} must be a mapping")
        for field in _RIDER_FIELDS:
            if field not in entry:
                raise ValueError(
                    f"Rider entry {idx} is missing required field '{field}'"
                )
        power = _number(entry["power"], f"Rider entry {idx}: 'power'")
        cda = _number(entry["cda"], f"Rider entry {idx}: 'cda'")
        mass = _number(entry["mass"], f"Rider entry {idx}: 'mass'")
        if power <= 0.0:
            raise ValueError(f"Rider entry {idx}: 'power' must be > 0, got {power}")
        if cda < 0.0:
            raise ValueError(f"Rider entry {idx}: 'cda' must be >= 0, got {cda}")
        if mass <= 0.0:
            raise ValueError(f"Rider entry {idx}: 'mass' must be > 0, got {mass}")
        riders.append(RiderSpec(power=power, cda=cda, mass=mass))

    return Scenario(dt=dt, ticks=ticks, wind=wind, riders=tuple(riders))


def load_scenario(path: Path | None = None) -> Scenario:
    """Load a simulation scenario from a YAML file.

    Args:
        path: Optional override for the scenario file path.

    Returns:
        Validated :class:`Scenario`.

    Raises:
        FileNotFoundError: If the scenario file does not exist.
        ValueError: If the scenario is malformed.
    """
    scenario_path = Path(path) if path is not None else SCENARIO_PATH
    if not scenario_path.exists():
        raise FileNotFoundError(f"Scenario file not found: {scenario_path}")

    with open(scenario_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    scenario = parse_scenario(data)
    logger.info(
        "Loaded scenario %s: %d riders, dt=%.3f s, %d ticks",
        scenario_path.name,
        len(scenario.riders),
        scenario.dt,
        scenario.ticks,
    )
    return scenario
