"""Fixed-timestep simulation loop for the peloton engine.

Riders are independent within a tick: each one reads only its own state
and the shared, immutable wind.  Every rider is fully advanced (velocity
then position) before the clock moves forward by ``dt``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from peloton.core.kinematics import Position, Velocity
from peloton.core.physics import advance_rider
from peloton.core.rider import Rider
from peloton.core.wind import Wind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RiderSnapshot:
    """Read-only view of a rider at one instant.

    Attributes:
        rider_id: Stable rider identifier.
        position: Position in metres.
        velocity: Velocity in m/s.
        speed: Magnitude of ``velocity``.
    """

    rider_id: int
    position: Position
    velocity: Velocity
    speed: float


class Simulation:
    """Owns a rider population, the wind and the simulation clock.

    Riders passed in are claimed by the simulation and cannot be handed
    to a second one.  ``wind`` and ``dt`` are fixed for the run.
    """

    __slots__ = ("_riders", "_wind", "_dt", "_time", "_ticks")

    def __init__(self, riders: Iterable[Rider], wind: Wind, dt: float) -> None:
        rider_list = list(riders)
        if not rider_list:
            raise ValueError("Simulation requires at least one rider.")
        if not math.isfinite(dt) or dt <= 0.0:
            raise ValueError("dt must be > 0.")
        ids = [r.rider_id for r in rider_list]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Rider ids must be unique, got {ids}.")
        owned = [r.rider_id for r in rider_list if r.owned]
        if owned:
            raise ValueError(f"Riders {owned} already belong to a simulation.")
        for r in rider_list:
            r.claim()

        self._riders: list[Rider] = rider_list
        self._wind: Wind = wind
        self._dt: float = float(dt)
        self._time: float = 0.0
        self._ticks: int = 0

        logger.info(
            "Simulation created: %d riders, wind=%s, dt=%.3f s",
            len(rider_list),
            wind.velocity,
            self._dt,
        )

    # -- Read-only surface ---------------------------------------------------

    @property
    def wind(self) -> Wind:
        """Shared ambient wind."""
        return self._wind

    @property
    def dt(self) -> float:
        """Tick duration in seconds."""
        return self._dt

    @property
    def time(self) -> float:
        """Elapsed simulated time in seconds."""
        return self._time

    @property
    def ticks(self) -> int:
        """Number of completed ticks."""
        return self._ticks

    @property
    def riders(self) -> tuple[Rider, ...]:
        """Riders in tick order."""
        return tuple(self._riders)

    def rider(self, rider_id: int) -> Rider:
        """Look up a rider by id.

        Raises:
            KeyError: If no rider has the given id.
        """
        for r in self._riders:
            if r.rider_id == rider_id:
                return r
        raise KeyError(rider_id)

    def snapshot(self) -> list[RiderSnapshot]:
        """Return the current state of every rider, in tick order."""
        return [
            RiderSnapshot(
                rider_id=r.rider_id,
                position=r.position,
                velocity=r.velocity,
                speed=r.velocity.magnitude(),
            )
            for r in self._riders
        ]

    # -- Stepping ------------------------------------------------------------

    def tick(self) -> None:
        """Advance every rider by one ``dt`` and then advance the clock."""
        for r in self._riders:
            advance_rider(r, self.dt, self.wind)
        self._time += self.dt
        self._ticks += 1

        if logger.isEnabledFor(logging.DEBUG):
            for r in self._riders:
                logger.debug(
                    "t=%.3f rider=%d position=%s velocity=%s",
                    self._time,
                    r.rider_id,
                    r.position,
                    r.velocity,
                )

    def run(
        self,
        ticks: int,
        callback: Callable[[Simulation], None] | None = None,
    ) -> Simulation:
        """Run ``ticks`` consecutive ticks.

        Args:
            ticks: Number of ticks to run (>= 0).
            callback: Optional hook invoked with the simulation after
                each tick.

        Returns:
            This simulation, for chaining.

        Raises:
            ValueError: If ticks is negative.
        """
        if ticks < 0:
            raise ValueError("ticks must be >= 0.")
        for _ in range(ticks):
            self.tick()
            if callback is not None:
                callback(self)
        return self

    def __repr__(self) -> str:
        return (
            f"Simulation(riders={len(self._riders)}, time={self._time}, "
            f"dt={self.dt})"
        )
