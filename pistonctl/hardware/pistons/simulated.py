"""
Simulated pistons and the grid that owns them.

A SimulatedPiston integrates its position from the commanded velocity and
derives its motion phase from where it sits relative to its limits, the way a
physical piston reports Extended/Retracted once it reaches an end stop.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pistonctl.enums.device import PistonStatus

logger = logging.getLogger(__name__)


class SimulatedPiston:
    """
    A linear actuator living in a SimulatedGrid.

    Attributes:
        name (str): Display name.
        custom_data (str): Free-form annotation text, may hold [Piston Settings].
        velocity (float): Commanded velocity in m/s, positive extends.
        position (float): Current extension in m.
        enabled (bool): Powered on.
        damaged (bool): Broken blocks stop working but stay in the world.
    """

    def __init__(
        self,
        name: str,
        custom_data: str = "",
        *,
        position: float = 0.0,
        min_limit: float = 0.0,
        max_limit: float = 10.0,
        velocity: float = 0.0,
        enabled: bool = True,
        damaged: bool = False,
    ) -> None:
        self.name = name
        self.custom_data = custom_data
        self.position = position
        self.min_limit = min_limit
        self.max_limit = max_limit
        self.velocity = velocity
        self.enabled = enabled
        self.damaged = damaged
        self._closed = False
        self._status = self._derive_status(PistonStatus.RETRACTING)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def is_working(self) -> bool:
        return self.enabled and not self.damaged and not self._closed

    @property
    def status(self) -> PistonStatus:
        return self._status

    def close(self) -> None:
        """Mark the piston as removed from the world."""
        self._closed = True

    def step(self, dt: float) -> None:
        """Advance the simulation by ``dt`` seconds."""
        if self.is_working:
            target = self.position + self.velocity * dt
            self.position = min(self.max_limit, max(self.min_limit, target))
        self._status = self._derive_status(self._status)

    def _derive_status(self, previous: PistonStatus) -> PistonStatus:
        if self.position >= self.max_limit and self.velocity >= 0:
            return PistonStatus.EXTENDED
        if self.position <= self.min_limit and self.velocity <= 0:
            return PistonStatus.RETRACTED
        if self.velocity > 0:
            return PistonStatus.EXTENDING
        if self.velocity < 0:
            return PistonStatus.RETRACTING
        # Stopped mid-stroke: keep reporting the last motion
        if previous is PistonStatus.EXTENDED:
            return PistonStatus.RETRACTING
        if previous is PistonStatus.RETRACTED:
            return PistonStatus.EXTENDING
        return previous

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "status": self.status.value,
            "position": round(self.position, 4),
            "velocity": self.velocity,
            "working": self.is_working,
        }

    def __repr__(self) -> str:
        return f"SimulatedPiston(name={self.name!r}, status={self.status.value}, velocity={self.velocity})"


class SimulatedGrid:
    """The host world: owns piston lifetime and hands out handles."""

    def __init__(self, pistons: Iterable[SimulatedPiston] = ()) -> None:
        self._pistons: list[SimulatedPiston] = list(pistons)

    def get_pistons(self) -> list[SimulatedPiston]:
        """All pistons currently in the world."""
        return list(self._pistons)

    def get(self, name: str) -> SimulatedPiston | None:
        return next((p for p in self._pistons if p.name == name), None)

    def add(self, piston: SimulatedPiston) -> SimulatedPiston:
        self._pistons.append(piston)
        return piston

    def remove(self, piston: SimulatedPiston) -> None:
        """Take a piston out of the world; held handles report closed."""
        if piston in self._pistons:
            self._pistons.remove(piston)
        piston.close()
        logger.debug("Piston %s removed from grid", piston.name)

    def step(self, dt: float) -> None:
        for piston in self._pistons:
            piston.step(dt)

    def __len__(self) -> int:
        return len(self._pistons)
