"""
Shared test fixtures for the pistonctl test suite.

Provides:
- FakePiston: a minimal PistonHandle that records velocity writes
- FakeWorld: a list-backed world for discovery
- Program / runner factories over a SimulatedGrid

Usage:
    def test_example(make_piston, fake_world):
        fake_world.pistons.append(make_piston("[Piston Settings]"))
"""

from __future__ import annotations

import logging

import pytest

from pistonctl.enums import PistonStatus
from pistonctl.hardware.pistons import SimulatedGrid, SimulatedPiston
from pistonctl.workers.program import PistonProgram
from pistonctl.workers.tick_runner import TickRunner

# ---------------------------------------------------------------------------
# Logging: keep test output clean
# ---------------------------------------------------------------------------
logging.getLogger("pistonctl").setLevel(logging.WARNING)


class FakePiston:
    """PistonHandle stand-in with directly settable flags."""

    def __init__(
        self,
        custom_data: str = "",
        *,
        name: str = "Piston",
        status: PistonStatus = PistonStatus.RETRACTED,
        working: bool = True,
        velocity: float = 0.0,
    ) -> None:
        self.name = name
        self.custom_data = custom_data
        self.status = status
        self.is_working = working
        self.closed = False
        self.writes: list[float] = []
        self._velocity = velocity

    @property
    def velocity(self) -> float:
        return self._velocity

    @velocity.setter
    def velocity(self, value: float) -> None:
        self.writes.append(value)
        self._velocity = value


class FakeWorld:
    def __init__(self, pistons=None) -> None:
        self.pistons = list(pistons or [])

    def get_pistons(self):
        return list(self.pistons)


@pytest.fixture()
def make_piston():
    def _make(custom_data: str = "[Piston Settings]", **kwargs) -> FakePiston:
        return FakePiston(custom_data, **kwargs)

    return _make


@pytest.fixture()
def fake_world():
    return FakeWorld()


@pytest.fixture()
def grid():
    """Two tagged pistons and one untagged piston, all fully retracted."""
    return SimulatedGrid(
        [
            SimulatedPiston("Lift", "[Piston Settings]\nAutoExtend=true\nAutoRetract=true", max_limit=2.0),
            SimulatedPiston("Hold", "[Piston Settings]\nRetractSpeed=2.0", max_limit=2.0),
            SimulatedPiston("Plain", "just a note", max_limit=2.0),
        ]
    )


@pytest.fixture()
def program(grid):
    return PistonProgram(grid)


@pytest.fixture()
def runner(program, grid):
    return TickRunner(program, grid, base_tick_seconds=0.1)
