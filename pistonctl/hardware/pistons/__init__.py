"""
Piston Hardware Module

In-memory piston world used by the CLI, the HTTP server and the tests.
"""

from pistonctl.hardware.pistons.simulated import SimulatedGrid, SimulatedPiston
from pistonctl.hardware.pistons.world_loader import build_grid, load_world

__all__ = [
    "SimulatedGrid",
    "SimulatedPiston",
    "build_grid",
    "load_world",
]
