"""
Control Loops Package
=====================

The control layer of the piston controller:

    PistonDiscovery ──► PistonRegistry ──► PistonDriver
          │                                    │
          └──────────► StatusReporter ◄────────┘

- PistonDiscovery scans the world for tagged pistons and resolves settings.
- PistonDriver commands velocities once per periodic tick.
- StatusReporter holds the last message and renders the status block.
"""

from pistonctl.control_loops.discovery import PistonDiscovery, SettingsDefaults
from pistonctl.control_loops.piston_driver import DriveResult, PistonDriver, commanded_velocity
from pistonctl.control_loops.status import ActivityIndicator, LastMessage, StatusReporter

__all__ = [
    "ActivityIndicator",
    "DriveResult",
    "LastMessage",
    "PistonDiscovery",
    "PistonDriver",
    "SettingsDefaults",
    "StatusReporter",
    "commanded_velocity",
]
