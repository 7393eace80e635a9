"""
Enums Module
============

Enumeration types for the piston controller.
"""

from pistonctl.enums.device import PistonStatus
from pistonctl.enums.scheduling import Command, ScheduleState, UpdateSource

__all__ = [
    "Command",
    "PistonStatus",
    "ScheduleState",
    "UpdateSource",
]
