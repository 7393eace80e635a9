"""
Workers Package
===============

Scheduling and host-side execution for the piston controller.
"""

from pistonctl.workers.program import PistonProgram
from pistonctl.workers.tick_runner import TickRunner
from pistonctl.workers.tick_scheduler import FireAction, TickScheduler

__all__ = ["FireAction", "PistonProgram", "TickRunner", "TickScheduler"]
