"""
PistonDriver: the per-tick velocity control pass.

For every registry entry, in order:
- a piston that has left the world is evicted and the pass ends for this tick
  (later entries are handled on the next tick);
- a piston that is off or damaged is left alone;
- otherwise the velocity is commanded from the motion phase and the entry's
  speeds and auto flags, and written every tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pistonctl.constants import Messages
from pistonctl.domain.pistons import PistonControlEntry, PistonRegistry
from pistonctl.enums.device import PistonStatus

if TYPE_CHECKING:
    from pistonctl.control_loops.status import StatusReporter

logger = logging.getLogger(__name__)


def commanded_velocity(entry: PistonControlEntry, status: PistonStatus) -> float:
    """
    Velocity for a piston in the given motion phase.

    At rest the matching auto flag starts the opposite stroke, otherwise the
    piston is held at its end stop. While moving, the stroke continues.
    """
    if status is PistonStatus.EXTENDED:
        return -entry.retract_speed if entry.auto_retract else entry.extend_speed
    if status is PistonStatus.EXTENDING:
        return entry.extend_speed
    if status is PistonStatus.RETRACTED:
        return entry.extend_speed if entry.auto_extend else -entry.retract_speed
    return -entry.retract_speed


@dataclass
class DriveResult:
    """Outcome of one driver pass."""

    commanded: int = 0
    skipped: int = 0
    evicted: int = 0


class PistonDriver:
    def __init__(self, registry: PistonRegistry, reporter: "StatusReporter"):
        self.registry = registry
        self.reporter = reporter

    def tick(self) -> DriveResult:
        result = DriveResult()
        index = 0
        while index < len(self.registry):
            entry = self.registry[index]
            piston = entry.piston

            if piston.closed:
                self.registry.remove_at(index)
                self.reporter.set_message(Messages.PISTON_REMOVED)
                result.evicted += 1
                logger.info("Piston %r left the grid, reference deleted", piston.name)
                break

            if not piston.is_working:
                result.skipped += 1
                index += 1
                continue

            piston.velocity = commanded_velocity(entry, piston.status)
            result.commanded += 1
            index += 1

        return result
