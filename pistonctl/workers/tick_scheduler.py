"""
Tick cadence policy.

    SCAN_REQUESTED ──discover──► PERIODIC   (pistons found)
          │                          │
          └──────discover──────► IDLE ◄──drive── (registry emptied)

SCAN_REQUESTED fires once, right after start-up. PERIODIC fires every 10th
base tick to run the driver. IDLE requests no firings at all; only a user
``reset`` brings the loop back, through the same post-discovery rule.
"""

from __future__ import annotations

import logging
from enum import Enum

from pistonctl.enums.scheduling import ScheduleState, UpdateSource

logger = logging.getLogger(__name__)


class FireAction(str, Enum):
    """What a self-update firing should do in the current state."""

    DISCOVER = "discover"
    DRIVE = "drive"
    NOTHING = "nothing"


_FREQUENCY: dict[ScheduleState, UpdateSource] = {
    ScheduleState.SCAN_REQUESTED: UpdateSource.ONCE,
    ScheduleState.PERIODIC: UpdateSource.UPDATE10,
    ScheduleState.IDLE: UpdateSource.NONE,
}


class TickScheduler:
    def __init__(self) -> None:
        self.state = ScheduleState.SCAN_REQUESTED

    @property
    def update_frequency(self) -> UpdateSource:
        """Sources the host should fire in the current state."""
        return _FREQUENCY[self.state]

    def action_for(self, source: UpdateSource) -> FireAction:
        if not source & UpdateSource.self_updates():
            return FireAction.NOTHING
        if self.state is ScheduleState.SCAN_REQUESTED:
            return FireAction.DISCOVER
        if self.state is ScheduleState.PERIODIC:
            return FireAction.DRIVE
        return FireAction.NOTHING

    def request_scan(self) -> None:
        """Return to the one-shot scan state, as at start-up."""
        self._transition(ScheduleState.SCAN_REQUESTED)

    def after_discovery(self, registry_size: int) -> None:
        self._transition(ScheduleState.PERIODIC if registry_size else ScheduleState.IDLE)

    def after_drive(self, registry_size: int) -> None:
        if not registry_size:
            self._transition(ScheduleState.IDLE)

    def _transition(self, state: ScheduleState) -> None:
        if state is self.state:
            return
        logger.info("Scheduler %s -> %s", self.state.value, state.value)
        self.state = state
