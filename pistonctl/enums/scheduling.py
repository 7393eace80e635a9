"""
Scheduling Enumerations
=======================

Trigger sources, scheduler states and user commands.
"""

from enum import Enum, Flag, auto


class UpdateSource(Flag):
    """What caused the program to run. Combinable to express a frequency mask."""

    NONE = 0
    TERMINAL = auto()
    ONCE = auto()
    UPDATE1 = auto()
    UPDATE10 = auto()
    UPDATE100 = auto()

    @classmethod
    def self_updates(cls) -> "UpdateSource":
        return cls.ONCE | cls.UPDATE1 | cls.UPDATE10 | cls.UPDATE100


class ScheduleState(str, Enum):
    """Tick cadence policy states."""

    IDLE = "idle"
    SCAN_REQUESTED = "scan_requested"
    PERIODIC = "periodic"


class Command(str, Enum):
    """Commands accepted on the argument line."""

    RESET = "reset"
    CLEAR = "clear"
