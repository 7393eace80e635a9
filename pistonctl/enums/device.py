"""
Device-related Enumerations
============================

Motion phases reported by a piston.
"""

from enum import Enum


class PistonStatus(str, Enum):
    """Current motion phase of a piston."""

    EXTENDED = "extended"
    EXTENDING = "extending"
    RETRACTED = "retracted"
    RETRACTING = "retracting"

    @classmethod
    def _missing_(cls, value: object) -> "PistonStatus | None":
        """Accept capitalized host names such as ``"Extended"``."""
        if not isinstance(value, str):
            return None
        lowered = value.strip().lower()
        for member in cls:
            if member.value == lowered:
                return member
        return None
