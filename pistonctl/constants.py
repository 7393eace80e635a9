"""
Application Constants
=====================

Centralized constants for the piston controller.

Usage:
    from pistonctl.constants import SECTION_KEY, PistonDefaults
"""

# =============================================================================
# Settings block
# =============================================================================

SECTION_KEY = "Piston Settings"


class SettingsKeys:
    """Keys recognized inside the [Piston Settings] block."""

    RETRACT_SPEED = "RetractSpeed"
    EXTEND_SPEED = "ExtendSpeed"
    AUTO_RETRACT = "AutoRetract"
    AUTO_EXTEND = "AutoExtend"


class PistonDefaults:
    """Values applied when a key is absent from the settings block."""

    RETRACT_SPEED = 0.5  # m/s
    EXTEND_SPEED = 0.5  # m/s
    AUTO_RETRACT = False
    AUTO_EXTEND = False


# =============================================================================
# Scheduling
# =============================================================================


class Intervals:
    """Firing divisors relative to the base tick."""

    UPDATE10 = 10
    UPDATE100 = 100


# =============================================================================
# Status output
# =============================================================================

STATUS_TITLE = "-- Configurable Pistons --"

ACTIVITY_FRAMES = (
    "    ",
    ".   ",
    " .  ",
    "  . ",
    "   .",
)


class Messages:
    """Status strings written to the Last Message slot."""

    CACHE_UPDATED = "Piston cache updated..."
    PISTON_REMOVED = "A Piston was removed from grid\nDeleted Reference."
