"""
PistonDiscovery: builds the registry of pistons under control.

Scans the host world for pistons whose custom data carries a
``[Piston Settings]`` block and resolves each one's speeds and auto flags.
Pistons without the block are ignored; pistons whose block cannot be parsed
are skipped with a warning. An empty result is a valid steady state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from pistonctl.constants import SECTION_KEY, Messages, PistonDefaults, SettingsKeys
from pistonctl.domain.pistons import PistonControlEntry, PistonHandle, PistonRegistry
from pistonctl.utils.ini import IniReader, has_section

if TYPE_CHECKING:
    from pistonctl.config import AppConfig
    from pistonctl.control_loops.status import StatusReporter

logger = logging.getLogger(__name__)


class PistonWorld(Protocol):
    """Anything that can enumerate the pistons it owns."""

    def get_pistons(self) -> list[PistonHandle]: ...


@dataclass(frozen=True)
class SettingsDefaults:
    """Fallbacks for keys missing from a settings block."""

    retract_speed: float = PistonDefaults.RETRACT_SPEED
    extend_speed: float = PistonDefaults.EXTEND_SPEED
    auto_retract: bool = PistonDefaults.AUTO_RETRACT
    auto_extend: bool = PistonDefaults.AUTO_EXTEND

    @classmethod
    def from_config(cls, config: "AppConfig") -> "SettingsDefaults":
        return cls(
            retract_speed=config.default_retract_speed,
            extend_speed=config.default_extend_speed,
            auto_retract=config.default_auto_retract,
            auto_extend=config.default_auto_extend,
        )


class PistonDiscovery:
    def __init__(
        self,
        world: PistonWorld,
        registry: PistonRegistry,
        reporter: "StatusReporter",
        defaults: SettingsDefaults | None = None,
        section: str = SECTION_KEY,
    ):
        self.world = world
        self.registry = registry
        self.reporter = reporter
        self.defaults = defaults or SettingsDefaults()
        self.section = section
        self._reader = IniReader()

    def discover(self) -> PistonRegistry:
        """Rescan the world and replace the registry contents."""
        candidates = [p for p in self.world.get_pistons() if has_section(p.custom_data, self.section)]

        entries: list[PistonControlEntry] = []
        skipped = 0
        for piston in candidates:
            entry = self.resolve(piston)
            if entry is None:
                skipped += 1
                continue
            entries.append(entry)

        self.registry.replace(entries)
        self.reporter.set_message(Messages.CACHE_UPDATED)
        logger.info(
            "Piston discovery complete (tagged=%d controlled=%d skipped=%d)",
            len(candidates),
            len(entries),
            skipped,
        )
        return self.registry

    def resolve(self, piston: PistonHandle) -> PistonControlEntry | None:
        """Build the control entry for one tagged piston, or None if its block is malformed."""
        if not self._reader.try_parse(piston.custom_data) or not self._reader.has_section(self.section):
            logger.warning("Skipping piston %r: malformed [%s] block", piston.name, self.section)
            return None

        return PistonControlEntry(
            piston=piston,
            retract_speed=self._speed(piston, SettingsKeys.RETRACT_SPEED, self.defaults.retract_speed),
            extend_speed=self._speed(piston, SettingsKeys.EXTEND_SPEED, self.defaults.extend_speed),
            auto_retract=self._reader.get_bool(self.section, SettingsKeys.AUTO_RETRACT, self.defaults.auto_retract),
            auto_extend=self._reader.get_bool(self.section, SettingsKeys.AUTO_EXTEND, self.defaults.auto_extend),
        )

    def _speed(self, piston: PistonHandle, key: str, default: float) -> float:
        value = self._reader.get_float(self.section, key, default)
        if value <= 0:
            logger.warning("Piston %r: %s=%s must be positive, using %s", piston.name, key, value, default)
            return default
        return value
