"""
PistonProgram: the controller entry point.

The host calls :meth:`PistonProgram.main` once per firing with the argument
string and the update source. Exactly one of discovery, the driver pass or a
command runs per call, then the status block is rendered and returned.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from pistonctl.control_loops.discovery import PistonDiscovery, PistonWorld, SettingsDefaults
from pistonctl.control_loops.piston_driver import PistonDriver
from pistonctl.control_loops.status import StatusReporter
from pistonctl.domain.pistons import PistonRegistry
from pistonctl.enums.scheduling import Command, UpdateSource
from pistonctl.workers.commands import ParsedCommand, help_text, parse_command
from pistonctl.workers.tick_scheduler import FireAction, TickScheduler

logger = logging.getLogger(__name__)


class PistonProgram:
    def __init__(
        self,
        world: PistonWorld,
        *,
        defaults: SettingsDefaults | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.world = world
        self.registry = PistonRegistry()
        self.reporter = StatusReporter()
        self.scheduler = TickScheduler()
        self.discovery = PistonDiscovery(world, self.registry, self.reporter, defaults)
        self.driver = PistonDriver(self.registry, self.reporter)
        self._clock = clock

        self._handlers: dict[Command, Callable[[], None]] = {
            Command.RESET: self.reset,
            Command.CLEAR: self.reporter.clear_message,
        }

        self.runs = 0
        self.last_run_ms = 0.0
        self.interval_ms = 0.0
        self.output = ""
        self._last_start: float | None = None

    @property
    def last_message(self) -> str:
        return self.reporter.last_message.text

    def main(self, argument: str = "", update_source: UpdateSource = UpdateSource.ONCE) -> str:
        """Run one firing and return the rendered status block."""
        start = self._clock()
        if self._last_start is not None:
            self.interval_ms = (start - self._last_start) * 1000.0
        self._last_start = start

        if update_source & UpdateSource.TERMINAL:
            self.run_command(argument)
        elif update_source & UpdateSource.self_updates():
            self._self_update(update_source)

        self.last_run_ms = (self._clock() - start) * 1000.0
        self.runs += 1
        self.output = self.reporter.render(len(self.registry), self.last_run_ms, self.interval_ms)
        return self.output

    def _self_update(self, source: UpdateSource) -> None:
        action = self.scheduler.action_for(source)
        if action is FireAction.DISCOVER:
            self.rescan()
        elif action is FireAction.DRIVE:
            self.driver.tick()
            self.scheduler.after_drive(len(self.registry))

    def rescan(self) -> None:
        """Rebuild the registry and pick the cadence that matches the result."""
        self.discovery.discover()
        self.scheduler.after_discovery(len(self.registry))

    def reset(self) -> None:
        """Drop back to the start-up state and scan again straight away."""
        self.scheduler.request_scan()
        self.rescan()

    def run_command(self, argument: str) -> ParsedCommand:
        parsed = parse_command(argument)
        if not parsed.known:
            logger.info("Unknown command %r", argument)
            self.reporter.set_message(help_text(parsed.token))
            return parsed

        logger.info("Executing: %s", parsed.command.value)
        self._handlers[parsed.command]()
        return parsed
