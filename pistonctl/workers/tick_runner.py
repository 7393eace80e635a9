"""
Host-side tick source for a PistonProgram.

Counts base ticks and fires the program with whichever update sources its
scheduler currently wants: ONCE straight away, UPDATE1 every tick, UPDATE10
every 10th and UPDATE100 every 100th. Every firing, periodic or user command,
goes through one lock, so the program never sees two overlapping calls.

Two ways to drive it:
- run_ticks(n): synchronous and deterministic (CLI, tests, /tick endpoint)
- start()/stop(): a daemon thread sleeping base_tick_seconds between ticks
"""

from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING, Any

from pistonctl.constants import Intervals
from pistonctl.enums.scheduling import UpdateSource

if TYPE_CHECKING:
    from pistonctl.hardware.pistons import SimulatedGrid
    from pistonctl.workers.program import PistonProgram

logger = logging.getLogger(__name__)


class TickRunner:
    def __init__(
        self,
        program: "PistonProgram",
        grid: "SimulatedGrid | None" = None,
        *,
        base_tick_seconds: float = 1.0 / 60.0,
        simulate: bool = True,
    ):
        self.program = program
        self.grid = grid
        self.base_tick_seconds = float(base_tick_seconds)
        self.simulate = simulate

        self.tick_count = 0
        self.firings = 0
        self._lock = threading.RLock()
        self._running = False
        self._thread: threading.Thread | None = None

    # ==================== Firing ====================

    def fire(self, source: UpdateSource, argument: str = "") -> str:
        with self._lock:
            self.firings += 1
            return self.program.main(argument, source)

    def submit_command(self, argument: str) -> str:
        """Fire a user-originated run carrying ``argument``."""
        return self.fire(UpdateSource.TERMINAL, argument)

    def due_sources(self) -> UpdateSource:
        """Sources due on the current base tick."""
        wanted = self.program.scheduler.update_frequency
        if wanted & UpdateSource.ONCE:
            return UpdateSource.ONCE
        due = UpdateSource.NONE
        if wanted & UpdateSource.UPDATE1:
            due |= UpdateSource.UPDATE1
        if wanted & UpdateSource.UPDATE10 and self.tick_count % Intervals.UPDATE10 == 0:
            due |= UpdateSource.UPDATE10
        if wanted & UpdateSource.UPDATE100 and self.tick_count % Intervals.UPDATE100 == 0:
            due |= UpdateSource.UPDATE100
        return due

    def step(self) -> UpdateSource:
        """Advance one base tick; return what fired (NONE if nothing)."""
        with self._lock:
            due = self.due_sources()
            if due:
                self.fire(due)
            if self.simulate and self.grid is not None:
                self.grid.step(self.base_tick_seconds)
            self.tick_count += 1
            return due

    def run_ticks(self, count: int) -> int:
        """Advance ``count`` base ticks; return the number of firings."""
        fired = 0
        for _ in range(count):
            if self.step():
                fired += 1
        return fired

    # ==================== Background Thread ====================

    def start(self) -> None:
        """Start the tick loop on a background thread."""
        if self._running:
            logger.warning("TickRunner already running")
            return

        self._running = True
        self._thread = threading.Thread(target=self._run_loop, daemon=True, name="PistonTickRunner")
        self._thread.start()
        logger.info("TickRunner started (base tick %.4fs)", self.base_tick_seconds)

    def stop(self, wait: bool = True, timeout: float = 5.0) -> None:
        if not self._running:
            return

        self._running = False
        if wait and self._thread:
            self._thread.join(timeout=timeout)
        self._thread = None
        logger.info("TickRunner stopped")

    def is_running(self) -> bool:
        return self._running

    def _run_loop(self) -> None:
        logger.debug("Tick loop started")
        while self._running:
            try:
                self.step()
            except Exception as e:
                logger.error(f"Error in tick loop: {e}", exc_info=True)
            time.sleep(self.base_tick_seconds)
        logger.debug("Tick loop ended")

    # ==================== Status ====================

    def get_status(self) -> dict[str, Any]:
        with self._lock:
            return {
                "running": self._running,
                "tick_count": self.tick_count,
                "firings": self.firings,
                "base_tick_seconds": self.base_tick_seconds,
                "update_frequency": [s.name for s in UpdateSource if s and s & self.program.scheduler.update_frequency],
            }
