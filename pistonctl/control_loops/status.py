"""
Status output for the piston controller.

The controller writes human-readable event strings into a LastMessage slot and
renders one text block per run: title, piston count, timing, the last message
and a rotating activity glyph so an operator can see the loop is alive.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pistonctl.constants import ACTIVITY_FRAMES, STATUS_TITLE


@dataclass
class LastMessage:
    """Most recent event description. Each set overwrites the previous one."""

    text: str = ""

    def set(self, message: str) -> None:
        self.text = message

    def clear(self) -> None:
        self.text = ""

    def __bool__(self) -> bool:
        return bool(self.text)


@dataclass
class ActivityIndicator:
    """Cycles through ACTIVITY_FRAMES, one step per render."""

    frames: tuple[str, ...] = ACTIVITY_FRAMES
    index: int = 0

    def advance(self) -> str:
        frame = self.frames[self.index]
        self.index = (self.index + 1) % len(self.frames)
        return frame


@dataclass
class StatusReporter:
    last_message: LastMessage = field(default_factory=LastMessage)
    activity: ActivityIndicator = field(default_factory=ActivityIndicator)

    def set_message(self, message: str) -> None:
        self.last_message.set(message)

    def clear_message(self) -> None:
        self.last_message.clear()

    def render(self, pistons_monitored: int, last_run_ms: float, interval_ms: float) -> str:
        lines = [
            STATUS_TITLE,
            "",
            f"  Pistons Monitored: {pistons_monitored:d}",
            "",
            "  - Stats -",
            f"  Runtime {last_run_ms:.3f} ms every {interval_ms:.0f} ms",
        ]
        if self.last_message:
            lines += ["", "  - Message -", self.last_message.text, ""]
        lines.append("")
        lines.append(self.activity.advance())
        return "\n".join(lines)
