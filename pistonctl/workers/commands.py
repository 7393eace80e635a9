"""
Terminal command parsing.

The argument line is split shell-style; its first token selects a command,
matched case-insensitively against a fixed table. Anything else yields a help
listing instead of an error.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass

from pistonctl.enums.scheduling import Command

COMMANDS: dict[str, Command] = {
    "reset": Command.RESET,
    "clear": Command.CLEAR,
}

_DESCRIPTIONS: dict[Command, str] = {
    Command.RESET: "Reload settings",
    Command.CLEAR: 'Clears the "Last Message"',
}


@dataclass(frozen=True)
class ParsedCommand:
    token: str | None
    command: Command | None

    @property
    def known(self) -> bool:
        return self.command is not None


def parse_command(argument: str | None) -> ParsedCommand:
    try:
        tokens = shlex.split(argument or "")
    except ValueError:
        return ParsedCommand(token=(argument or "").strip() or None, command=None)
    if not tokens:
        return ParsedCommand(token=None, command=None)
    token = tokens[0]
    return ParsedCommand(token=token, command=COMMANDS.get(token.lower()))


def help_text(token: str | None) -> str:
    lines = [f"  Unknown Command: {token}" if token else "  No command given", ""]
    lines.append("  Available Commands:")
    for name, command in COMMANDS.items():
        lines.append(f"    {name:<10}{_DESCRIPTIONS[command]}")
    return "\n".join(lines)
