"""
INI-style settings blocks embedded in free-form text.

A piston's custom data is arbitrary text that may carry one or more
``[Section]`` blocks of ``key=value`` lines. :func:`has_section` is a cheap
membership test used to filter candidates; :class:`IniReader` parses the text
and exposes typed lookups that fall back to a default when a key is absent or
its value cannot be coerced.

Usage:
    if has_section(text, "Piston Settings"):
        reader = IniReader()
        if reader.try_parse(text):
            speed = reader.get_float("Piston Settings", "RetractSpeed", 0.5)
"""

from __future__ import annotations

import configparser
import logging
import math
import re

logger = logging.getLogger(__name__)

# A line consisting of "---" ends the settings content; anything after it is
# free text owned by the user.
_END_MARKER = re.compile(r"^---\s*$", re.MULTILINE)

# Header text cannot contain a newline, so no block can name this section and
# nothing leaks into every section the way configparser's [DEFAULT] does.
_NO_DEFAULT_SECTION = "\n"


def has_section(text: str | None, section: str) -> bool:
    """Return True if ``text`` contains a ``[section]`` header line."""
    if not text:
        return False
    pattern = re.compile(r"^\s*\[" + re.escape(section) + r"\]\s*$", re.MULTILINE)
    return pattern.search(text) is not None


class IniReader:
    """Parsed view over one block of settings text."""

    def __init__(self) -> None:
        self._parser = self._new_parser()

    @staticmethod
    def _new_parser() -> configparser.ConfigParser:
        parser = configparser.ConfigParser(
            interpolation=None,
            strict=True,
            default_section=_NO_DEFAULT_SECTION,
            delimiters=("=",),
            comment_prefixes=(";", "#"),
            inline_comment_prefixes=None,
            empty_lines_in_values=False,
        )
        return parser

    def try_parse(self, text: str | None) -> bool:
        """
        Parse ``text``; return False if it is malformed.

        Malformed means: key lines before the first header, duplicate sections,
        duplicate keys within a section, or lines that are neither headers,
        comments nor ``key=value`` pairs.
        """
        self._parser = self._new_parser()
        content = text or ""
        marker = _END_MARKER.search(content)
        if marker:
            content = content[: marker.start()]
        # Indentation carries no meaning; configparser would read an indented
        # line as a continuation of the previous value.
        content = "\n".join(line.lstrip() for line in content.splitlines())
        try:
            self._parser.read_string(content)
        except configparser.Error as exc:
            logger.debug("Settings text rejected: %s", exc)
            self._parser = self._new_parser()
            return False
        return True

    def has_section(self, section: str) -> bool:
        return self._parser.has_section(section)

    def get_raw(self, section: str, key: str) -> str | None:
        if not self._parser.has_option(section, key):
            return None
        return self._parser.get(section, key)

    def get_float(self, section: str, key: str, default: float) -> float:
        """Finite float value of ``key``, or ``default`` if absent or not a number."""
        raw = self.get_raw(section, key)
        if raw is None:
            return default
        try:
            value = float(raw.strip())
        except ValueError:
            logger.debug("[%s] %s=%r is not a number, using %s", section, key, raw, default)
            return default
        if not math.isfinite(value):
            return default
        return value

    def get_bool(self, section: str, key: str, default: bool) -> bool:
        """Boolean value of ``key``, or ``default`` if absent or not a boolean."""
        raw = self.get_raw(section, key)
        if raw is None:
            return default
        state = self._parser.BOOLEAN_STATES.get(raw.strip().lower())
        if state is None:
            logger.debug("[%s] %s=%r is not a boolean, using %s", section, key, raw, default)
            return default
        return state
