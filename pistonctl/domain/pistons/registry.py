"""Ordered collection of pistons currently under control."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pistonctl.domain.pistons.piston_entity import PistonControlEntry


class PistonRegistry:
    """
    Pistons under control, in discovery scan order.

    Rebuilt wholesale by discovery; the driver removes single entries whose
    piston has left the world.
    """

    def __init__(self, entries: Iterable[PistonControlEntry] = ()) -> None:
        self._entries: list[PistonControlEntry] = list(entries)

    def replace(self, entries: Iterable[PistonControlEntry]) -> None:
        """Clear and refill in one call."""
        self._entries = list(entries)

    def remove_at(self, index: int) -> PistonControlEntry:
        return self._entries.pop(index)

    def __getitem__(self, index: int) -> PistonControlEntry:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PistonControlEntry]:
        return iter(list(self._entries))

    def __bool__(self) -> bool:
        return bool(self._entries)
