"""A fleet of ships."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from seabattle.ship import Ship


class ShipManager:
    """Owns a player's ships, built from a sequence of lengths."""

    def __init__(self, lengths: Iterable[int] = ()) -> None:
        self._ships = [Ship(length) for length in lengths]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._ships):
            raise IndexError("Index out of range")

    def alive_count(self) -> int:
        """Number of ships that are not yet sunk."""
        return sum(1 for ship in self._ships if ship.is_alive())

    def ship_length(self, index: int) -> int:
        """Length of the ship at ``index``."""
        self._check_index(index)
        return self._ships[index].length

    def __getitem__(self, index: int) -> Ship:
        self._check_index(index)
        return self._ships[index]

    def __len__(self) -> int:
        return len(self._ships)

    def __iter__(self) -> Iterator[Ship]:
        return iter(self._ships)