"""The playing field on which ships are placed and attacked."""

from __future__ import annotations

from dataclasses import dataclass

from seabattle.enums import CellVisibilityState, ShipOrientation, ShipSegmentState
from seabattle.exceptions import OutOfBoundsAttackError
from seabattle.ship import Ship


@dataclass
class _Cell:
    state: CellVisibilityState = CellVisibilityState.UNKNOWN
    ship: Ship | None = None
    segment_index: int = 0


class ShipField:
    """A width x height grid; (0, 0) is the bottom-left corner."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Width and height must be greater than 0")
        self.width = width
        self.height = height
        self._cells = [[_Cell() for _ in range(width)] for _ in range(height)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_coordinates(self, x: int, y: int) -> None:
        if x < 0 or y < 0:
            raise ValueError("Coordinates must be non-negative")
        if not self._in_bounds(x, y):
            raise ValueError("Coordinates are out of field bounds")

    def _area(self, ship_length: int, x: int, y: int, orientation: ShipOrientation):
        """In-bounds cells covered by a ship and its one-cell margin."""
        if orientation is ShipOrientation.HORIZONTAL:
            xs = range(x - 1, x + ship_length + 1)
            ys = range(y - 1, y + 2)
        else:
            xs = range(x - 1, x + 2)
            ys = range(y - 1, y + ship_length + 1)
        return ((cx, cy) for cx in xs for cy in ys if self._in_bounds(cx, cy))

    def check_ship_collision(
        self, ship_length: int, x: int, y: int, orientation: ShipOrientation
    ) -> bool:
        """True if a ship there would leave the field or touch another ship."""
        if orientation is ShipOrientation.HORIZONTAL:
            if x + ship_length > self.width:
                return True
        elif y + ship_length > self.height:
            return True
        return any(self.is_ship(cx, cy) for cx, cy in self._area(ship_length, x, y, orientation))

    def _expose_surroundings(self, ship_length: int, x: int, y: int) -> None:
        if self.is_ship(x, y - 1) or self.is_ship(x, y + 1):
            orientation = ShipOrientation.VERTICAL
            while self.is_ship(x, y - 1):
                y -= 1
        else:
            orientation = ShipOrientation.HORIZONTAL
            while self.is_ship(x - 1, y):
                x -= 1
        for cx, cy in self._area(ship_length, x, y, orientation):
            self._cells[cy][cx].state = (
                CellVisibilityState.SHIP if self.is_ship(cx, cy) else CellVisibilityState.BLANK
            )

    def cell_state(self, x: int, y: int) -> CellVisibilityState:
        """What is known about the cell at (x, y)."""
        self._check_coordinates(x, y)
        return self._cells[y][x].state

    def is_ship(self, x: int, y: int) -> bool:
        """True if a ship occupies (x, y); False for cells outside the field."""
        return self._in_bounds(x, y) and self._cells[y][x].ship is not None

    def segment_state(self, x: int, y: int) -> ShipSegmentState:
        """State of the ship segment lying at (x, y)."""
        self._check_coordinates(x, y)
        cell = self._cells[y][x]
        if cell.ship is None:
            raise LookupError("No ship at the given coordinates")
        return cell.ship.segment_state(cell.segment_index)

    def place_ship(self, ship: Ship, x: int, y: int, orientation: ShipOrientation) -> None:
        """Place ``ship`` with its head at (x, y), extending right or up."""
        if x < 0 or y < 0:
            raise ValueError("Coordinates cant be negative")
        if not self._in_bounds(x, y):
            raise ValueError("Coordinates are out of field bounds")
        if self.check_ship_collision(ship.length, x, y, orientation):
            raise ValueError("Ship collides with another ship or borders")
        for offset in range(ship.length):
            if orientation is ShipOrientation.HORIZONTAL:
                cell = self._cells[y][x + offset]
            else:
                cell = self._cells[y + offset][x]
            cell.ship = ship
            cell.segment_index = offset

    def attack(self, x: int, y: int, expose_cell: bool = True, damage: int = 1) -> bool:
        """Attack (x, y); return True if this attack sank a ship."""
        if not self._in_bounds(x, y):
            raise OutOfBoundsAttackError("Coordinates are out of field bounds")
        cell = self._cells[y][x]
        ship = cell.ship
        if ship is None:
            if expose_cell:
                cell.state = CellVisibilityState.BLANK
            return False
        if expose_cell:
            cell.state = CellVisibilityState.SHIP
        if ship.segment_hp(cell.segment_index) <= 0:
            return False
        ship.take_damage(cell.segment_index, damage)
        if not ship.is_alive():
            self._expose_surroundings(ship.length, x, y)
            return True
        return False

    def clear(self) -> None:
        """Remove all ships and forget every exposed cell."""
        self._cells = [[_Cell() for _ in range(self.width)] for _ in range(self.height)]