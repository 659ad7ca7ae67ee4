"""Text-mode game: set up a field and fleet, then shoot until every ship sinks."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import TextIO

from seabattle.enums import CellVisibilityState, ShipOrientation, ShipSegmentState
from seabattle.exceptions import GameError
from seabattle.ship_field import ShipField
from seabattle.ship_manager import ShipManager

_MAX_FIELD_SIDE = 100
_MAX_SHIPS_PER_LENGTH = 100
_MAX_SHIP_LENGTH = 4


def _row_label(y: int, height: int) -> str:
    return f"{y}" + (" " if height <= 10 or y >= 10 else "  ")


def _footer(width: int, height: int) -> str:
    lead = "   " if height > 10 else "  "
    labels = "".join(f"{i}" + (" " if width <= 10 or i >= 9 else "  ") for i in range(width))
    return lead + labels + "\n"


class Cli:
    """Prompts on one text stream and reads whitespace-separated answers from another."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._pending: deque[str] = deque()

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _next_token(self) -> str:
        while not self._pending:
            line = self._in.readline()
            if not line:
                raise EOFError("input ended")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def _discard_line(self) -> None:
        self._pending.clear()

    def _read_ints(self, count: int) -> list[int] | None:
        """Read ``count`` integers; None (and the rest of the line dropped) on bad input."""
        values = []
        for _ in range(count):
            try:
                values.append(int(self._next_token()))
            except ValueError:
                self._discard_line()
                return None
        return values

    def render_field(self, field: ShipField) -> str:
        """The field as the attacker sees it."""
        gap = "  " if field.width > 10 else " "
        lines = []
        for y in reversed(range(field.height)):
            cells = []
            for x in range(field.width):
                state = field.cell_state(x, y)
                if state is CellVisibilityState.UNKNOWN:
                    mark = "."
                elif state is CellVisibilityState.BLANK:
                    mark = "O"
                elif field.segment_state(x, y) is ShipSegmentState.DESTROYED:
                    mark = "X"
                else:
                    mark = "/"
                cells.append(mark + gap)
            lines.append(_row_label(y, field.height) + "".join(cells) + "\n")
        return "".join(lines) + _footer(field.width, field.height)

    def render_field_exposed(self, field: ShipField, show_hp: bool = False) -> str:
        """The field with every ship shown, optionally with segment health."""
        gap = "  " if field.width > 10 else " "
        lines = []
        for y in reversed(range(field.height)):
            cells = []
            for x in range(field.width):
                if field.is_ship(x, y):
                    mark = str(field.segment_state(x, y).value) if show_hp else "P"
                else:
                    mark = "."
                cells.append(mark + gap)
            lines.append(_row_label(y, field.height) + "".join(cells) + "\n")
        return "".join(lines) + _footer(field.width, field.height)

    def create_field(self) -> ShipField:
        """Ask for a field size until a valid one is given."""
        while True:
            self._write("Write field size (x,y): \n")
            values = self._read_ints(2)
            if values is None:
                self._write("Invalid input. Please enter integers for width and height.\n")
                continue
            width, height = values
            if width <= 0 or height <= 0:
                self._write("Width and height must be greater than 0\n")
                continue
            if width > _MAX_FIELD_SIDE or height > _MAX_FIELD_SIDE:
                self._write("Width and height must be less than 100\n")
                continue
            try:
                return ShipField(width, height)
            except ValueError as error:
                self._write(f"{error}\nTry again \n")

    def create_ships(self) -> ShipManager:
        """Ask how many ships of each length, longest first."""
        lengths: list[int] = []
        length = _MAX_SHIP_LENGTH
        while length > 0:
            self._write(f"Write how many ships of length {length} you want: ")
            values = self._read_ints(1)
            if values is None or values[0] < 0:
                self._discard_line()
                self._write("Invalid input. Please enter a non-negative integer.\n")
                continue
            count = values[0]
            if count > _MAX_SHIPS_PER_LENGTH:
                self._write("You can't have more than 100 ships of the same length\n")
                continue
            lengths.extend([length] * count)
            length -= 1
        return ShipManager(lengths)

    def _read_orientation(self, index: int) -> ShipOrientation | None:
        self._write(f"Write orientation for ship {index} (0 - HORIZONTAL, 1 - VERTICAL): ")
        values = self._read_ints(1)
        if values is None or values[0] not in (0, 1):
            self._discard_line()
            self._write("Invalid input. Please enter 0 for HORIZONTAL or 1 for VERTICAL.\n")
            return None
        return ShipOrientation.HORIZONTAL if values[0] == 0 else ShipOrientation.VERTICAL

    def place_ships(self, field: ShipField, manager: ShipManager) -> None:
        """Ask where to put each ship until every one is placed."""
        self._write("Place ships on the field\n")
        for index, ship in enumerate(manager):
            while True:
                self._write(
                    f"Write x and y for ship {index} of length {ship.length} "
                    "(bottom left corner): "
                )
                values = self._read_ints(2)
                if values is None or values[0] < 0 or values[1] < 0:
                    self._discard_line()
                    self._write(
                        "Invalid input. Please enter non-negative integers for coordinates.\n"
                    )
                    continue
                x, y = values
                if ship.length == 1:
                    orientation = ShipOrientation.HORIZONTAL
                else:
                    orientation = self._read_orientation(index)
                    if orientation is None:
                        continue
                try:
                    field.place_ship(ship, x, y, orientation)
                except ValueError as error:
                    self._write(f"{error}\nCan't place ship there. Try again\n")
                    continue
                break
            self._write(self.render_field_exposed(field))

    def attack_ship(self, field: ShipField) -> None:
        """Ask for one target cell and attack it."""
        self._write("Write x and y for attack: \n")
        values = self._read_ints(2)
        if values is None or values[0] < 0 or values[1] < 0:
            self._discard_line()
            self._write("Invalid input. Please enter non-negative integers for coordinates.\n")
            return
        try:
            field.attack(*values)
        except (GameError, ValueError) as error:
            self._write(f"{error}\nCan't attack there. Try again\n")

    def print_alive_ships(self, manager: ShipManager) -> None:
        """Report how many ships remain afloat."""
        self._write(f"Alive ships: {manager.alive_count()}\n")


def run_cli(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Play one whole game on the given streams."""
    cli = Cli(stdin, stdout)
    out = stdout if stdout is not None else sys.stdout
    field = cli.create_field()
    out.write(cli.render_field_exposed(field))
    manager = cli.create_ships()
    cli.place_ships(field, manager)
    out.write(cli.render_field_exposed(field, show_hp=True))
    while manager.alive_count() > 0:
        cli.attack_ship(field)
        out.write(cli.render_field(field))
        cli.print_alive_ships(manager)


def main(argv: list[str] | None = None) -> int:
    """Entry point of the text-mode game."""
    parser = argparse.ArgumentParser(description="Play sea battle in the terminal.")
    parser.parse_args(argv)
    try:
        run_cli(sys.stdin, sys.stdout)
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())