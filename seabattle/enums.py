"""Enumerations shared across the game."""

from enum import Enum


class ShipSegmentState(Enum):
    """Condition of a single ship segment."""

    INTACT = 2
    DAMAGED = 1
    DESTROYED = 0


class ShipOrientation(Enum):
    """Direction in which a ship extends from its head cell."""

    HORIZONTAL = 0
    VERTICAL = 1


class CellVisibilityState(Enum):
    """What the attacker knows about a field cell."""

    UNKNOWN = 0
    BLANK = 1
    SHIP = 2


class AbilityType(Enum):
    """Kinds of special abilities a player can hold."""

    DOUBLE_DAMAGE = 0
    SCANNER = 1
    BOMBARD = 2


class GameState(Enum):
    """Screens of the graphical game."""

    MENU = 0
    CREATE_FIELD = 1
    CREATE_SHIPS = 2
    PLACING_SHIPS = 3
    ATTACKING_SHIPS = 4
    EXIT = 5