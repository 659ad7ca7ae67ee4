"""Game-specific exceptions."""


class GameError(Exception):
    """Base class for errors raised by game rules."""

    default_message = "Game error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class NoAbilityAvailableError(GameError):
    """Raised when an ability is requested but none is queued."""

    default_message = "No abilities available"


class ShipPlacementConflictError(GameError):
    """Raised when a ship cannot be placed where requested."""

    default_message = "Ship placement conflict detected"


class OutOfBoundsAttackError(GameError):
    """Raised when an attack targets a cell outside the field."""

    default_message = "Attack out of bounds"