"""A player: a field, a fleet and a queue of abilities."""

from __future__ import annotations

import random
from collections.abc import Iterable

from seabattle.abilities import AbilityManager, AbilityResults
from seabattle.enums import AbilityType, ShipOrientation
from seabattle.ship import Ship
from seabattle.ship_field import ShipField
from seabattle.ship_manager import ShipManager


class Player:
    """Holds one side's field, ships and abilities."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.ship_manager = ShipManager()
        self.field = ShipField(10, 10)
        self.ability_manager = AbilityManager(rng)
        self.ability_results = AbilityResults()
        self.scanner_is_active = False

    def create_field(self, width: int, height: int) -> None:
        """Replace the field with an empty one of the given size."""
        self.field = ShipField(width, height)

    def create_ship_manager(self, lengths: Iterable[int]) -> None:
        """Replace the fleet with new ships of the given lengths."""
        self.ship_manager = ShipManager(lengths)

    def place_ship(self, ship: Ship, x: int, y: int, orientation: ShipOrientation) -> None:
        """Place ``ship`` on this player's field."""
        self.field.place_ship(ship, x, y, orientation)

    def place_ship_by_index(
        self, index: int, x: int, y: int, orientation: ShipOrientation
    ) -> None:
        """Place the fleet's ship at ``index`` on this player's field."""
        self.place_ship(self.ship_manager[index], x, y, orientation)

    def attack(
        self,
        target: Player,
        x: int,
        y: int,
        damage: int = 1,
        expose_cell: bool = True,
    ) -> None:
        """Attack ``target``; sinking a ship earns a random ability."""
        if self.ability_results.double_damage_active:
            damage *= 2
            self.ability_results.double_damage_active = False
        if target.field.attack(x, y, expose_cell, damage):
            self.ability_manager.add_random()

    def use_ability(self, target: Player, x: int, y: int) -> None:
        """Use the next queued ability against ``target``."""
        self.ability_manager.use(
            target.field, target.ship_manager, x, y, self.ability_results
        )

    def ship_count(self) -> int:
        """Number of ships in the fleet."""
        return len(self.ship_manager)

    def ship_length(self, index: int) -> int:
        """Length of the fleet's ship at ``index``."""
        return self.ship_manager.ship_length(index)

    def alive_count(self) -> int:
        """Number of ships not yet sunk."""
        return self.ship_manager.alive_count()

    def pending_ability_type(self) -> AbilityType:
        """Type of the ability that will be used next."""
        return self.ability_manager.pending_type()