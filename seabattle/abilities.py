"""Special abilities a player earns and spends during the attack phase."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

from seabattle.enums import AbilityType, ShipSegmentState
from seabattle.exceptions import NoAbilityAvailableError
from seabattle.ship_field import ShipField
from seabattle.ship_manager import ShipManager


@dataclass
class AbilityResults:
    """Outcome flags left behind by the abilities a player has used."""

    double_damage_active: bool = False
    scanner_ship_found: bool = False
    bombard_damage_dealt: bool = False


class Ability(ABC):
    """An ability applied to an opponent's field and fleet."""

    ability_type: AbilityType

    @abstractmethod
    def use(
        self,
        field: ShipField,
        manager: ShipManager,
        x: int,
        y: int,
        results: AbilityResults,
    ) -> None:
        """Apply the ability and record its outcome in ``results``."""


class DoubleDamageAbility(Ability):
    """Makes the next attack deal twice the damage."""

    ability_type = AbilityType.DOUBLE_DAMAGE

    def use(self, field, manager, x, y, results) -> None:
        results.double_damage_active = True


class ScannerAbility(Ability):
    """Reports whether any ship lies in the 2x2 square whose corner is (x, y)."""

    ability_type = AbilityType.SCANNER
    scanner_range = 1

    def use(self, field, manager, x, y, results) -> None:
        reach = self.scanner_range
        results.scanner_ship_found = any(
            field.is_ship(cx, cy) for cx in (x, x + reach) for cy in (y, y + reach)
        )


class BombardAbility(Ability):
    """Hits one random, not yet destroyed ship segment for one point of damage."""

    ability_type = AbilityType.BOMBARD

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def use(self, field, manager, x, y, results) -> None:
        if manager.alive_count() == 0:
            results.bombard_damage_dealt = False
            return
        targets = [
            (cx, cy)
            for cx in range(field.width)
            for cy in range(field.height)
            if field.is_ship(cx, cy)
            and field.segment_state(cx, cy) is not ShipSegmentState.DESTROYED
        ]
        if not targets:
            results.bombard_damage_dealt = False
            return
        tx, ty = self._rng.choice(targets)
        field.attack(tx, ty, False, 1)
        results.bombard_damage_dealt = True


class AbilityManager:
    """A queue of abilities; starts with one of each kind in random order."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._factories: tuple[Callable[[], Ability], ...] = (
            DoubleDamageAbility,
            ScannerAbility,
            lambda: BombardAbility(self._rng),
        )
        initial = [factory() for factory in self._factories]
        self._rng.shuffle(initial)
        self._queue: deque[Ability] = deque(initial)

    def use(
        self,
        field: ShipField,
        manager: ShipManager,
        x: int,
        y: int,
        results: AbilityResults,
    ) -> None:
        """Apply the ability at the front of the queue, then drop it."""
        if not self._queue:
            raise NoAbilityAvailableError()
        self._queue[0].use(field, manager, x, y, results)
        self._queue.popleft()

    def add_random(self) -> None:
        """Append a randomly chosen ability to the queue."""
        self._queue.append(self._rng.choice(self._factories)())

    def pending_type(self) -> AbilityType:
        """Type of the ability that will be used next."""
        if not self._queue:
            raise NoAbilityAvailableError()
        return self._queue[0].ability_type

    def __len__(self) -> int:
        return len(self._queue)