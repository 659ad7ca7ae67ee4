import random

import pytest

from seabattle.enums import CellVisibilityState, ShipOrientation, ShipSegmentState
from seabattle.exceptions import NoAbilityAvailableError, OutOfBoundsAttackError
from seabattle.player import Player


def target_with_ship(length):
    target = Player(random.Random(1))
    target.create_field(5, 5)
    target.create_ship_manager([length])
    target.place_ship_by_index(0, 0, 0, ShipOrientation.HORIZONTAL)
    return target


@pytest.fixture
def player():
    return Player(random.Random(0))


@pytest.fixture
def attacker():
    return Player(random.Random(2))


@pytest.fixture
def target():
    return target_with_ship(1)


def test_default_field_and_empty_fleet(player):
    assert (player.field.width, player.field.height) == (10, 10)
    assert (player.ship_count(), player.alive_count()) == (0, 0)
    assert player.scanner_is_active is False


def test_create_fleet_and_place(player):
    player.create_field(6, 7)
    player.create_ship_manager([3, 1])
    assert player.ship_count() == 2
    assert [player.ship_length(i) for i in range(2)] == [3, 1]
    player.place_ship_by_index(0, 1, 1, ShipOrientation.VERTICAL)
    assert [player.field.is_ship(1, y) for y in range(1, 5)] == [True, True, True, False]


def test_place_ship_rejects_collision(player):
    player.create_ship_manager([2, 2])
    player.place_ship_by_index(0, 0, 0, ShipOrientation.HORIZONTAL)
    with pytest.raises(ValueError):
        player.place_ship_by_index(1, 2, 0, ShipOrientation.HORIZONTAL)


def test_ship_length_out_of_range(player):
    with pytest.raises(IndexError):
        player.ship_length(0)


def test_sinking_a_ship_grants_an_ability(attacker, target):
    start = len(attacker.ability_manager)
    attacker.attack(target, 0, 0)
    assert len(attacker.ability_manager) == start
    assert target.field.segment_state(0, 0) is ShipSegmentState.DAMAGED
    attacker.attack(target, 0, 0)
    assert target.alive_count() == 0
    assert len(attacker.ability_manager) == start + 1


def test_double_damage_applies_once(attacker):
    target = target_with_ship(2)
    attacker.ability_results.double_damage_active = True
    attacker.attack(target, 0, 0)
    assert attacker.ability_results.double_damage_active is False
    attacker.attack(target, 1, 0)
    assert [target.field.segment_state(x, 0) for x in range(2)] == [
        ShipSegmentState.DESTROYED,
        ShipSegmentState.DAMAGED,
    ]


def test_miss_exposes_blank_cell(attacker, target):
    attacker.attack(target, 4, 4)
    assert target.field.cell_state(4, 4) is CellVisibilityState.BLANK
    assert target.alive_count() == 1


def test_attack_out_of_bounds(attacker, target):
    with pytest.raises(OutOfBoundsAttackError):
        attacker.attack(target, 5, 0)


def test_abilities_run_out():
    attacker = Player(random.Random(9))
    target = target_with_ship(3)
    for _ in range(3):
        attacker.use_ability(target, 0, 0)
    with pytest.raises(NoAbilityAvailableError):
        attacker.pending_ability_type()
    with pytest.raises(NoAbilityAvailableError):
        attacker.use_ability(target, 0, 0)
    results = attacker.ability_results
    assert (results.bombard_damage_dealt, results.double_damage_active) == (True, True)