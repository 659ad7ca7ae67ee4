import random

import pygame
import pytest

from seabattle import attacking_state
from seabattle.attacking_state import AttackingShipsState
from seabattle.enums import AbilityType, CellVisibilityState, GameState, ShipOrientation, ShipSegmentState
from seabattle.player import Player


class _NoShuffle(random.Random):
    """Keeps the initial ability queue in factory order."""

    def shuffle(self, x, *args, **kwargs):
        return None


def _player(placements):
    player = Player(_NoShuffle(0))
    player.create_ship_manager([length for length, _, _ in placements])
    for index, (_, x, y) in enumerate(placements):
        player.place_ship_by_index(index, x, y, ShipOrientation.HORIZONTAL)
    return player


def _key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def _center(state, x, y):
    ox, oy = state.draw_offset
    cw, ch = state.cell_size
    return (ox + x * cw + cw // 2, oy + y * ch + ch // 2)


def test_initial_queue_order_with_no_shuffle():
    player = _player([(1, 0, 0)])
    assert player.pending_ability_type() is AbilityType.DOUBLE_DAMAGE


def test_arrow_keys_move_and_clamp():
    state = AttackingShipsState(_player([(1, 5, 5)]))
    state.handle_input(_key(pygame.K_UP))
    state.handle_input(_key(pygame.K_LEFT))
    assert (state.current_x, state.current_y) == (0, 0)
    state.handle_input(_key(pygame.K_DOWN))
    state.handle_input(_key(pygame.K_RIGHT))
    state.handle_input(_key(pygame.K_RIGHT))
    assert (state.current_x, state.current_y) == (2, 1)
    for _ in range(30):
        state.handle_input(_key(pygame.K_RIGHT))
        state.handle_input(_key(pygame.K_DOWN))
    field = state.player.field
    assert (state.current_x, state.current_y) == (field.width - 1, field.height - 1)


def test_mouse_motion_selects_cell_inside_field_only():
    state = AttackingShipsState(_player([(1, 5, 5)]))
    state.handle_input(pygame.event.Event(pygame.MOUSEMOTION, pos=_center(state, 3, 2)))
    assert (state.current_x, state.current_y) == (3, 2)
    state.handle_input(pygame.event.Event(pygame.MOUSEMOTION, pos=(5000, 5000)))
    assert (state.current_x, state.current_y) == (3, 2)


def test_enter_attacks_and_damages_segment():
    player = _player([(2, 0, 0)])
    state = AttackingShipsState(player)
    state.handle_input(_key(pygame.K_RETURN))
    assert player.field.cell_state(0, 0) is CellVisibilityState.SHIP
    assert player.field.segment_state(0, 0) is ShipSegmentState.DAMAGED
    assert state.result_text == ""


def test_left_click_attacks_empty_cell():
    player = _player([(1, 5, 5)])
    state = AttackingShipsState(player)
    state.handle_input(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=_center(state, 0, 0)))
    assert player.field.cell_state(0, 0) is CellVisibilityState.BLANK


def test_double_damage_sinks_single_segment():
    player = _player([(1, 0, 0), (1, 5, 5)])
    state = AttackingShipsState(player)
    state.handle_input(_key(pygame.K_e))
    assert state.result_text == "Double damage activated"
    assert player.ability_results.double_damage_active
    state.handle_input(_key(pygame.K_RETURN))
    assert player.field.segment_state(0, 0) is ShipSegmentState.DESTROYED
    assert player.alive_count() == 1
    assert not player.ability_results.double_damage_active


def test_scanner_toggle_and_use():
    player = _player([(1, 3, 3)])
    state = AttackingShipsState(player)
    state.handle_input(_key(pygame.K_e))
    state.handle_input(_key(pygame.K_e))
    assert player.scanner_is_active
    assert state.result_text == "Scanner activated. Press Attack to scan"
    state.update()
    cw, ch = state.cell_size
    assert state.selection_rect.size == (cw * 2, ch * 2)
    assert state.selection_color == attacking_state.GREEN

    state.handle_input(_key(pygame.K_e))
    assert not player.scanner_is_active
    assert state.result_text == "Scanner deactivated. Ability not used"

    state.handle_input(_key(pygame.K_e))
    state.handle_input(pygame.event.Event(pygame.MOUSEMOTION, pos=_center(state, 2, 2)))
    state.handle_input(_key(pygame.K_RETURN))
    assert state.result_text == "Scanner used. Ship in range"
    assert not player.scanner_is_active
    assert player.field.cell_state(2, 2) is CellVisibilityState.UNKNOWN
    assert player.pending_ability_type() is AbilityType.BOMBARD


def test_scanner_reports_no_ship():
    player = _player([(1, 5, 5)])
    state = AttackingShipsState(player)
    state.handle_input(_key(pygame.K_e))
    state.handle_input(_key(pygame.K_e))
    state.handle_input(_key(pygame.K_RETURN))
    assert state.result_text == "Scanner used. No ship in range"


def test_bombard_then_no_abilities():
    player = _player([(2, 4, 4)])
    state = AttackingShipsState(player)
    state.handle_input(_key(pygame.K_e))
    state.handle_input(_key(pygame.K_e))
    state.handle_input(_key(pygame.K_RETURN))
    state.handle_input(_key(pygame.K_e))
    assert state.result_text == "Bombard activated"
    assert player.ability_results.bombard_damage_dealt
    states = {player.field.segment_state(x, 4) for x in (4, 5)}
    assert ShipSegmentState.DAMAGED in states
    state.handle_input(_key(pygame.K_e))
    assert state.result_text == "No abilities available"
    with pytest.raises(Exception):
        player.pending_ability_type()


def test_update_moves_selection_and_detects_end():
    player = _player([(1, 0, 0)])
    state = AttackingShipsState(player)
    state.handle_input(_key(pygame.K_RIGHT))
    state.update()
    ox, oy = state.draw_offset
    cw, ch = state.cell_size
    assert state.selection_rect.topleft == (ox + cw, oy)
    assert state.selection_color == attacking_state.YELLOW
    assert state.next_state() is GameState.ATTACKING_SHIPS

    state.handle_input(_key(pygame.K_LEFT))
    state.handle_input(_key(pygame.K_RETURN))
    state.handle_input(_key(pygame.K_RETURN))
    state.update()
    assert player.alive_count() == 0
    assert state.next_state() is GameState.MENU


def test_render_colours_cells():
    player = _player([(2, 0, 0)])
    state = AttackingShipsState(player)
    state.handle_input(_key(pygame.K_RETURN))
    state.handle_input(pygame.event.Event(pygame.MOUSEMOTION, pos=_center(state, 4, 4)))
    state.handle_input(_key(pygame.K_RETURN))
    state.update()
    surface = pygame.Surface((400, 400))
    state.render(surface)
    assert tuple(surface.get_at(_center(state, 0, 0)))[:3] == attacking_state.DAMAGED_COLOR
    assert tuple(surface.get_at(_center(state, 4, 4)))[:3] == attacking_state.BLANK_COLOR
    assert tuple(surface.get_at(_center(state, 1, 0)))[:3] == attacking_state.UNKNOWN_COLOR