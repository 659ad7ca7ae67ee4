import pygame
import pytest

from seabattle.enums import GameState
from seabattle.menu_state import MenuState


def menu_after(*codes):
    menu = MenuState()
    for code in codes:
        menu.handle_input(pygame.event.Event(pygame.KEYDOWN, key=code))
    return menu


@pytest.mark.parametrize(
    "codes, index",
    [
        ((), 0),
        ((pygame.K_UP,), 0),
        ((pygame.K_DOWN,) * 4, 2),
        ((pygame.K_DOWN, pygame.K_UP), 0),
        ((pygame.K_DOWN,), 1),
    ],
)
def test_selection_moves_within_bounds(codes, index):
    menu = menu_after(*codes)
    assert menu.selected_index == index
    assert menu.next_state() is GameState.MENU


@pytest.mark.parametrize(
    "moves, expected",
    [
        ((), GameState.CREATE_FIELD),
        ((pygame.K_DOWN,), GameState.MENU),
        ((pygame.K_DOWN, pygame.K_DOWN), GameState.EXIT),
    ],
)
def test_enter_selects(moves, expected):
    assert menu_after(*moves, pygame.K_RETURN).next_state() is expected


def test_other_events_are_ignored():
    menu = MenuState()
    menu.handle_input(pygame.event.Event(pygame.KEYUP, key=pygame.K_RETURN))
    menu.handle_input(pygame.event.Event(pygame.MOUSEMOTION, pos=(0, 0)))
    assert (menu.next_state(), menu.selected_index) == (GameState.MENU, 0)


def test_render_clears_background():
    surface = pygame.Surface((400, 300))
    surface.fill((10, 20, 30))
    MenuState().render(surface)
    assert surface.get_at((0, 0)) == (0, 0, 0, 255)