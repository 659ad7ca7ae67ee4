"""The main menu screen."""

from __future__ import annotations

import pygame

from seabattle.enums import GameState
from seabattle.gui_base import State

_STEPS = {pygame.K_UP: -1, pygame.K_DOWN: 1}
# Menu index -> screen it leads to; the middle item does nothing yet.
_CHOICES = {0: GameState.CREATE_FIELD, 2: GameState.EXIT}


class MenuState(State):
    """A vertical list of menu items chosen with the arrow keys and Enter."""

    items = ("Start Game", "um", "Exit")

    def __init__(self) -> None:
        self.selected_index = 0
        self._next = GameState.MENU

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        if event.key in _STEPS:
            moved = self.selected_index + _STEPS[event.key]
            self.selected_index = min(max(moved, 0), len(self.items) - 1)
        elif event.key == pygame.K_RETURN:
            self._next = _CHOICES.get(self.selected_index, self._next)

    def update(self) -> None:
        pass

    def render(self, surface: pygame.Surface) -> None:
        surface.fill(pygame.Color("black"))
        for index, item in enumerate(self.items):
            color = pygame.Color("red" if index == self.selected_index else "white")
            self._blit_text(surface, item, (100, 100 + index * 30), color)

    def next_state(self) -> GameState:
        return self._next