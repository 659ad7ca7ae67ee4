"""Screens for choosing the field size and the fleet."""

from __future__ import annotations

from typing import Callable

import pygame

from seabattle.enums import GameState
from seabattle.gui_base import State
from seabattle.player import Player

_MIN_SIDE = 5
_MAX_SIDE = 30
_DEFAULT_SIDE = 10
_MAX_SHIPS = 10
_SHIP_KINDS = 4


class _SetupScreen(State):
    """A screen driven by key presses that edits the player's setup."""

    def __init__(self, player: Player, own_state: GameState) -> None:
        self.player = player
        self._next = own_state

    @staticmethod
    def _dispatch(event: pygame.event.Event, bindings: dict[int, Callable[[], None]]) -> None:
        if event.type == pygame.KEYDOWN:
            action = bindings.get(event.key)
            if action is not None:
                action()


class CreateFieldState(_SetupScreen):
    """Resize the field with the arrow keys; Enter confirms, Escape goes back."""

    draw_offset = (10, 50)
    cell_size = (20, 20)

    def __init__(self, player: Player) -> None:
        super().__init__(player, GameState.CREATE_FIELD)
        self.field_width = player.field.width
        self.field_height = player.field.height
        self.field_size_text = ""

    def _bindings(self) -> dict[int, Callable[[], None]]:
        return {
            pygame.K_UP: lambda: self._resize(0, 1),
            pygame.K_DOWN: lambda: self._resize(0, -1),
            pygame.K_RIGHT: lambda: self._resize(1, 0),
            pygame.K_LEFT: lambda: self._resize(-1, 0),
            pygame.K_RETURN: lambda: self._finish(
                self.field_width, self.field_height, GameState.CREATE_SHIPS
            ),
            pygame.K_ESCAPE: lambda: self._finish(_DEFAULT_SIDE, _DEFAULT_SIDE, GameState.MENU),
        }

    def handle_input(self, event: pygame.event.Event) -> None:
        self._dispatch(event, self._bindings())

    def next_state(self) -> GameState:
        return self._next

    def _resize(self, dw: int, dh: int) -> None:
        if dw:
            self.field_width = min(_MAX_SIDE, max(_MIN_SIDE, self.field_width + dw))
        if dh:
            self.field_height = min(_MAX_SIDE, max(_MIN_SIDE, self.field_height + dh))

    def _finish(self, width: int, height: int, next_state: GameState) -> None:
        self.player.create_field(width, height)
        self._next = next_state

    def update(self) -> None:
        self.field_size_text = f"Field Size: {self.field_width} x {self.field_height}"

    def render(self, surface: pygame.Surface) -> None:
        surface.fill(pygame.Color("black"))
        self._blit_text(surface, self.field_size_text, (10, 10), pygame.Color("white"))
        ox, oy = self.draw_offset
        cw, ch = self.cell_size
        for y in range(self.field_height):
            for x in range(self.field_width):
                rect = pygame.Rect(ox + x * cw, oy + y * ch, cw, ch)
                pygame.draw.rect(surface, pygame.Color("cyan"), rect)
                pygame.draw.rect(surface, pygame.Color("black"), rect, 1)


class CreateShipsState(_SetupScreen):
    """Choose how many ships of each length (1 to 4) the fleet has."""

    draw_offset = (10, 100)
    box_size = (100, 30)

    def __init__(self, player: Player) -> None:
        super().__init__(player, GameState.CREATE_SHIPS)
        # counts[i] is the number of ships of length i + 1
        self.counts = [_SHIP_KINDS - i for i in range(_SHIP_KINDS)]
        self.active_index = 0

    def _bindings(self) -> dict[int, Callable[[], None]]:
        return {
            pygame.K_UP: lambda: self._select(-1),
            pygame.K_DOWN: lambda: self._select(1),
            pygame.K_KP_PLUS: lambda: self._adjust(1),
            pygame.K_EQUALS: lambda: self._adjust(1),
            pygame.K_KP_MINUS: lambda: self._adjust(-1),
            pygame.K_MINUS: lambda: self._adjust(-1),
            pygame.K_RETURN: lambda: self._finish(self._lengths(), GameState.PLACING_SHIPS),
            pygame.K_ESCAPE: lambda: self._finish([], GameState.CREATE_FIELD),
        }

    def handle_input(self, event: pygame.event.Event) -> None:
        self._dispatch(event, self._bindings())

    def next_state(self) -> GameState:
        return self._next

    def _select(self, step: int) -> None:
        self.active_index = (self.active_index + step) % _SHIP_KINDS

    def _adjust(self, step: int) -> None:
        count = self.counts[self.active_index] + step
        if 0 <= count <= _MAX_SHIPS:
            self.counts[self.active_index] = count

    def _lengths(self) -> list[int]:
        return [
            length
            for length in range(_SHIP_KINDS, 0, -1)
            for _ in range(self.counts[length - 1])
        ]

    def _finish(self, lengths: list[int], next_state: GameState) -> None:
        self.player.create_ship_manager(lengths)
        self._next = next_state

    def update(self) -> None:
        """Nothing changes between frames on this screen."""

    def render(self, surface: pygame.Surface) -> None:
        white = pygame.Color("white")
        surface.fill(pygame.Color("black"))
        self._blit_text(surface, "Number of ships:", (10, 10), white)
        ox, oy = self.draw_offset
        bw, bh = self.box_size
        for index, count in enumerate(self.counts):
            rect = pygame.Rect(ox, oy + index * 100, bw, bh)
            fill = pygame.Color("green") if index == self.active_index else white
            pygame.draw.rect(surface, fill, rect)
            self._blit_text(surface, f"Ship of length {index + 1}:", (rect.x, rect.y - 30), white)
            self._blit_text(surface, str(count), rect.topleft, pygame.Color("black"))