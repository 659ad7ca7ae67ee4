"""Screen for putting the fleet on the field."""

from __future__ import annotations

import pygame

from seabattle.enums import GameState, ShipOrientation
from seabattle.exceptions import GameError
from seabattle.gui_base import State
from seabattle.player import Player

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_RED = (255, 0, 0)
_GREEN = (0, 255, 0)
_BLUE = (0, 0, 255)

_INSTRUCTIONS = "Use arrow keys to move, R to rotate, Enter to place ship"


class PlacingShipsState(State):
    """Move a cursor over the field and place the ships one by one."""

    draw_offset = (10, 70)
    cell_size = (20, 20)

    def __init__(self, player: Player) -> None:
        self.player = player
        self.current_x = 0
        self.current_y = 0
        self.ship_index = 0
        self.orientation = ShipOrientation.VERTICAL
        self.result_text = ""
        self.ship_rect: pygame.Rect | None = None
        self._next = GameState.PLACING_SHIPS

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._place_current()
        elif event.type == pygame.MOUSEMOTION:
            self._move_to_pixel(event.pos)
        elif event.type == pygame.KEYDOWN:
            self._handle_key(event.key)

    def _move_to_pixel(self, pos: tuple[int, int]) -> None:
        # truncation toward zero, so a few pixels left of the field still hit column 0
        x = int((pos[0] - self.draw_offset[0]) / self.cell_size[0])
        y = int((pos[1] - self.draw_offset[1]) / self.cell_size[1])
        field = self.player.field
        if 0 <= x < field.width and 0 <= y < field.height:
            self.current_x, self.current_y = x, y

    def _handle_key(self, code: int) -> None:
        field = self.player.field
        if code == pygame.K_UP:
            if self.current_y > 0:
                self.current_y -= 1
        elif code == pygame.K_DOWN:
            if self.current_y < field.height - 1:
                self.current_y += 1
        elif code == pygame.K_LEFT:
            if self.current_x > 0:
                self.current_x -= 1
        elif code == pygame.K_RIGHT:
            if self.current_x < field.width - 1:
                self.current_x += 1
        elif code == pygame.K_r:
            self.orientation = (
                ShipOrientation.HORIZONTAL
                if self.orientation is ShipOrientation.VERTICAL
                else ShipOrientation.VERTICAL
            )
        elif code == pygame.K_RETURN:
            self._place_current()
        elif code == pygame.K_ESCAPE:
            self.player.create_field(field.width, field.height)
            self._next = GameState.CREATE_SHIPS

    def _place_current(self) -> None:
        try:
            self.player.place_ship_by_index(
                self.ship_index, self.current_x, self.current_y, self.orientation
            )
        except (ValueError, LookupError, GameError) as error:
            self.result_text = str(error)
        else:
            self.ship_index += 1
        if self.ship_index >= self.player.ship_count():
            self._next = GameState.ATTACKING_SHIPS

    def update(self) -> None:
        if self.ship_index >= self.player.ship_count():
            self.ship_rect = None
            return
        length = self.player.ship_length(self.ship_index)
        cw, ch = self.cell_size
        if self.orientation is ShipOrientation.VERTICAL:
            size = (cw, length * ch)
        else:
            size = (length * cw, ch)
        left = self.draw_offset[0] + self.current_x * cw
        top = self.draw_offset[1] + self.current_y * ch
        self.ship_rect = pygame.Rect((left, top), size)

    def render(self, surface: pygame.Surface) -> None:
        surface.fill(_BLACK)
        self._blit_text(surface, _INSTRUCTIONS, (10, 10), _WHITE)
        self._blit_text(surface, self.result_text, (10, 40), _RED)
        self._draw_field(surface)
        if self.ship_rect is not None and self.ship_index < self.player.ship_count():
            pygame.draw.rect(surface, _BLUE, self.ship_rect)
            pygame.draw.rect(surface, _WHITE, self.ship_rect, 1)

    def _draw_field(self, surface: pygame.Surface) -> None:
        field = self.player.field
        ox, oy = self.draw_offset
        cw, ch = self.cell_size
        for y in range(field.height):
            for x in range(field.width):
                rect = pygame.Rect(ox + x * cw, oy + y * ch, cw, ch)
                pygame.draw.rect(surface, _RED if field.is_ship(x, y) else _GREEN, rect)
                pygame.draw.rect(surface, _WHITE, rect, 1)

    def next_state(self) -> GameState:
        return self._next