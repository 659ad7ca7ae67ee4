"""Screen on which the fleet is shot at and abilities are spent."""

from __future__ import annotations

from contextlib import suppress

import pygame

from seabattle.enums import AbilityType, CellVisibilityState, GameState, ShipSegmentState
from seabattle.exceptions import GameError, NoAbilityAvailableError, OutOfBoundsAttackError
from seabattle.gui_base import State
from seabattle.player import Player

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)
CYAN = (0, 255, 255)

UNKNOWN_COLOR = CYAN
BLANK_COLOR = WHITE
INTACT_COLOR = BLUE
DAMAGED_COLOR = YELLOW
DESTROYED_COLOR = RED

_SEGMENT_COLORS = {
    ShipSegmentState.INTACT: INTACT_COLOR,
    ShipSegmentState.DAMAGED: DAMAGED_COLOR,
    ShipSegmentState.DESTROYED: DESTROYED_COLOR,
}

INSTRUCTIONS = "Use arrow keys to move, Enter to attack, E to use ability"


class AttackingShipsState(State):
    """Move a cursor over the field, attack cells and use queued abilities."""

    draw_offset = (10, 70)
    cell_size = (20, 20)

    def __init__(self, player: Player) -> None:
        self.player = player
        self.current_x = 0
        self.current_y = 0
        self.result_text = ""
        self.selection_rect = pygame.Rect(self.draw_offset, self.cell_size)
        self.selection_color = YELLOW
        self._next = GameState.ATTACKING_SHIPS

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._attack()
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
        elif code == pygame.K_e:
            self._use_ability()
        elif code == pygame.K_RETURN:
            self._attack()

    def _use_ability(self) -> None:
        player = self.player
        try:
            kind = player.pending_ability_type()
            if kind is AbilityType.DOUBLE_DAMAGE:
                player.use_ability(player, self.current_x, self.current_y)
                self.result_text = "Double damage activated"
            elif kind is AbilityType.SCANNER:
                if player.scanner_is_active:
                    player.scanner_is_active = False
                    self.result_text = "Scanner deactivated. Ability not used"
                else:
                    player.scanner_is_active = True
                    self.result_text = "Scanner activated. Press Attack to scan"
            elif kind is AbilityType.BOMBARD:
                player.use_ability(player, self.current_x, self.current_y)
                self.result_text = "Bombard activated"
        except NoAbilityAvailableError:
            self.result_text = "No abilities available"
        except (GameError, ValueError, LookupError) as error:
            self.result_text = str(error)

    def _attack(self) -> None:
        player = self.player
        if player.scanner_is_active:
            player.use_ability(player, self.current_x, self.current_y)
            if player.ability_results.scanner_ship_found:
                self.result_text = "Scanner used. Ship in range"
            else:
                self.result_text = "Scanner used. No ship in range"
            player.scanner_is_active = False
            return
        # a failed shot's message is cleared straight away, like a successful one
        with suppress(OutOfBoundsAttackError, GameError, ValueError, LookupError):
            player.attack(player, self.current_x, self.current_y, 1, True)
        self.result_text = ""

    def update(self) -> None:
        cw, ch = self.cell_size
        left = self.draw_offset[0] + self.current_x * cw
        top = self.draw_offset[1] + self.current_y * ch
        if self.player.scanner_is_active:
            self.selection_rect = pygame.Rect(left, top, cw * 2, ch * 2)
            self.selection_color = GREEN
        else:
            self.selection_rect = pygame.Rect(left, top, cw, ch)
            self.selection_color = YELLOW
        if self.player.alive_count() == 0:
            self._next = GameState.MENU

    def render(self, surface: pygame.Surface) -> None:
        surface.fill(BLACK)
        self._blit_text(surface, INSTRUCTIONS, (10, 10), WHITE)
        self._blit_text(surface, self.result_text, (10, 40), RED)
        self._draw_field(surface)
        pygame.draw.rect(surface, self.selection_color, self.selection_rect, 2)

    def _cell_color(self, x: int, y: int) -> tuple[int, int, int]:
        field = self.player.field
        state = field.cell_state(x, y)
        if state is CellVisibilityState.UNKNOWN:
            return UNKNOWN_COLOR
        if state is CellVisibilityState.BLANK:
            return BLANK_COLOR
        return _SEGMENT_COLORS[field.segment_state(x, y)]

    def _draw_field(self, surface: pygame.Surface) -> None:
        field = self.player.field
        ox, oy = self.draw_offset
        cw, ch = self.cell_size
        for y in range(field.height):
            for x in range(field.width):
                rect = pygame.Rect(ox + x * cw, oy + y * ch, cw, ch)
                pygame.draw.rect(surface, self._cell_color(x, y), rect)
                pygame.draw.rect(surface, BLACK, rect, 1)

    def next_state(self) -> GameState:
        return self._next