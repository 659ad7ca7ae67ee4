"""The graphical game: a window showing one screen at a time."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

import pygame

from seabattle.attacking_state import AttackingShipsState
from seabattle.enums import GameState
from seabattle.gui_base import State
from seabattle.menu_state import MenuState
from seabattle.placing_state import PlacingShipsState
from seabattle.player import Player
from seabattle.setup_states import CreateFieldState, CreateShipsState

WINDOW_SIZE = (1600, 900)
WINDOW_TITLE = "Battlefield 0"
FRAME_RATE = 60


class GameGui:
    """Owns the player and the current screen and switches between screens."""

    def __init__(self, surface: pygame.Surface | None = None, player: Player | None = None) -> None:
        self.surface = surface
        self.player = player if player is not None else Player()
        self.running = True
        self.current_state = GameState.MENU
        self.state: State = MenuState()
        self.change_state(GameState.MENU)

    def change_state(self, new_state: GameState) -> None:
        """Show the screen for ``new_state``; EXIT stops the game."""
        if new_state is GameState.EXIT:
            self.running = False
            return
        if new_state is GameState.MENU:
            self.state = MenuState()
        elif new_state is GameState.PLACING_SHIPS:
            self.state = PlacingShipsState(self.player)
        elif new_state is GameState.ATTACKING_SHIPS:
            self.state = AttackingShipsState(self.player)
        elif new_state is GameState.CREATE_FIELD:
            self.state = CreateFieldState(self.player)
        elif new_state is GameState.CREATE_SHIPS:
            self.state = CreateShipsState(self.player)
        self.current_state = new_state

    def step(self, events: Iterable[pygame.event.Event]) -> bool:
        """Handle events, update and draw one frame; return whether the game goes on."""
        for event in events:
            if event.type == pygame.QUIT:
                self.change_state(GameState.EXIT)
                break
            self.state.handle_input(event)
        self.state.update()
        if self.surface is not None:
            self.state.render(self.surface)
        wanted = self.state.next_state()
        if wanted is not self.current_state:
            self.change_state(wanted)
        return self.running

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            self.surface = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            while self.running:
                self.step(pygame.event.get())
                pygame.display.flip()
                clock.tick(FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Entry point of the graphical game."""
    parser = argparse.ArgumentParser(description="Play sea battle in a window.")
    parser.parse_args(argv)
    GameGui().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())