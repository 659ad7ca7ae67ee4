"""Common interface of the screens of the graphical game."""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path

import pygame

from seabattle.enums import GameState

_FONT_PATH = Path("assets/fonts/font.ttf")


@lru_cache(maxsize=None)
def _load_font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    if _FONT_PATH.is_file():
        return pygame.font.Font(str(_FONT_PATH), size)
    return pygame.font.Font(None, size)


class State(ABC):
    """One screen: reacts to events, updates itself and draws onto a surface."""

    @abstractmethod
    def handle_input(self, event: pygame.event.Event) -> None:
        """React to one input event."""

    @abstractmethod
    def update(self) -> None:
        """Advance the screen by one frame."""

    @abstractmethod
    def render(self, surface: pygame.Surface) -> None:
        """Draw the screen onto ``surface``."""

    @abstractmethod
    def next_state(self) -> GameState:
        """The screen the game should show next."""

    @staticmethod
    def _font(size: int = 24) -> pygame.font.Font:
        return _load_font(size)

    def _blit_text(
        self,
        surface: pygame.Surface,
        text: str,
        position: tuple[float, float],
        color: tuple[int, int, int],
        size: int = 24,
    ) -> None:
        if not text:
            return
        image = self._font(size).render(text, True, color)
        surface.blit(image, position)