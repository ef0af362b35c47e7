"""The window, the screen stack and the frame loop."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pygame

TITLE = "QuadTree Visualization"
FRAME_RATE = 60
WHITE = (255, 255, 255)


class GameState(ABC):
    """A screen that handles input, advances in time and draws itself."""

    @abstractmethod
    def handle_input(self) -> None:
        """Process pending window events."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the screen by ``dt`` seconds."""

    @abstractmethod
    def draw(self) -> None:
        """Draw the screen onto the game window."""


class Game:
    """Owns the window and a stack of screens; the top screen is the active one."""

    def __init__(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)
        self.window: pygame.Surface | None = None
        self._states: list[GameState] = []
        self._open = False

    def change_screen(self, state: GameState) -> None:
        """Make ``state`` the active screen, keeping the previous ones below it."""
        self._states.append(state)

    def previous_screen(self) -> None:
        """Discard the active screen and return to the one below it."""
        if not self._states:
            raise IndexError("there is no screen to leave")
        self._states.pop()

    def current_state(self) -> GameState | None:
        """The active screen, or None when there is none."""
        return self._states[-1] if self._states else None

    @property
    def is_open(self) -> bool:
        """True while the frame loop is running."""
        return self._open

    def close(self) -> None:
        """Stop the frame loop after the current frame."""
        self._open = False

    def game_loop(self) -> None:
        """Open the window and run frames until it is closed."""
        pygame.display.init()
        try:
            self.window = pygame.display.set_mode((int(self.width), int(self.height)))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            self._open = True
            while self._open:
                dt = clock.tick(FRAME_RATE) / 1000.0
                state = self.current_state()
                if state is None:
                    if pygame.event.get(pygame.QUIT):
                        self.close()
                    continue

                state.handle_input()
                state.update(dt)
                self.window.fill(WHITE)
                state.draw()
                pygame.display.flip()
        finally:
            self._open = False
            self.window = None
            pygame.display.quit()