"""Minimal pygame based UI helpers for headless testing.

This module keeps the rendering deterministic so it can be exercised in
automated tests using the SDL ``dummy`` video driver.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional, Tuple

from ..game import Coordinate, LightsOutGame
from . import layout

logger = logging.getLogger(__name__)

# Pygame is only needed by the UI helpers.  The import is performed lazily in
# ``ensure_pygame`` so test environments can control the SDL configuration
# (e.g. select the ``dummy`` video driver) first.
_PYGAME = None


def ensure_pygame():
    global _PYGAME
    if _PYGAME is None:
        # ``setdefault`` lets real applications pick a different driver.
        os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
        _PYGAME = __import__("pygame")
        _PYGAME.display.init()
        _PYGAME.font.init()
    return _PYGAME


class LightsOutUI:
    """Very small pygame driven UI wrapper used for automated tests."""

    def __init__(
        self,
        game: LightsOutGame,
        *,
        cell_size: int = 32,
        gap: int = 2,
        surface=None,
        use_display: bool = False,
    ) -> None:
        pygame = ensure_pygame()
        self.game = game
        self.cell_size = cell_size
        self.gap = gap
        self.geometry = self._compute_geometry()
        width, height = self.geometry.board[2], self.geometry.board[3]
        self.surface = surface or pygame.Surface((width, height))
        self.screen = None
        if use_display:
            self.screen = pygame.display.set_mode((width, height))
        self.font = pygame.font.Font(pygame.font.get_default_font(), 14)

    def _compute_geometry(self) -> layout.BoardGeometry:
        return layout.compute_geometry(
            self.game.rows,
            self.game.cols,
            cell_size=self.cell_size,
            gap=self.gap,
            padding=0,
        )

    # ------------------------------------------------------------------
    # Input handling
    def process_events(self, events: Iterable[object]) -> None:
        pygame = ensure_pygame()
        for event in events:
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(event.pos)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_n:
                self.new_game()

    def cell_from_pixel(self, pos: Tuple[int, int]) -> Optional[Coordinate]:
        return self.geometry.cell_at(pos, self.game.rows, self.game.cols)

    def _handle_click(self, pos: Tuple[int, int]) -> None:
        if self.game.won:
            return
        cell = self.cell_from_pixel(pos)
        if cell is None:
            return
        self.game.toggle(cell)

    def new_game(self) -> None:
        self.game.new_game()

    # ------------------------------------------------------------------
    # Rendering helpers
    def render(self):
        pygame = ensure_pygame()
        if self.game.won:
            self._draw_win()
        else:
            self.surface.fill(layout.BOARD_BACKGROUND_COLOR)
            self._draw_cells()
        if self.screen:
            self.screen.blit(self.surface, (0, 0))
            pygame.display.flip()
        return self.surface

    def _draw_cells(self) -> None:
        pygame = ensure_pygame()
        for row_index, row in enumerate(self.game.grid):
            for col_index, lit in enumerate(row):
                rect = pygame.Rect(*self.geometry.cell_rect(row_index, col_index))
                color = layout.LIT_COLOR if lit else layout.UNLIT_COLOR
                self.surface.fill(color, rect)

    def _draw_win(self) -> None:
        self.surface.fill(layout.WIN_BACKGROUND_COLOR)
        label = self.font.render(layout.WIN_MESSAGE, True, layout.TEXT_COLOR)
        rect = label.get_rect()
        rect.center = self.surface.get_rect().center
        self.surface.blit(label, rect)


__all__ = ["LightsOutUI", "ensure_pygame"]
