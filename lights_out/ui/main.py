"""Interactive pygame window and command line entry point for Lights Out."""

from __future__ import annotations

import argparse
import logging
import time
from typing import List, Optional, Sequence, Tuple

from ..config import (
    COLS_ENV_VAR,
    LIT_PROBABILITY_ENV_VAR,
    ROWS_ENV_VAR,
    SEED_ENV_VAR,
    GameConfig,
    resolve_config,
)
from ..demo import play
from ..game import STATUS_WON, LightsOutGame
from . import layout
from .toolkit import ensure_pygame

logger = logging.getLogger(__name__)


class LightsOutApp:
    """Pygame driven application for the Lights Out puzzle."""

    border_radius = 10
    text_secondary = (168, 176, 196)

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        game: Optional[LightsOutGame] = None,
    ) -> None:
        pygame = ensure_pygame()
        pygame.init()
        self.game = game or LightsOutGame(config)
        self.config = self.game.config
        self.geometry = layout.compute_geometry(self.game.rows, self.game.cols)
        self.screen = pygame.display.set_mode(self.geometry.window)
        pygame.display.set_caption(
            f"Lights Out - {self.game.rows}x{self.game.cols}"
        )
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 22)
        self.bold_font = pygame.font.Font(None, 48)
        self.status_message: Optional[str] = None
        self.status_message_until: float = 0.0
        self.games_won = 0
        logger.info(
            "Starting %dx%d board (lit probability %.2f)",
            self.config.rows,
            self.config.cols,
            self.config.lit_probability,
        )

    # ------------------------------------------------------------------
    # Game handling
    # ------------------------------------------------------------------
    def new_game(self) -> None:
        self.game.new_game()
        self._set_status_message("New game", 1.5)

    def click_cell(self, cell: Tuple[int, int]) -> None:
        was_won = self.game.won
        status = self.game.toggle(cell)
        if status == STATUS_WON and not was_won:
            self.games_won += 1
            logger.info("Board cleared in %d moves", self.game.moves)

    def _set_status_message(self, message: str, duration: float = 3.0) -> None:
        self.status_message = message
        self.status_message_until = time.perf_counter() + duration

    def _status_text(self) -> str:
        if self.status_message and time.perf_counter() < self.status_message_until:
            return self.status_message
        if self.game.won:
            return f"Solved in {self.game.moves} moves - press N for a new game"
        return f"Lit: {self.game.lit_count()}   Moves: {self.game.moves}"

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def draw(self) -> None:
        pygame = ensure_pygame()
        self.screen.fill(layout.BACKGROUND_COLOR)
        board_rect = pygame.Rect(*self.geometry.board)
        status_rect = pygame.Rect(*self.geometry.status_bar)
        for layer in layout.DRAW_ORDER:
            if layer == "board":
                if self.game.won:
                    self._draw_win(board_rect)
                else:
                    self._draw_board(board_rect)
            elif layer == "status_bar":
                self._draw_status_bar(status_rect)
        pygame.display.flip()

    def _draw_board(self, board_rect) -> None:
        pygame = ensure_pygame()
        pygame.draw.rect(
            self.screen,
            layout.BOARD_BACKGROUND_COLOR,
            board_rect,
            border_radius=self.border_radius,
        )
        for row_index, row in enumerate(self.game.grid):
            for col_index, lit in enumerate(row):
                rect = pygame.Rect(*self.geometry.cell_rect(row_index, col_index))
                color = layout.LIT_COLOR if lit else layout.UNLIT_COLOR
                pygame.draw.rect(self.screen, color, rect, border_radius=6)
                pygame.draw.rect(
                    self.screen, layout.GRID_LINE_COLOR, rect, 1, border_radius=6
                )

    def _draw_win(self, board_rect) -> None:
        pygame = ensure_pygame()
        pygame.draw.rect(
            self.screen,
            layout.WIN_BACKGROUND_COLOR,
            board_rect,
            border_radius=self.border_radius,
        )
        label = self.bold_font.render(layout.WIN_MESSAGE, True, layout.TEXT_COLOR)
        rect = label.get_rect()
        rect.center = board_rect.center
        self.screen.blit(label, rect)

    def _draw_status_bar(self, status_rect) -> None:
        pygame = ensure_pygame()
        pygame.draw.rect(
            self.screen,
            layout.BOARD_BACKGROUND_COLOR,
            status_rect,
            border_radius=self.border_radius,
        )
        color = layout.ACCENT_COLOR if self.game.won else self.text_secondary
        text_surface = self.font.render(self._status_text(), True, color)
        text_rect = text_surface.get_rect()
        text_rect.midleft = (
            status_rect.x + layout.STATUS_BAR_PADDING,
            status_rect.centery,
        )
        self.screen.blit(text_surface, text_rect)

    # ------------------------------------------------------------------
    # Event handling
    # ------------------------------------------------------------------
    def handle_event(self, event) -> None:
        pygame = ensure_pygame()
        if event.type == pygame.QUIT:
            raise SystemExit
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                raise SystemExit
            if event.key == pygame.K_n:
                self.new_game()
            return
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.game.won:
                if pygame.Rect(*self.geometry.board).collidepoint(event.pos):
                    self.new_game()
                return
            cell = self.geometry.cell_at(event.pos, self.game.rows, self.game.cols)
            if cell is not None:
                self.click_cell(cell)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    def run(self) -> None:
        pygame = ensure_pygame()
        while True:
            for event in pygame.event.get():
                try:
                    self.handle_event(event)
                except SystemExit:
                    pygame.quit()
                    return
            self.draw()
            self.clock.tick(60)


def run(config: Optional[GameConfig] = None) -> None:
    """Entry point helper that instantiates and runs the UI."""

    app = LightsOutApp(config)
    app.run()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lights Out launcher")
    parser.add_argument("--rows", type=int, help=f"Board rows (env: {ROWS_ENV_VAR}).")
    parser.add_argument("--cols", type=int, help=f"Board columns (env: {COLS_ENV_VAR}).")
    parser.add_argument(
        "--lit-probability",
        type=float,
        help=f"Chance a cell starts lit (env: {LIT_PROBABILITY_ENV_VAR}).",
    )
    parser.add_argument(
        "--seed", type=int, help=f"Seed for reproducible boards (env: {SEED_ENV_VAR})."
    )
    parser.add_argument(
        "--info",
        action="store_true",
        help="Print the resolved configuration and exit without launching the UI.",
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Play in the terminal instead of opening a window.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def describe_config(config: GameConfig) -> str:
    seed = "random" if config.seed is None else str(config.seed)
    return (
        "Lights Out configuration\n"
        f"  rows: {config.rows}\n"
        f"  cols: {config.cols}\n"
        f"  lit probability: {config.lit_probability}\n"
        f"  seed: {seed}\n"
        "Set the environment variables or pass command line flags to change them."
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, then print the configuration or start a game."""

    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    try:
        config = resolve_config().with_overrides(
            rows=args.rows,
            cols=args.cols,
            lit_probability=args.lit_probability,
            seed=args.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))

    if args.info:
        print(describe_config(config))
        return 0
    if args.console:
        play(LightsOutGame(config))
        return 0
    run(config)
    return 0


__all__: List[str] = [
    "LightsOutApp",
    "build_parser",
    "describe_config",
    "main",
    "run",
]


if __name__ == "__main__":  # pragma: no cover - manual invocation entry point
    raise SystemExit(main())
