"""Headless interaction tests for the pygame based UI wrapper.

To keep rendering deterministic the tests rely on the fixtures in
``conftest.py`` which force the SDL dummy drivers.  Pixel positions are
derived from a fixed ``cell_size`` and ``gap``.
"""

from __future__ import annotations

from lights_out.config import GameConfig
from lights_out.game import LightsOutGame, parse_grid
from lights_out.ui import LightsOutUI
from lights_out.ui import layout

CELL = 32
GAP = 2


def cell_centre(row: int, col: int):
    pitch = CELL + GAP
    return (GAP + col * pitch + CELL // 2, GAP + row * pitch + CELL // 2)


def make_game(text: str) -> LightsOutGame:
    game = LightsOutGame(GameConfig(rows=3, cols=3, lit_probability=0.0))
    game.load_grid(parse_grid(text))
    return game


def click(pygame, pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_click_toggles_cell_and_neighbours(pygame_module):
    pygame = pygame_module
    game = make_game(
        """
        . . .
        . . .
        . . O
        """
    )
    ui = LightsOutUI(game, cell_size=CELL, gap=GAP)

    ui.process_events([click(pygame, cell_centre(1, 1))])

    assert game.grid == parse_grid(
        """
        . O .
        O O O
        . O O
        """
    )
    assert game.moves == 1


def test_clicks_in_gaps_and_outside_board_are_ignored(pygame_module):
    pygame = pygame_module
    game = make_game(
        """
        O . .
        . . .
        . . .
        """
    )
    ui = LightsOutUI(game, cell_size=CELL, gap=GAP)

    ui.process_events(
        [
            click(pygame, (0, 0)),
            click(pygame, (CELL + GAP + 1, 10)),
            click(pygame, (500, 500)),
        ]
    )

    assert game.moves == 0
    assert game.lit_cells() == {(0, 0)}


def test_render_paints_lit_and_unlit_cells(pygame_module):
    game = make_game(
        """
        O . .
        . . .
        . . .
        """
    )
    ui = LightsOutUI(game, cell_size=CELL, gap=GAP)

    surface = ui.render()

    assert surface.get_size() == (3 * CELL + 4 * GAP, 3 * CELL + 4 * GAP)
    assert rgb(surface, cell_centre(0, 0)) == layout.LIT_COLOR
    assert rgb(surface, cell_centre(1, 1)) == layout.UNLIT_COLOR
    assert rgb(surface, (0, 0)) == layout.BOARD_BACKGROUND_COLOR


def test_winning_click_switches_to_win_view(pygame_module):
    pygame = pygame_module
    game = make_game(
        """
        O O .
        O . .
        . . .
        """
    )
    ui = LightsOutUI(game, cell_size=CELL, gap=GAP)

    ui.process_events([click(pygame, cell_centre(0, 0))])
    assert game.won

    surface = ui.render()
    assert rgb(surface, (1, 1)) == layout.WIN_BACKGROUND_COLOR

    ui.process_events([click(pygame, cell_centre(2, 2))])
    assert game.won
    assert game.moves == 1


def test_new_game_key_starts_fresh_board(pygame_module):
    pygame = pygame_module
    game = LightsOutGame(GameConfig(rows=2, cols=4, lit_probability=1.0))
    ui = LightsOutUI(game, cell_size=CELL, gap=GAP)
    ui.process_events([click(pygame, cell_centre(0, 0))])
    assert game.moves == 1
    geometry = ui.geometry
    size = ui.surface.get_size()

    ui.process_events([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_n)])

    assert game.moves == 0
    assert game.lit_count() == 8
    assert ui.geometry is geometry
    assert ui.render().get_size() == size


def test_pygame_runs_headless_with_dummy_driver(pygame_module):
    assert hasattr(pygame_module, "get_sdl_version")
    assert pygame_module.display.get_driver() == "dummy"
