"""Core game logic for the Lights Out puzzle."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Protocol, Sequence, Set, Tuple

from .config import GameConfig

logger = logging.getLogger(__name__)

Grid = List[List[bool]]
Coordinate = Tuple[int, int]

STATUS_PLAYING = "playing"
STATUS_WON = "won"

# Centre first, then left, right, up, down.
TOGGLE_OFFSETS: Tuple[Coordinate, ...] = ((0, 0), (0, -1), (0, 1), (-1, 0), (1, 0))

_LIT_TOKENS = {"o", "1", "t", "#", "x"}
_UNLIT_TOKENS = {".", "0", "f", "-"}


class RandomSource(Protocol):
    def random(self) -> float:
        ...


class InvalidCoordinate(ValueError):
    """Raised when a toggle is centred on a cell outside the grid."""

    def __init__(self, coord: Coordinate, shape: Tuple[int, int]):
        self.coord = coord
        self.shape = shape
        super().__init__(
            f"Coordinate {coord} is outside a {shape[0]}x{shape[1]} grid"
        )


def grid_shape(grid: Sequence[Sequence[bool]]) -> Tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return rows, cols


def inside(grid: Sequence[Sequence[bool]], coord: Coordinate) -> bool:
    rows, cols = grid_shape(grid)
    row, col = coord
    return 0 <= row < rows and 0 <= col < cols


def initialize(
    rows: int,
    cols: int,
    lit_probability: float,
    rng: Optional[RandomSource] = None,
) -> Grid:
    """Create a new board where each cell is lit with ``lit_probability``.

    ``rng`` only needs a ``random()`` method returning a float in ``[0, 1)``;
    pass ``random.Random(seed)`` for a reproducible board.
    """

    source = rng if rng is not None else random
    grid = [
        [source.random() < lit_probability for _ in range(cols)]
        for _ in range(rows)
    ]
    logger.debug(
        "Initialised %dx%d board with %d lit cells", rows, cols, lit_count(grid)
    )
    return grid


def toggle_around(grid: Sequence[Sequence[bool]], coord: Coordinate) -> Grid:
    """Return a copy of ``grid`` with ``coord`` and its orthogonal neighbours flipped.

    Neighbours that fall off the board are skipped. The centre must lie on the
    board, otherwise :class:`InvalidCoordinate` is raised.
    """

    if not inside(grid, coord):
        raise InvalidCoordinate(tuple(coord), grid_shape(grid))
    updated = [list(row) for row in grid]
    row, col = coord
    for d_row, d_col in TOGGLE_OFFSETS:
        target = (row + d_row, col + d_col)
        if inside(updated, target):
            updated[target[0]][target[1]] = not updated[target[0]][target[1]]
    logger.debug("Toggled around %s", (row, col))
    return updated


def lit_cells(grid: Sequence[Sequence[bool]]) -> Set[Coordinate]:
    return {
        (row_index, col_index)
        for row_index, row in enumerate(grid)
        for col_index, lit in enumerate(row)
        if lit
    }


def lit_count(grid: Sequence[Sequence[bool]]) -> int:
    return sum(1 for row in grid for lit in row if lit)


def has_won(grid: Sequence[Sequence[bool]]) -> bool:
    """All lights are off."""

    return not any(lit for row in grid for lit in row)


def format_grid(
    grid: Sequence[Sequence[bool]], *, lit: str = "O", unlit: str = "."
) -> str:
    """Render the grid as text with row and column headers."""

    _, cols = grid_shape(grid)
    label_width = len(str(max(len(grid) - 1, 0)))
    lines = [" " * (label_width + 2) + " ".join(str(c) for c in range(cols))]
    for index, row in enumerate(grid):
        cells = " ".join(lit if cell else unlit for cell in row)
        lines.append(f"{index:>{label_width}}: {cells}")
    return "\n".join(lines)


def parse_grid(text: str) -> Grid:
    """Parse rows of ``O``/``.`` (or ``1``/``0``, ``t``/``f``) into a grid.

    Whitespace between cells is ignored and blank lines are skipped.
    """

    grid: Grid = []
    for line_number, line in enumerate(text.strip().splitlines(), start=1):
        tokens = [char for char in line.strip().lower() if not char.isspace()]
        if not tokens:
            continue
        row: List[bool] = []
        for token in tokens:
            if token in _LIT_TOKENS:
                row.append(True)
            elif token in _UNLIT_TOKENS:
                row.append(False)
            else:
                raise ValueError(f"Unknown cell {token!r} on line {line_number}")
        grid.append(row)
    validate_grid(grid)
    return grid


def validate_grid(grid: Sequence[Sequence[bool]]) -> None:
    if not grid or not grid[0]:
        raise ValueError("Grid must have at least one row and one column")
    width = len(grid[0])
    for index, row in enumerate(grid):
        if len(row) != width:
            raise ValueError(
                f"Grid is not rectangular: row {index} has {len(row)} cells, expected {width}"
            )


class LightsOutGame:
    """One game session: owns the grid and tracks the playing/won state."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or GameConfig()
        if rng is None and self.config.seed is not None:
            rng = random.Random(self.config.seed)
        self.rng = rng
        self.grid: Grid = []
        self.moves = 0
        self.new_game()

    @property
    def rows(self) -> int:
        return grid_shape(self.grid)[0]

    @property
    def cols(self) -> int:
        return grid_shape(self.grid)[1]

    @property
    def status(self) -> str:
        return STATUS_WON if has_won(self.grid) else STATUS_PLAYING

    @property
    def won(self) -> bool:
        return self.status == STATUS_WON

    def new_game(self) -> str:
        self.grid = initialize(
            self.config.rows,
            self.config.cols,
            self.config.lit_probability,
            self.rng,
        )
        self.moves = 0
        logger.debug("New game started (%s)", self.status)
        return self.status

    def load_grid(self, grid: Sequence[Sequence[bool]]) -> str:
        validate_grid(grid)
        self.grid = [list(bool(cell) for cell in row) for row in grid]
        self.moves = 0
        return self.status

    def toggle(self, coord: Coordinate) -> str:
        """Apply a move and return the resulting status.

        Moves made after the game is won are ignored.
        """

        if self.won:
            logger.debug("Ignoring toggle at %s, game already won", coord)
            return STATUS_WON
        self.grid = toggle_around(self.grid, coord)
        self.moves += 1
        status = self.status
        if status == STATUS_WON:
            logger.debug("Board cleared after %d moves", self.moves)
        return status

    def lit_cells(self) -> Set[Coordinate]:
        return lit_cells(self.grid)

    def lit_count(self) -> int:
        return lit_count(self.grid)


__all__ = [
    "Coordinate",
    "Grid",
    "InvalidCoordinate",
    "LightsOutGame",
    "STATUS_PLAYING",
    "STATUS_WON",
    "format_grid",
    "has_won",
    "initialize",
    "lit_cells",
    "lit_count",
    "parse_grid",
    "toggle_around",
    "validate_grid",
]
