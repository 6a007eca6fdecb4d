"""Layout constants for the Lights Out UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

# Cell metrics
CELL_SIZE: int = 72
CELL_GAP: int = 6
BOARD_OUTER_PADDING: int = 32

# Status bar metrics
STATUS_BAR_HEIGHT: int = 56
STATUS_BAR_PADDING: int = 16

# Colors expressed as RGB tuples
BACKGROUND_COLOR: Tuple[int, int, int] = (12, 14, 26)
BOARD_BACKGROUND_COLOR: Tuple[int, int, int] = (20, 24, 44)
LIT_COLOR: Tuple[int, int, int] = (255, 200, 0)
UNLIT_COLOR: Tuple[int, int, int] = (50, 54, 76)
GRID_LINE_COLOR: Tuple[int, int, int] = (58, 64, 96)
TEXT_COLOR: Tuple[int, int, int] = (232, 236, 244)
ACCENT_COLOR: Tuple[int, int, int] = (255, 94, 0)
WIN_BACKGROUND_COLOR: Tuple[int, int, int] = (24, 60, 40)

WIN_MESSAGE = "You Win!"

# Rendering order for composed scenes
DRAW_ORDER = ("board", "status_bar")


@dataclass(frozen=True)
class BoardGeometry:
    """Pixel rectangles for the major UI regions."""

    board: Tuple[int, int, int, int]
    status_bar: Tuple[int, int, int, int]
    window: Tuple[int, int]
    cell_size: int
    gap: int

    def cell_rect(self, row: int, col: int) -> Tuple[int, int, int, int]:
        x = self.board[0] + self.gap + col * (self.cell_size + self.gap)
        y = self.board[1] + self.gap + row * (self.cell_size + self.gap)
        return (x, y, self.cell_size, self.cell_size)

    def cell_at(
        self, position: Tuple[int, int], rows: int, cols: int
    ) -> Optional[Tuple[int, int]]:
        """Map a pixel to the ``(row, col)`` under it, ignoring gaps and margins."""

        x, y = position
        board_x, board_y, _, _ = self.board
        pitch = self.cell_size + self.gap
        offset_x = x - board_x - self.gap
        offset_y = y - board_y - self.gap
        if offset_x < 0 or offset_y < 0:
            return None
        col, within_x = divmod(offset_x, pitch)
        row, within_y = divmod(offset_y, pitch)
        if within_x >= self.cell_size or within_y >= self.cell_size:
            return None
        if not (0 <= row < rows and 0 <= col < cols):
            return None
        return int(row), int(col)


def compute_geometry(
    rows: int,
    cols: int,
    *,
    cell_size: int = CELL_SIZE,
    gap: int = CELL_GAP,
    padding: int = BOARD_OUTER_PADDING,
) -> BoardGeometry:
    """Compute useful rectangles for rendering the game window."""

    board_width = cols * cell_size + (cols + 1) * gap
    board_height = rows * cell_size + (rows + 1) * gap

    board_x = padding
    board_y = padding

    status_x = board_x
    status_y = board_y + board_height + STATUS_BAR_PADDING

    window_width = board_x + board_width + padding
    window_height = status_y + STATUS_BAR_HEIGHT + padding

    return BoardGeometry(
        board=(board_x, board_y, board_width, board_height),
        status_bar=(status_x, status_y, board_width, STATUS_BAR_HEIGHT),
        window=(window_width, window_height),
        cell_size=cell_size,
        gap=gap,
    )
