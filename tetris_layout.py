"""Pixel geometry of the window: board on the left, info panel on the right"""
from dataclasses import dataclass

from tetris_config import CONFIG

MARGIN = 16
PANEL_W = 220
# rows of cells the panel needs for HUD, preview and legend
PANEL_MIN_CELLS = 16


@dataclass(frozen=True)
class Dims:
    cols: int
    rows: int
    cell: int

    @property
    def margin(self): return MARGIN

    @property
    def board_x(self): return MARGIN

    @property
    def board_y(self): return MARGIN

    @property
    def board_w(self): return self.cols * self.cell

    @property
    def board_h(self): return self.rows * self.cell

    @property
    def panel_x(self): return self.board_x + self.board_w + MARGIN

    @property
    def panel_y(self): return MARGIN

    @property
    def panel_w(self): return PANEL_W

    @property
    def panel_h(self): return max(self.rows, PANEL_MIN_CELLS) * self.cell

    @property
    def total_w(self): return self.panel_x + PANEL_W + MARGIN

    @property
    def total_h(self): return MARGIN + self.panel_h + MARGIN


def compute_dims(cols: int, rows: int) -> Dims:
    return Dims(cols=cols, rows=rows, cell=int(CONFIG["CELL_SIZE"]))
