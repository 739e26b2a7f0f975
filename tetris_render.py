"""
Render sink for the pygame front end.

Static art (grid, panel, preview frame) and per-type block sprites are built
once. Locked blocks live on a cached surface that is rebuilt only when the
board snapshot changes, and HUD text is re-rendered only when its value does.
"""
from __future__ import annotations
import pygame
from typing import Dict, Tuple

from tetris_board import Board, ghost_y
from tetris_game import Snapshot
from tetris_layout import Dims
from tetris_shapes import box_width, offsets, spawn_rows_above

COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102,224,255),
    "J": (106,119,255),
    "L": (255,158,94),
    "O": (255,224,102),
    "S": (94,224,142),
    "T": (200,119,255),
    "Z": (255,102,119),
}
BG = (10,13,34)
GRID = (40,50,90)
TEXT = (200,210,240)
DIM_TEXT = (165,175,215)

LEGEND = ("←/→ h/l  move", "↓ j  soft drop", "↑ x  rotate", "z  rotate back", "p  pause   q  quit")


class RenderAssets:
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.pv_cell = max(14, int(dims.cell * 0.75))
        self.pv_pos = (dims.panel_x + 12, dims.panel_y + 174)
        self.blocks = {t: self._block(col, dims.cell - 2) for t, col in COLORS.items()}
        self.ghosts = {t: self._outline(col, dims.cell - 8) for t, col in COLORS.items()}
        self.bg = self._background()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_rows = None
        self._text: Dict[str, Tuple[object, pygame.Surface]] = {}
        self._preview_type = None
        self._preview = None

    @staticmethod
    def _block(col, size):
        s = pygame.Surface((size, size)); s.fill(col)
        return s

    @staticmethod
    def _outline(col, size):
        s = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.rect(s, col, (0, 0, size, size), 2)
        return s

    def _background(self) -> pygame.Surface:
        d = self.dims
        bg = pygame.Surface((d.total_w, d.total_h)); bg.fill(BG)
        for x in range(d.cols + 1):
            X = d.board_x + x*d.cell
            pygame.draw.line(bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows + 1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.panel_h)
        pygame.draw.rect(bg, (21,25,53), panel)
        pygame.draw.rect(bg, (50,60,100), panel, 1)
        px, py = self.pv_pos
        frame = pygame.Rect(px - 6, py - 6, self.pv_cell*4 + 12, self.pv_cell*4 + 12)
        pygame.draw.rect(bg, (15,18,40), frame)
        pygame.draw.rect(bg, (55,65,110), frame, 1)
        legend_y = py + self.pv_cell*4 + 20
        for i, line in enumerate(LEGEND):
            bg.blit(self.font.render(line, True, DIM_TEXT), (d.panel_x + 12, legend_y + 20*i))
        return bg

    def _cell_pos(self, bx, by, inset):
        return (self.dims.board_x + bx*self.dims.cell + inset,
                self.dims.board_y + by*self.dims.cell + inset)

    def rebuild_board_surface(self, rows):
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(rows):
            for x, t in enumerate(row):
                if t:
                    self.board_surface.blit(self.blocks[t], (x*c + 1, y*c + 1))
        self._board_rows = rows

    def text(self, key: str, value) -> pygame.Surface:
        cached = self._text.get(key)
        if cached is None or cached[0] != value:
            cached = (value, self.font.render(f"{key}: {value}", True, TEXT))
            self._text[key] = cached
        return cached[1]

    def preview(self, t: str) -> pygame.Surface:
        if t != self._preview_type:
            s = pygame.Surface((self.pv_cell*4, self.pv_cell*4), pygame.SRCALPHA)
            ox = (4 - box_width(t)) // 2
            oy = 1 - spawn_rows_above(t)
            block = self._block(COLORS[t], self.pv_cell - 2)
            for x, y in offsets(t, 0):
                s.blit(block, ((x + ox)*self.pv_cell + 1, (y + oy)*self.pv_cell + 1))
            self._preview_type, self._preview = t, s
        return self._preview

    def draw(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        screen.blit(self.bg, (0,0))
        if snap.board != self._board_rows:
            self.rebuild_board_surface(snap.board)
        screen.blit(self.board_surface, (d.board_x, d.board_y))

        piece = snap.piece
        if not snap.game_over:
            probe = Board(d.cols, d.rows)
            probe.cells = [list(r) for r in snap.board]
            ghost = piece.moved(0, ghost_y(probe, piece) - piece.y)
            for bx, by in ghost.cells():
                if by >= 0: screen.blit(self.ghosts[piece.t], self._cell_pos(bx, by, 4))
            for bx, by in piece.cells():
                if by >= 0: screen.blit(self.blocks[piece.t], self._cell_pos(bx, by, 1))

        x = d.panel_x + 12
        lines = (("Score", snap.score), ("Level", snap.level),
                 ("Lines", snap.cleared_lines), ("High", snap.highscore))
        for i, (key, value) in enumerate(lines):
            screen.blit(self.text(key, value), (x, d.panel_y + 20 + 24*i))
        screen.blit(self.text("Next", ""), (x, d.panel_y + 150))
        screen.blit(self.preview(snap.next_type), self.pv_pos)
