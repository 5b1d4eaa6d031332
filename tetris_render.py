"""
Rendering helpers for the Tetris front-end.

- Pre-render one cell Surface per color token (solid + ghost outline) and blit them.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all *locked* blocks; rebuild it only when the
  snapshot's board differs from the last one drawn.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from tetris_board import ghost_y
from tetris_game import Snapshot
from tetris_layout import Dims
from tetris_piece import COLS, ROWS

# RGB per color token carried by the shape catalog
COLORS: Dict[str, Tuple[int,int,int]] = {
    "cyan":   (102,224,255),
    "yellow": (255,224,102),
    "purple": (200,119,255),
    "green":  (94,224,142),
    "red":    (255,102,119),
    "orange": (255,158,94),
    "blue":   (106,119,255),
}

CONTROLS = (
    "<- -> Move",
    "Up Rotate",
    "Down Soft drop",
    "Space Hard drop",
    "P Pause / Start",
    "R Restart",
    "Esc Quit",
)

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._drawn_board = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        self.panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), self.panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), self.panel_rect, 1)

    # ---------- Small cell sprites (solid + ghost outline) ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for token, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[token] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[token] = g

    # ---------- Board surface cache ----------
    def sync_board_surface(self, board):
        """Rebuild the locked-blocks surface if the board changed since last draw."""
        if board == self._drawn_board:
            return
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(board):
            for x, token in enumerate(row):
                if token:
                    self.board_surface.blit(self.cell_surf[token], (x*c + 1, y*c + 1))
        self._drawn_board = board

    # ---------- Per-cell helpers for moving/ghost piece ----------
    def draw_cell(self, screen: pygame.Surface, token: str, bx: int, by: int):
        rx = self.dims.board_x + bx*self.dims.cell + 1
        ry = self.dims.board_y + by*self.dims.cell + 1
        screen.blit(self.cell_surf[token], (rx, ry))

    def draw_ghost_cell(self, screen: pygame.Surface, token: str, bx: int, by: int):
        rx = self.dims.board_x + bx*self.dims.cell + 4
        ry = self.dims.board_y + by*self.dims.cell + 4
        screen.blit(self.ghost_surf[token], (rx, ry))

    # ---------- Full frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot):
        screen.blit(self.bg, (0,0))
        self.sync_board_surface(snap.board)
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        piece = snap.piece
        if piece is not None:
            token = piece.shape.color
            if not snap.game_over:
                gy = ghost_y(snap.board, piece)
                for c, r in piece.shape.blocks():
                    if gy + r >= 0:
                        self.draw_ghost_cell(screen, token, piece.x + c, gy + r)
            for x, y in piece.cells():
                if 0 <= y < ROWS:
                    self.draw_cell(screen, token, x, y)
        self.draw_panel_hud(screen, snap.score, snap.level, snap.lines)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int, level: int, lines: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, (200,210,240))
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, (200,210,240))
        if level != self.hud.level:
            self.hud.level = level
            self.hud.level_s = f.render(f"Level: {level}", True, (200,210,240))
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 92))
        if not self.hud.controls:
            self.hud.controls = [f.render("Controls:", True, (200,210,240))]
            self.hud.controls += [f.render(line, True, (165,175,215)) for line in CONTROLS]
        y = d.panel_y + 140
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
