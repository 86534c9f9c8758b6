"""
Rendering helpers for the Tetris project.

Draws one ``State`` per call and reads nothing back into the engine:
- Pre-render the static background (grid + panel frames) once per Dims.
- Pre-render a block cell Surface per piece color and blit it.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tetris_board import shape_cells
from tetris_config import CONFIG
from tetris_layout import Dims, PREVIEW_COLS, PREVIEW_ROWS
from tetris_piece import Tetromino
from tetris_state import State

# RGB per piece color tag
COLORS: Dict[str, Tuple[int,int,int]] = {
    "cyan": (102,224,255),
    "blue": (106,119,255),
    "orange": (255,158,94),
    "yellow": (255,224,102),
    "green": (94,224,142),
    "purple": (200,119,255),
    "red": (255,102,119),
}

TEXT = (200,210,240)


@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    high_score: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    high_s: Optional[pygame.Surface] = None
    labels: Optional[list] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(CONFIG["GRID_WIDTH"]+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(CONFIG["GRID_HEIGHT"]+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        # Next preview and hold frames
        for bx, by in ((d.preview_x, d.preview_y), (d.hold_x, d.hold_y)):
            frame = pygame.Rect(bx, by, PREVIEW_COLS*d.cell, PREVIEW_ROWS*d.cell)
            pygame.draw.rect(self.bg, (15,18,40), frame)
            pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Small cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for name, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[name] = s

    def _blit_cell(self, screen: pygame.Surface, color: str, px: float, py: float):
        screen.blit(self.cell_surf[color], (int(px) + 1, int(py) + 1))

    def draw_tetromino(self, screen: pygame.Surface, piece: Tetromino, origin_x: int, origin_y: int,
                       anchor: Optional[Tuple[float, float]] = None):
        """Draw a piece on a board whose top-left is origin.

        With ``anchor`` the piece is drawn at that cell offset instead of its
        own position (preview and hold boxes)."""
        c = self.dims.cell
        ox, oy = piece.position.x, piece.position.y
        ax, ay = anchor if anchor is not None else (ox, oy)
        for x, y in shape_cells(piece):
            self._blit_cell(screen, piece.color, origin_x + (x - ox + ax)*c, origin_y + (y - oy + ay)*c)

    def draw_grid(self, screen: pygame.Surface, grid):
        d = self.dims
        for y, row in enumerate(grid):
            for x, color in enumerate(row):
                if color is not None:
                    self._blit_cell(screen, color, d.board_x + x*d.cell, d.board_y + y*d.cell)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int, level: int, high_score: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT)
        if level != self.hud.level:
            self.hud.level = level
            self.hud.level_s = f.render(f"Level: {level}", True, TEXT)
        if high_score != self.hud.high_score:
            self.hud.high_score = high_score
            self.hud.high_s = f.render(f"High score: {high_score}", True, TEXT)
        if not self.hud.labels:
            self.hud.labels = [f.render("Next:", True, TEXT), f.render("Hold:", True, TEXT)]
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 36))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 56))
        screen.blit(self.hud.high_s, (d.panel_x + 12, d.panel_y + 76))
        screen.blit(self.hud.labels[0], (d.preview_x + 6, d.preview_y - 18))
        screen.blit(self.hud.labels[1], (d.hold_x + 6, d.hold_y - 18))

    def draw_game_over(self, screen: pygame.Surface):
        d = self.dims
        msg = self.big_font.render("GAME OVER", True, (255,220,220))
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        screen.blit(msg, rect)

    def render(self, screen: pygame.Surface, s: State):
        d = self.dims
        screen.blit(self.bg, (0,0))
        self.draw_grid(screen, s.grid)
        self.draw_tetromino(screen, s.current_tetromino, d.board_x, d.board_y)
        self.draw_tetromino(screen, s.next_tetromino, d.preview_x, d.preview_y,
                            (CONFIG["PREVIEW_X"], CONFIG["PREVIEW_Y"]))
        if s.held_tetromino is not None:
            self.draw_tetromino(screen, s.held_tetromino, d.hold_x, d.hold_y,
                                (CONFIG["HOLD_X"], CONFIG["HOLD_Y"]))
        self.draw_panel_hud(screen, s.score, s.level, s.high_score)
        if s.game_end:
            self.draw_game_over(screen)
