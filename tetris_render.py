
"""
Rendering helpers for the pygame front end.

- Pre-render the static background (grid + side panel) once per board size.
- Pre-render one block sprite; merged cells carry no piece identity, so every
  block is drawn the same.
- Cache the score text and the next-piece preview; re-render only on change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Optional, Tuple
from tetris_engine import Snapshot
from tetris_piece import Shape

BLOCK_COLOR: Tuple[int,int,int] = (175,190,255)
BLOCK_EDGE: Tuple[int,int,int] = (60,70,120)
TEXT_COLOR: Tuple[int,int,int] = (200,210,240)

MARGIN = 16
PANEL_W = 180

@dataclass
class HudCache:
    score: int = -1
    next_shape: Optional[Shape] = None
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting.

    Board on the left, side panel on the right, MARGIN around and between.
    """
    def __init__(self, font: pygame.font.Font, cols: int, rows: int, cell: int):
        self.font = font
        self.cols = cols
        self.rows = rows
        self.cell = cell
        self.board_rect = pygame.Rect(MARGIN, MARGIN, cols*cell, rows*cell)
        self.panel_rect = pygame.Rect(self.board_rect.right + MARGIN, MARGIN, PANEL_W, rows*cell)
        self.size = (self.panel_rect.right + MARGIN, self.board_rect.bottom + MARGIN)
        self._make_static()
        self._make_block()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        b, p = self.board_rect, self.panel_rect
        self.bg = pygame.Surface(self.size)
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(self.cols+1):
            X = b.x + x*self.cell
            pygame.draw.line(self.bg, grid_col, (X, b.top), (X, b.bottom))
        for y in range(self.rows+1):
            Y = b.y + y*self.cell
            pygame.draw.line(self.bg, grid_col, (b.left, Y), (b.right, Y))
        pygame.draw.rect(self.bg, (21,25,53), p)
        pygame.draw.rect(self.bg, (50,60,100), p, 1)
        # Next preview frame
        self.pv_cell = max(14, int(self.cell*0.75))
        self.pv_pos = (p.x + 12, p.y + 110)
        frame = pygame.Rect(self.pv_pos[0]-6, self.pv_pos[1]-6, self.pv_cell*4+12, self.pv_cell*4+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    def _make_block(self):
        c = self.cell
        self.block = pygame.Surface((c-2, c-2))
        self.block.fill(BLOCK_COLOR)
        pygame.draw.rect(self.block, BLOCK_EDGE, (0,0,c-2,c-2), 1)
        pc = self.pv_cell
        self.pv_block = pygame.Surface((pc-2, pc-2))
        self.pv_block.fill(BLOCK_COLOR)
        pygame.draw.rect(self.pv_block, BLOCK_EDGE, (0,0,pc-2,pc-2), 1)

    # ---------- Board + active piece ----------
    def draw_cell(self, screen: pygame.Surface, bx: int, by: int):
        screen.blit(self.block, (self.board_rect.x + bx*self.cell + 1, self.board_rect.y + by*self.cell + 1))

    def draw_frame(self, screen: pygame.Surface, snap: Snapshot):
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(snap.board):
            for x, v in enumerate(row):
                if v: self.draw_cell(screen, x, y)
        ox, oy = snap.active_offset
        for r, row in enumerate(snap.active_shape):
            for c, v in enumerate(row):
                if v: self.draw_cell(screen, ox + c, oy + r)
        self.draw_panel_hud(screen, snap.score, snap.next_shape)

    # ---------- HUD / Panel ----------
    def _render_preview(self, shape: Shape) -> pygame.Surface:
        s = pygame.Surface((self.pv_cell*4, self.pv_cell*4), pygame.SRCALPHA)
        offx = (4 - len(shape[0])) // 2
        offy = max(0, (4 - len(shape)) // 2)
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    s.blit(self.pv_block, ((x + offx) * self.pv_cell + 1, (y + offy) * self.pv_cell + 1))
        return s

    def draw_panel_hud(self, screen: pygame.Surface, score: int, next_shape: Shape):
        p = self.panel_rect
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT_COLOR)
        if next_shape != self.hud.next_shape:
            self.hud.next_shape = next_shape
            self.hud.next_label = self._render_preview(next_shape)
        screen.blit(self.hud.title, (p.x + 12, p.y + 12))
        if self.hud.score_s: screen.blit(self.hud.score_s, (p.x + 12, p.y + 44))
        nl = f.render("Next:", True, TEXT_COLOR)
        screen.blit(nl, (p.x + 12, p.y + 80))
        if self.hud.next_label:
            screen.blit(self.hud.next_label, self.pv_pos)
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT_COLOR),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Soft drop", True, (165,175,215)),
                f.render("↑ Rotate", True, (165,175,215)),
                f.render("Esc Pause", True, (165,175,215)),
                f.render("Enter Restart", True, (165,175,215)),
                f.render("M Music", True, (165,175,215)),
            ]
        y = p.y + 110 + self.pv_cell*4 + 24
        for surf in self.hud.controls:
            screen.blit(surf, (p.x + 12, y)); y += 20
