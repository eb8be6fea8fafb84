# termsnake/viz/renderer_pygame.py
from __future__ import annotations
import pygame as pg
from typing import List, Optional
from termsnake.config import AppConfig
from termsnake.core.interfaces import Snapshot
from termsnake.viz.renderer_curses import status_lines
import termsnake.viz.renderer_colors as theme

HUD_LINE_PX = 20

class PygameRenderer:
    """Window front end. Board cells sit inside a one-cell border; status text below."""

    def __init__(self):
        self.cell = 24
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self._auto_flip = True
        self._font: Optional[pg.font.Font] = None

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode(self.window_size(cfg))
        self._auto_flip = True

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw onto an existing surface (no window, no flip)."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.cell = cfg.render_cell
        self.surf = surface
        self._auto_flip = False

    def window_size(self, cfg: AppConfig) -> tuple[int, int]:
        c = cfg.render_cell
        hud = HUD_LINE_PX * 5 + 8
        return ((cfg.grid_w + 2) * c, (cfg.grid_h + 2) * c + hud)

    def cell_rect(self, x: int, y: int) -> pg.Rect:
        """Pixel rect of board cell (x, y); the border ring is at -1 and grid_w/grid_h."""
        c = self.cell
        return pg.Rect((x + 1) * c, (y + 1) * c, c, c)

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf

        surf.fill(theme.BG)

        for x in range(-1, s.grid_w + 1):
            pg.draw.rect(surf, theme.BORDER, self.cell_rect(x, -1))
            pg.draw.rect(surf, theme.BORDER, self.cell_rect(x, s.grid_h))
        for y in range(s.grid_h):
            pg.draw.rect(surf, theme.BORDER, self.cell_rect(-1, y))
            pg.draw.rect(surf, theme.BORDER, self.cell_rect(s.grid_w, y))

        for i, (x, y) in enumerate(s.snake):
            col = theme.HEAD if i == 0 else theme.BODY
            pg.draw.rect(surf, col, self.cell_rect(x, y))

        if s.food is not None:
            pg.draw.rect(surf, theme.FOOD, self.cell_rect(*s.food))

        for ox, oy in s.obstacles:
            pg.draw.rect(surf, theme.OBSTACLE, self.cell_rect(ox, oy))

        self._draw_hud(status_lines(s), top=(s.grid_h + 2) * self.cell + 4)

        if self._auto_flip:
            pg.display.flip()

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self._font = None

    # internals
    def _draw_hud(self, lines: List[str], top: int) -> None:
        assert self.surf is not None
        if self._font is None:
            self._font = pg.font.SysFont(None, 22)
        for i, line in enumerate(lines):
            txt = self._font.render(line, True, theme.TEXT)
            self.surf.blit(txt, (6, top + i * HUD_LINE_PX))
