#
# PROJECT: surface-cli-renderer
# MODULE: surface_cli_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

BACKGROUND = ' '
AXIS_VERTICAL = '|'
AXIS_HORIZONTAL = '-'
AXIS_ORIGIN = '+'


class Canvas:
    """
    Character frame buffer with a parallel depth buffer.

    grid is h rows of w glyph strings; z_buffer is flat, indexed y * w + x.
    Both are always reset together by wipe().
    """
    __slots__ = ['w', 'h', 'background', 'grid', 'z_buffer']

    def __init__(self, w, h, background=BACKGROUND):
        if w <= 0 or h <= 0:
            raise ValueError(f"canvas needs positive dimensions, got {w}x{h}")
        self.w, self.h = w, h
        self.background = background
        self.grid = []
        self.z_buffer = []
        self.wipe()

    def wipe(self):
        """Reset every cell to the background glyph and every depth to +inf."""
        w, h = self.w, self.h
        self.grid = [[self.background] * w for _ in range(h)]
        self.z_buffer = [math.inf] * (w * h)

    def draw_axes(self, camera):
        """
        Overlay reference axes through the projected origin: '|' down one
        column, '-' across one row, '+' where they cross. Off-screen axes
        are skipped.
        """
        w, h = self.w, self.h
        origin_x = int(w / 2.0 - camera.x)
        origin_y = int(h / 2.0 - camera.y)
        x_visible = 0 <= origin_x < w
        y_visible = 0 <= origin_y < h

        if x_visible:
            for row in self.grid:
                row[origin_x] = AXIS_VERTICAL
        if y_visible:
            self.grid[origin_y] = [AXIS_HORIZONTAL] * w
        if x_visible and y_visible:
            self.grid[origin_y][origin_x] = AXIS_ORIGIN

    def glyph_at(self, x, y):
        return self.grid[y][x]

    def depth_at(self, x, y):
        return self.z_buffer[y * self.w + x]

    def to_text(self) -> str:
        """Serialize row by row: cells concatenated, rows joined by newlines."""
        return '\n'.join(''.join(row) for row in self.grid)
