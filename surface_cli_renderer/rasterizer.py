#
# PROJECT: surface-cli-renderer
# MODULE: surface_cli_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .canvas import Canvas

FOCAL_LENGTH = 40.0


def project(p, camera, w, h, focal=FOCAL_LENGTH):
    """
    Map a world-space point to (screen_x, screen_y, depth).

    Y is flipped (rows grow downward) and halved because terminal cells are
    about twice as tall as they are wide. Returns None when the point is at
    or behind the camera plane. The result may lie outside the screen.
    """
    x = p.x - camera.x
    y = -(p.y - camera.y) / 2.0
    z = p.z - camera.z

    if z <= 0:
        return None

    scale = focal / z
    # int() truncates toward zero
    screen_x = int(x * scale) + w // 2
    screen_y = int(y * scale) + h // 2
    return screen_x, screen_y, z


def set_point(canvas: Canvas, p, camera, focal=FOCAL_LENGTH) -> bool:
    """
    Project one point and plot its glyph with a depth test.

    Strict less-than: among equal depths the first point written keeps the
    cell. Returns True when the cell was overwritten.
    """
    w, h = canvas.w, canvas.h
    projected = project(p, camera, w, h, focal)
    if projected is None:
        return False

    screen_x, screen_y, z = projected
    if screen_x < 0 or screen_x >= w or screen_y < 0 or screen_y >= h:
        return False

    index = screen_y * w + screen_x
    if z < canvas.z_buffer[index]:
        canvas.z_buffer[index] = z
        canvas.grid[screen_y][screen_x] = p.glyph
        return True
    return False
