import math

import pytest

from surface_cli_renderer.camera import Camera
from surface_cli_renderer.canvas import Canvas
from surface_cli_renderer.point import Point
from surface_cli_renderer.rasterizer import set_point


def test_new_canvas_is_blank(canvas):
    assert len(canvas.grid) == 24
    assert all(len(row) == 80 for row in canvas.grid)
    assert all(cell == ' ' for row in canvas.grid for cell in row)
    assert len(canvas.z_buffer) == 80 * 24
    assert all(z == math.inf for z in canvas.z_buffer)


def test_wipe_resets_both_buffers(canvas, camera):
    set_point(canvas, Point(0, 0, 40, 'X'), camera)
    set_point(canvas, Point(3, 3, 30, 'Y'), camera)
    canvas.draw_axes(camera)
    canvas.wipe()
    assert canvas.grid == [[' '] * 80 for _ in range(24)]
    assert canvas.z_buffer == [math.inf] * (80 * 24)


def test_wipe_is_idempotent(canvas):
    canvas.wipe()
    first = ([row[:] for row in canvas.grid], canvas.z_buffer[:])
    canvas.wipe()
    assert (canvas.grid, canvas.z_buffer) == first


def test_draw_axes_centered(canvas, camera):
    canvas.draw_axes(camera)
    assert canvas.grid[12][40] == '+'
    assert all(canvas.grid[y][40] == '|' for y in range(24) if y != 12)
    assert all(canvas.grid[12][x] == '-' for x in range(80) if x != 40)
    assert canvas.grid[0][0] == ' '
    # Axes are cosmetic: depth stays untouched
    assert all(z == math.inf for z in canvas.z_buffer)


def test_draw_axes_skips_off_screen_column(canvas):
    canvas.draw_axes(Camera(100.0, 0.0, 20.0))
    assert not any('|' in row or '+' in row for row in canvas.grid)
    assert canvas.grid[12] == ['-'] * 80


def test_draw_axes_skips_off_screen_row(canvas):
    canvas.draw_axes(Camera(0.0, -50.0, 20.0))
    assert not any('-' in row or '+' in row for row in canvas.grid)
    assert all(canvas.grid[y][40] == '|' for y in range(24))


def test_points_overwrite_axes(canvas, camera):
    canvas.draw_axes(camera)
    set_point(canvas, Point(0, 0, 40, 'X'), camera)
    assert canvas.grid[12][40] == 'X'


def test_to_text():
    c = Canvas(3, 2)
    c.grid[0][1] = 'a'
    c.grid[1][2] = '\033[101m \033[0m'
    assert c.to_text() == ' a \n  \033[101m \033[0m'


def test_to_text_has_one_line_per_row(canvas):
    lines = canvas.to_text().split('\n')
    assert len(lines) == 24
    assert all(len(line) == 80 for line in lines)


@pytest.mark.parametrize("w, h", [(0, 10), (10, 0), (-1, 5)])
def test_invalid_dimensions(w, h):
    with pytest.raises(ValueError):
        Canvas(w, h)


def test_custom_background():
    c = Canvas(4, 2, background='.')
    assert c.to_text() == '....\n....'
