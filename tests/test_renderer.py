import math

from surface_cli_renderer.camera import Camera
from surface_cli_renderer.canvas import Canvas
from surface_cli_renderer.point import Point, Rotation, Shape
from surface_cli_renderer.renderer import Renderer
from surface_cli_renderer.shapes import CUBE_GLYPHS


def test_render_single_point(canvas, camera):
    shape = Shape([Point(0, 0, 40, 'X')], Rotation(45, 45, 45))
    assert Renderer().render(canvas, shape, camera) == 1
    assert canvas.glyph_at(40, 12) == 'X'


def test_render_cube_shows_front_face(camera):
    canvas = Canvas(120, 40)
    shape = Shape.cube(10, 0.25).translated(0, 0, 40)
    written = Renderer().render(canvas, shape, camera)
    assert written > 0
    visible = {cell for row in canvas.grid for cell in row} - {' '}
    # Unrotated cube viewed head-on: only the near (back, z=-h) face shows
    assert visible == {CUBE_GLYPHS[1]}
    assert min(canvas.z_buffer) == 15.0


def test_render_rotated_cube_shows_several_faces(camera):
    canvas = Canvas(120, 40)
    shape = Shape.cube(10, 0.25).translated(0, 0, 40)
    shape.rotation = Rotation(30, 40, 0)
    Renderer().render(canvas, shape, camera)
    visible = {cell for row in canvas.grid for cell in row} - {' '}
    assert len(visible) >= 2


def test_render_leaves_shape_untouched(canvas, camera):
    shape = Shape.cube(4, 1).translated(0, 0, 40)
    shape.rotation = Rotation(10, 20, 30)
    before = list(shape.points)
    Renderer().render(canvas, shape, camera)
    assert shape.points == before


def test_render_respects_focal_length(canvas, camera):
    shape = Shape([Point(5, 0, 40, 'X')])
    Renderer(focal=20.0).render(canvas, shape, camera)
    assert canvas.glyph_at(45, 12) == 'X'


def test_render_behind_camera_writes_nothing(canvas):
    shape = Shape.cube(4, 1)
    written = Renderer().render(canvas, shape, Camera(0, 0, 50))
    assert written == 0
    assert all(z == math.inf for z in canvas.z_buffer)
