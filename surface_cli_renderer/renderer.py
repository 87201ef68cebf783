#
# PROJECT: surface-cli-renderer
# MODULE: surface_cli_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .canvas import Canvas
from .camera import Camera
from .point import Shape
from .rasterizer import FOCAL_LENGTH, set_point
from .transform import rotate


class Renderer:
    """
    Point-cloud renderer.

    render(canvas, shape, camera) draws one frame into the canvas. It does
    not wipe or present; the driver owns the frame cycle:

      1. Rotate the original points by the shape's cumulative rotation
      2. Project + depth-test every rotated point into the canvas
    """

    def __init__(self, focal: float = FOCAL_LENGTH):
        self.focal = focal

    def render(self, canvas: Canvas, shape: Shape, camera: Camera) -> int:
        """Rasterize `shape` and return the number of cell writes."""
        rotated = rotate(shape)
        focal = self.focal
        written = 0
        for p in rotated.points:
            if set_point(canvas, p, camera, focal):
                written += 1
        return written
