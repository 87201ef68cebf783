#
# PROJECT: surface-cli-renderer
# MODULE: surface_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .point import Point, Rotation, Shape
from .shapes import generate_cube_surfaces, generate_pyramid_surfaces
from .transform import centroid, rotate, rotate_point
from .camera import Camera
from .canvas import Canvas
from .rasterizer import project, set_point
from .renderer import Renderer
from .config import RenderConfig
from .color import parse_hex_color
from .presenter import AnsiPresenter
from .demo import DemoApp
