#
# PROJECT: surface-cli-renderer
# MODULE: surface_cli_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import math
import sys
import time
import traceback

from .camera import Camera
from .canvas import Canvas
from .color import face_glyphs, parse_face_colors
from .config import RenderConfig
from .point import Shape
from .presenter import AnsiPresenter
from .renderer import Renderer
from .shapes import CUBE_GLYPHS, PYRAMID_GLYPHS
from .terminal import prompt_speed, query_size

# Degrees per frame per unit of speed, for the A (X), B (Y), C (Z) angles
ROTATION_RATES = (3.0, 1.0, 1.0)


class DemoApp:
    """
    Animation driver: owns the shape, camera and canvas and runs the
    advance -> render -> present -> wipe cycle once per frame.
    """

    def __init__(self, shape: Shape, camera: Camera, canvas: Canvas, presenter,
                 renderer: Renderer = None, speed: float = 3.0,
                 clock=time.time, max_frames=None):
        self.shape = shape
        self.camera = camera
        self.canvas = canvas
        self.presenter = presenter
        self.renderer = renderer if renderer is not None else Renderer()
        self.speed = speed
        self.clock = clock
        self.max_frames = max_frames
        self.frame_count = 0
        self.start_time = None

    def step(self):
        """Advance the simulation one frame and hand the frame to the presenter."""
        da, db, dc = ROTATION_RATES
        speed = self.speed
        self.shape.rotation.advance(da * speed, db * speed, dc * speed)

        self.camera.follow_path(self.clock() - self.start_time)

        self.renderer.render(self.canvas, self.shape, self.camera)
        self.presenter.present(self.canvas.to_text())

        # Prepare for next frame
        self.canvas.wipe()
        self.canvas.draw_axes(self.camera)
        self.frame_count += 1

    def run(self) -> int:
        """Loop until max_frames (forever when None). Returns frames drawn."""
        self.start_time = self.clock()
        self.canvas.wipe()
        self.canvas.draw_axes(self.camera)
        while self.max_frames is None or self.frame_count < self.max_frames:
            self.step()
        return self.frame_count


def build_shape(kind: str, size: float, density: float, glyphs) -> Shape:
    """Generate the solid and push it forward by twice its size along z."""
    if kind == 'cube':
        shape = Shape.cube(size, density, glyphs)
    elif kind == 'pyramid':
        shape = Shape.pyramid(size, density, glyphs)
    else:
        raise ValueError(f"unknown shape: {kind!r}")
    return shape.translated(0.0, 0.0, size * 2.0)


def build_app(args, environ=None, stdin=None, stdout=None, presenter=None) -> DemoApp:
    """Assemble a DemoApp from parsed command-line arguments."""
    # ── RenderConfig from terminal detection + CLI overrides ────────
    config = RenderConfig.detect_terminal(environ)
    if args.no_color or args.mono:
        config.use_color = False
    if args.fps is not None:
        config.fps = args.fps
    if args.density is not None:
        config.density = args.density
    if args.focal is not None:
        config.focal_length = args.focal
    if config.fps <= 0:
        raise ValueError(f"fps must be positive, got {config.fps}")

    # ── Screen dimensions, captured once ────────────────────────────
    cols, rows = query_size(config.default_width, config.default_height)
    canvas = Canvas(cols, rows, background=config.background)

    # ── Solid ───────────────────────────────────────────────────────
    plain = CUBE_GLYPHS if args.shape == 'cube' else PYRAMID_GLYPHS
    colors = parse_face_colors(args.face_colors)
    glyphs = face_glyphs(config.effective_color_mode, plain, colors)
    size = args.size if args.size is not None else max(1, cols // 5)
    shape = build_shape(args.shape, float(size), config.density, glyphs)

    camera = Camera(radius=config.camera_radius, speed=config.camera_speed,
                    min_z=config.camera_min_z)
    camera.z = config.camera_min_z

    speed = args.speed
    if speed is None:
        speed = prompt_speed(config.default_speed, stdin=stdin, stdout=stdout,
                             shape=args.shape)

    if presenter is None:
        presenter = AnsiPresenter(stdout, delay=config.frame_delay)

    return DemoApp(shape, camera, canvas, presenter,
                   renderer=Renderer(config.focal_length),
                   speed=speed, max_frames=args.frames)


def _finite_float(text):
    value = float(text)
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"expected a finite number, got {text!r}")
    return value


def parse_args(argv=None):
    """CLI argument parser."""
    epilog = """\
examples:
  %(prog)s                                   Spinning cube, asks for a speed
  %(prog)s --speed 5                         Skip the prompt
  %(prog)s --shape pyramid --density 0.5     Coarser pyramid
  %(prog)s --mono                            Plain characters instead of colors
  %(prog)s --face-colors #FF8800,#0088FF     Custom front and back faces
"""
    parser = argparse.ArgumentParser(
        description="Terminal point-cloud surface renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--shape", choices=("cube", "pyramid"), default="cube",
                        help="Solid to render (default: cube)")
    parser.add_argument("--size", type=float, default=None,
                        help="Edge length (default: terminal columns / 5)")
    parser.add_argument("--density", type=float, default=None,
                        help="Sampling step between surface points (default: 0.2)")
    parser.add_argument("--speed", type=_finite_float, default=None,
                        help="Rotation speed; prompts when omitted")
    parser.add_argument("--fps", type=float, default=None,
                        help="Target frames per second (default: 60)")
    parser.add_argument("--frames", type=int, default=None,
                        help="Stop after this many frames (default: run forever)")
    parser.add_argument("--focal", type=float, default=None,
                        help="Perspective focal length (default: 40)")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--mono", action="store_true",
                        help="Force monochrome output")
    parser.add_argument("--face-colors", default=None,
                        help="Comma-separated hex colors, one per face")
    return parser.parse_args(argv)


def main(args):
    app = build_app(args)
    app.presenter.hide_cursor()
    try:
        app.run()
    finally:
        app.presenter.close()


def cli(argv=None):
    """Console entry point."""
    args = parse_args(argv)
    try:
        main(args)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1
    return 0
