#
# PROJECT: surface-cli-renderer
# MODULE: surface_cli_renderer/shapes.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .point import Point

# front, back, right, left, top, bottom
CUBE_GLYPHS = ('@', '#', '%', '=', 'o', '~')
# base, then side faces back, right, front, left
PYRAMID_GLYPHS = ('#', '*', '+', 'x', '%')

# Absorbs float error in size / density so 24 / 0.2 still counts 120 steps
_STEP_EPS = 1e-9


def _check_args(size, density):
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    if density <= 0:
        raise ValueError(f"density must be positive, got {density}")


def sample_axis(start: float, length: float, step: float):
    """
    Values start, start+step, ... up to start+length inclusive.

    Count-based so that repeated float addition cannot drop the last sample.
    When step does not divide length the far boundary is not reached.
    """
    count = int(math.floor(length / step + _STEP_EPS)) + 1
    return [start + i * step for i in range(count)]


def generate_cube_surfaces(size: float, density: float, glyphs=None):
    """
    Sample the six faces of an axis-aligned cube of edge `size` centered at
    the origin. Each face is a regular grid at spacing `density` tagged with
    its own glyph. Edge and corner samples are repeated per face.
    """
    _check_args(size, density)
    glyphs = tuple(glyphs) if glyphs is not None else CUBE_GLYPHS
    if len(glyphs) != 6:
        raise ValueError(f"cube needs 6 face glyphs, got {len(glyphs)}")

    half = size / 2.0
    axis = sample_axis(-half, size, density)
    front, back, right, left, top, bottom = glyphs

    points = []
    for x in axis:
        for y in axis:
            points.append(Point(x, y, half, front))
    for x in axis:
        for y in axis:
            points.append(Point(x, y, -half, back))
    for z in axis:
        for y in axis:
            points.append(Point(half, y, z, right))
    for z in axis:
        for y in axis:
            points.append(Point(-half, y, z, left))
    for x in axis:
        for z in axis:
            points.append(Point(x, half, z, top))
    for x in axis:
        for z in axis:
            points.append(Point(x, -half, z, bottom))
    return points


def _fill_triangle(a, b, c, glyph, step):
    """Affine sweep a + t*(b-a) + s*(c-a) over t, s >= 0, t + s <= 1."""
    n = int(math.floor(1.0 / step + _STEP_EPS))
    abx, aby, abz = b[0] - a[0], b[1] - a[1], b[2] - a[2]
    acx, acy, acz = c[0] - a[0], c[1] - a[1], c[2] - a[2]

    points = []
    for i in range(n + 1):
        t = i * step
        for j in range(n - i + 1):
            s = j * step
            points.append(Point(a[0] + abx * t + acx * s,
                                a[1] + aby * t + acy * s,
                                a[2] + abz * t + acz * s,
                                glyph))
    return points


def generate_pyramid_surfaces(size: float, density: float, glyphs=None):
    """
    Sample a square pyramid: base of edge `size` on the y=0 plane and apex
    at (0, size, 0). The base is a grid, each side a triangle sweep.
    """
    _check_args(size, density)
    glyphs = tuple(glyphs) if glyphs is not None else PYRAMID_GLYPHS
    if len(glyphs) != 5:
        raise ValueError(f"pyramid needs 5 face glyphs, got {len(glyphs)}")

    half = size / 2.0
    base_glyph = glyphs[0]

    points = []
    axis = sample_axis(-half, size, density)
    for x in axis:
        for z in axis:
            points.append(Point(x, 0.0, z, base_glyph))

    back_left = (-half, 0.0, -half)
    back_right = (half, 0.0, -half)
    front_right = (half, 0.0, half)
    front_left = (-half, 0.0, half)
    apex = (0.0, size, 0.0)

    faces = [
        (back_left, back_right, glyphs[1]),    # back
        (back_right, front_right, glyphs[2]),  # right
        (front_right, front_left, glyphs[3]),  # front
        (front_left, back_left, glyphs[4]),    # left
    ]
    step = density / size
    for a, b, glyph in faces:
        points.extend(_fill_triangle(a, b, apex, glyph, step))
    return points
