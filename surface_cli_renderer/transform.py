#
# PROJECT: surface-cli-renderer
# MODULE: surface_cli_renderer/transform.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .point import Point, Rotation, Shape


def centroid(points):
    """Arithmetic mean of the point coordinates as an (x, y, z) tuple."""
    n = len(points)
    if n == 0:
        raise ValueError("centroid of an empty point set")
    cx = cy = cz = 0.0
    for p in points:
        cx += p.x
        cy += p.y
        cz += p.z
    return (cx / n, cy / n, cz / n)


def rotate_point(p: Point, rotation: Rotation, center) -> Point:
    """
    Rotate one point about `center`: roll about Z by C, then yaw about Y
    by B, then pitch about X by A. The order is fixed.
    """
    a = math.radians(rotation.a)
    b = math.radians(rotation.b)
    c = math.radians(rotation.c)
    return _rotate(p, center,
                   math.cos(a), math.sin(a),
                   math.cos(b), math.sin(b),
                   math.cos(c), math.sin(c))


def _rotate(p, center, c_a, s_a, c_b, s_b, c_c, s_c):
    x = p.x - center[0]
    y = p.y - center[1]
    z = p.z - center[2]

    # Z roll
    x1 = x * c_c - y * s_c
    y1 = x * s_c + y * c_c
    z1 = z

    # Y yaw
    x2 = x1 * c_b + z1 * s_b
    y2 = y1
    z2 = -x1 * s_b + z1 * c_b

    # X pitch
    x3 = x2
    y3 = y2 * c_a - z2 * s_a
    z3 = y2 * s_a + z2 * c_a

    return Point(x3 + center[0], y3 + center[1], z3 + center[2], p.glyph)


def rotate(shape: Shape) -> Shape:
    """
    Return a new Shape with every point rotated about the shape's centroid
    by shape.rotation. The input shape is left untouched.
    """
    result = Shape(rotation=shape.rotation.copy())
    if not shape.points:
        return result

    center = centroid(shape.points)
    rot = shape.rotation
    a = math.radians(rot.a)
    b = math.radians(rot.b)
    c = math.radians(rot.c)
    # Trig hoisted out of the per-point loop
    c_a, s_a = math.cos(a), math.sin(a)
    c_b, s_b = math.cos(b), math.sin(b)
    c_c, s_c = math.cos(c), math.sin(c)

    result.points = [_rotate(p, center, c_a, s_a, c_b, s_b, c_c, s_c)
                     for p in shape.points]
    return result
