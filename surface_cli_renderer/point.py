#
# PROJECT: surface-cli-renderer
# MODULE: surface_cli_renderer/point.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

class Point:
    """Immutable glyph-tagged 3D sample point."""
    __slots__ = ('x', 'y', 'z', 'glyph')

    def __init__(self, x: float, y: float, z: float, glyph: str = ''):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))
        object.__setattr__(self, 'glyph', glyph)

    def __setattr__(self, name, value):
        raise AttributeError("Point is immutable")

    def __repr__(self):
        return f"Point({self.x:.2f}, {self.y:.2f}, {self.z:.2f}, {self.glyph!r})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Point index out of range")

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y, self.z, self.glyph) == (other.x, other.y, other.z, other.glyph)

    def __hash__(self):
        return hash((self.x, self.y, self.z, self.glyph))

    def translated(self, dx: float, dy: float, dz: float) -> 'Point':
        return Point(self.x + dx, self.y + dy, self.z + dz, self.glyph)


class Rotation:
    """Euler angles in degrees: A about X, B about Y, C about Z."""
    __slots__ = ('a', 'b', 'c')

    def __init__(self, a: float = 0.0, b: float = 0.0, c: float = 0.0):
        self.a = a
        self.b = b
        self.c = c

    def __repr__(self):
        return f"Rotation({self.a:.2f}, {self.b:.2f}, {self.c:.2f})"

    def __eq__(self, other):
        if not isinstance(other, Rotation):
            return NotImplemented
        return (self.a, self.b, self.c) == (other.a, other.b, other.c)

    def advance(self, da: float, db: float, dc: float):
        """Accumulate angle deltas. No wraparound: sin/cos are periodic."""
        self.a += da
        self.b += db
        self.c += dc

    def copy(self) -> 'Rotation':
        return Rotation(self.a, self.b, self.c)


class Shape:
    """
    An ordered point cloud plus its current rotation.

    The points are the generated (unrotated) samples; the renderer rotates
    a copy by the cumulative angle every frame and never writes back.
    """

    def __init__(self, points=None, rotation: Rotation = None):
        self.points = list(points) if points else []
        self.rotation = rotation if rotation is not None else Rotation()

    def __len__(self):
        return len(self.points)

    def translated(self, dx: float, dy: float, dz: float) -> 'Shape':
        """Return a moved copy; the rotation is copied through."""
        return Shape([p.translated(dx, dy, dz) for p in self.points],
                     self.rotation.copy())

    @classmethod
    def cube(cls, size: float, density: float, glyphs=None) -> 'Shape':
        """Factory method for a sampled cube surface centered at the origin."""
        from .shapes import generate_cube_surfaces
        return cls(generate_cube_surfaces(size, density, glyphs))

    @classmethod
    def pyramid(cls, size: float, density: float, glyphs=None) -> 'Shape':
        """Factory method for a sampled square pyramid standing on y=0."""
        from .shapes import generate_pyramid_surfaces
        return cls(generate_pyramid_surfaces(size, density, glyphs))
