#
# PROJECT: surface-cli-renderer
# MODULE: surface_cli_renderer/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math


class Camera:
    """
    Camera position for the surface renderer.

    There is no view matrix: the rasterizer only subtracts this position
    from each point before the perspective divide. x and y stay at 0 while
    z moves along a fixed back-and-forth path.
    """
    __slots__ = ('x', 'y', 'z', 'radius', 'speed', 'min_z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 20.0,
                 radius: float = 50.0, speed: float = 1.0, min_z: float = 20.0):
        self.x = x
        self.y = y
        self.z = z
        self.radius = radius  # Peak distance of the path
        self.speed = speed    # Angular speed (rad/s)
        self.min_z = min_z    # Closest the path may come

    def __repr__(self):
        return f"Camera({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def path_z(self, t: float) -> float:
        """Camera z at `t` seconds: radius*|sin(speed*t)|, floored at min_z."""
        return max(self.min_z, self.radius * abs(math.sin(self.speed * t)))

    def follow_path(self, t: float):
        """Move the camera to its path position at `t` seconds."""
        self.z = self.path_z(t)
