#
# PROJECT: render-kernel
# MODULE: render_kernel/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .math_utils import Vec3
from .matrix import Mat4

# look_at produces a view space looking down -Z while perspective expects
# positive depth, so view z is flipped between the two.
_FLIP_Z = Mat4.scale(1.0, 1.0, -1.0)


class Camera:
    """
    Orbital camera around the world origin.

    Stores orbital rotation angles (pitch/yaw), distance from the target,
    field-of-view and near/far clip planes, and builds the view and
    projection matrices from them.
    """
    __slots__ = ('pitch', 'yaw', 'distance', 'fov', 'near', 'far', 'target', 'up')

    def __init__(self, fov: float = 60.0, distance: float = 6.0,
                 near: float = 0.1, far: float = 150.0):
        self.pitch = 0.0         # Rotation around X axis (radians)
        self.yaw = 0.0           # Rotation around Y axis (radians)
        self.distance = distance
        self.fov = fov           # Vertical field of view (degrees)
        self.near = near
        self.far = far
        self.target = Vec3(0.0, 0.0, 0.0)
        self.up = Vec3(0.0, 1.0, 0.0)

    def orbit(self, dyaw: float, dpitch: float):
        """Adjust orbital angles by delta (radians). Pitch stays short of the poles."""
        self.yaw += dyaw
        limit = math.pi / 2 - 0.01
        self.pitch = max(-limit, min(limit, self.pitch + dpitch))

    def zoom(self, delta: float):
        """Adjust camera distance. Positive = further, negative = closer."""
        self.distance = max(0.5, self.distance + delta)

    def adjust_fov(self, delta: float):
        """Adjust field of view by delta degrees, clamped to [10, 170]."""
        self.fov = max(10, min(170, self.fov + delta))

    def eye(self) -> Vec3:
        """World-space camera position for the current orbit."""
        cp = math.cos(self.pitch)
        offset = Vec3(cp * math.sin(self.yaw),
                      math.sin(self.pitch),
                      cp * math.cos(self.yaw))
        return self.target + offset * self.distance

    def view_matrix(self) -> Mat4:
        return Mat4.look_at(self.eye(), self.target, self.up)

    def projection_matrix(self, width: int, height: int) -> Mat4:
        # perspective() multiplies x by its aspect argument
        return Mat4.perspective(self.fov, height / width, self.near, self.far)

    def view_projection(self, width: int, height: int) -> Mat4:
        return self.projection_matrix(width, height) @ _FLIP_Z @ self.view_matrix()

    def project(self, point: Vec3, width: int, height: int, view_proj=None):
        """
        Project a world-space point to screen space.

        Returns (sx, sy, depth) with depth in [0, 1], or None when the
        point lies outside the near/far range. Pass a precomputed
        view_proj when projecting many points.
        """
        view_z = -(self.view_matrix() @ point).z
        if view_z < self.near or view_z > self.far:
            return None
        if view_proj is None:
            view_proj = self.view_projection(width, height)
        ndc = view_proj @ point
        sx = (ndc.x * 0.5 + 0.5) * width
        sy = (1.0 - (ndc.y * 0.5 + 0.5)) * height
        return (sx, sy, ndc.z)
