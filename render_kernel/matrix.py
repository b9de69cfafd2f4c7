#
# PROJECT: render-kernel
# MODULE: render_kernel/matrix.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Fixed-size square matrices.

Storage is ``m[row][col]`` and vectors are columns, so ``M @ v`` yields a
vector whose i-th component is ``dot(row(i), v)`` and ``A @ B`` applies
``B`` first. Every constructor, product and builder below uses that one
convention.
"""

import logging
import math

from .math_utils import EPSILON, Vec2, Vec3, Vec4

logger = logging.getLogger(__name__)


class _Matrix:
    """Behaviour shared by Mat2, Mat3 and Mat4. Subclasses set SIZE and VEC."""
    __slots__ = ('m',)
    SIZE = 0
    VEC = None

    def __init__(self, data=None):
        n = self.SIZE
        if data is None:
            object.__setattr__(self, 'm', tuple(tuple(0.0 for _ in range(n)) for _ in range(n)))
            return
        rows = [tuple(float(v) for v in row) for row in data]
        if len(rows) != n or any(len(row) != n for row in rows):
            raise ValueError(f"{type(self).__name__} expects {n}x{n} values")
        object.__setattr__(self, 'm', tuple(rows))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ── Construction ────────────────────────────────────────────────────
    @classmethod
    def zero(cls):
        return cls()

    @classmethod
    def identity(cls):
        n = cls.SIZE
        return cls([[1.0 if r == c else 0.0 for c in range(n)] for r in range(n)])

    @classmethod
    def from_rows(cls, rows):
        return cls(rows)

    @classmethod
    def from_cols(cls, cols):
        return cls(cols).transpose()

    def to_rows(self):
        return [list(row) for row in self.m]

    def to_cols(self):
        return self.transpose().to_rows()

    def row(self, r):
        return self.VEC(*self.m[r])

    def col(self, c):
        return self.VEC(*(row[c] for row in self.m))

    def __getitem__(self, r):
        return self.m[r]

    def __repr__(self):
        rows = ", ".join("[" + ", ".join(f"{v:g}" for v in row) + "]" for row in self.m)
        return f"{type(self).__name__}([{rows}])"

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return all(abs(a - b) < EPSILON
                   for ra, rb in zip(self.m, other.m) for a, b in zip(ra, rb))

    __hash__ = None

    # ── Algebra ─────────────────────────────────────────────────────────
    def transpose(self):
        return type(self)(zip(*self.m))

    def determinant(self) -> float:
        raise NotImplementedError

    def _adjugate(self):
        raise NotImplementedError

    def invert(self):
        """
        Inverse via adjugate / determinant.

        Returns None when the determinant is exactly 0.0; no tolerance is
        applied, so nearly singular matrices still invert.
        """
        det = self.determinant()
        if det == 0.0:
            logger.debug("%s is singular, no inverse", type(self).__name__)
            return None
        inv_det = 1.0 / det
        return type(self)([[v * inv_det for v in row] for row in self._adjugate()])

    def __add__(self, other):
        if isinstance(other, type(self)):
            return type(self)([[a + b for a, b in zip(ra, rb)]
                               for ra, rb in zip(self.m, other.m)])
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, type(self)):
            return type(self)([[a - b for a, b in zip(ra, rb)]
                               for ra, rb in zip(self.m, other.m)])
        return NotImplemented

    def __mul__(self, scalar):
        if isinstance(scalar, (int, float)):
            return type(self)([[v * scalar for v in row] for row in self.m])
        return NotImplemented

    __rmul__ = __mul__

    def __matmul__(self, other):
        n = self.SIZE
        if isinstance(other, type(self)):
            # Row of left dot column of right
            res = [[0.0] * n for _ in range(n)]
            for r in range(n):
                for c in range(n):
                    val = 0.0
                    for k in range(n):
                        val += self.m[r][k] * other.m[k][c]
                    res[r][c] = val
            return type(self)(res)
        if isinstance(other, self.VEC):
            return self.VEC(*(sum(a * b for a, b in zip(row, other)) for row in self.m))
        return NotImplemented


class Mat2(_Matrix):
    """2x2 matrix."""
    __slots__ = ()
    SIZE = 2
    VEC = Vec2

    def determinant(self) -> float:
        (a, b), (c, d) = self.m
        return a * d - b * c

    def _adjugate(self):
        (a, b), (c, d) = self.m
        return [[d, -b],
                [-c, a]]


class Mat3(_Matrix):
    """3x3 matrix."""
    __slots__ = ()
    SIZE = 3
    VEC = Vec3

    def determinant(self) -> float:
        (a, b, c), (d, e, f), (g, h, i) = self.m
        # Cofactor expansion along the first row
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    def _adjugate(self):
        (a, b, c), (d, e, f), (g, h, i) = self.m
        return [[e * i - f * h, c * h - b * i, b * f - c * e],
                [f * g - d * i, a * i - c * g, c * d - a * f],
                [d * h - e * g, b * g - a * h, a * e - b * d]]


class Mat4(_Matrix):
    """4x4 matrix for affine and projective transforms."""
    __slots__ = ()
    SIZE = 4
    VEC = Vec4

    # ── Affine builders ─────────────────────────────────────────────────
    @classmethod
    def translation(cls, x, y, z) -> 'Mat4':
        return cls([[1.0, 0.0, 0.0, x],
                    [0.0, 1.0, 0.0, y],
                    [0.0, 0.0, 1.0, z],
                    [0.0, 0.0, 0.0, 1.0]])

    @classmethod
    def scale(cls, sx, sy, sz) -> 'Mat4':
        return cls([[sx, 0.0, 0.0, 0.0],
                    [0.0, sy, 0.0, 0.0],
                    [0.0, 0.0, sz, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    @classmethod
    def rotation_x(cls, rad: float) -> 'Mat4':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls([[1.0, 0.0, 0.0, 0.0],
                    [0.0, c, -s, 0.0],
                    [0.0, s, c, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    @classmethod
    def rotation_y(cls, rad: float) -> 'Mat4':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls([[c, 0.0, s, 0.0],
                    [0.0, 1.0, 0.0, 0.0],
                    [-s, 0.0, c, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    @classmethod
    def rotation_z(cls, rad: float) -> 'Mat4':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls([[c, -s, 0.0, 0.0],
                    [s, c, 0.0, 0.0],
                    [0.0, 0.0, 1.0, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    # ── Projective builders ─────────────────────────────────────────────
    @classmethod
    def perspective(cls, fov_deg: float, aspect_ratio: float,
                    near: float, far: float) -> 'Mat4':
        """
        Projection from a vertical field of view in degrees.

        x is scaled by ``aspect_ratio * f``, so callers working from a
        width/height viewport pass ``height / width``. Output w equals the
        input z, ready for perspective division; depth maps ``near`` to 0
        and ``far`` to 1.
        """
        f = 1.0 / math.tan(math.radians(fov_deg) / 2.0)
        depth = far / (far - near)
        return cls([[aspect_ratio * f, 0.0, 0.0, 0.0],
                    [0.0, f, 0.0, 0.0],
                    [0.0, 0.0, depth, -far * near / (far - near)],
                    [0.0, 0.0, 1.0, 0.0]])

    @classmethod
    def look_at(cls, eye: Vec3, target: Vec3, up: Vec3) -> 'Mat4':
        """Right-handed view matrix; the camera looks down its -Z axis."""
        forward = (eye - target).normalize()
        right = up.cross(forward).normalize()
        true_up = forward.cross(right)
        return cls([[right.x, right.y, right.z, -right.dot(eye)],
                    [true_up.x, true_up.y, true_up.z, -true_up.dot(eye)],
                    [forward.x, forward.y, forward.z, -forward.dot(eye)],
                    [0.0, 0.0, 0.0, 1.0]])

    # ── Algebra ─────────────────────────────────────────────────────────
    def _pair_minors(self):
        # 2x2 minors of the top two rows (s) and the bottom two rows (c)
        (a00, a01, a02, a03), (a10, a11, a12, a13), \
            (a20, a21, a22, a23), (a30, a31, a32, a33) = self.m
        s = (a00 * a11 - a10 * a01,
             a00 * a12 - a10 * a02,
             a00 * a13 - a10 * a03,
             a01 * a12 - a11 * a02,
             a01 * a13 - a11 * a03,
             a02 * a13 - a12 * a03)
        c = (a20 * a31 - a30 * a21,
             a20 * a32 - a30 * a22,
             a20 * a33 - a30 * a23,
             a21 * a32 - a31 * a22,
             a21 * a33 - a31 * a23,
             a22 * a33 - a32 * a23)
        return s, c

    def determinant(self) -> float:
        s, c = self._pair_minors()
        return (s[0] * c[5] - s[1] * c[4] + s[2] * c[3]
                + s[3] * c[2] - s[4] * c[1] + s[5] * c[0])

    def _adjugate(self):
        (a00, a01, a02, a03), (a10, a11, a12, a13), \
            (a20, a21, a22, a23), (a30, a31, a32, a33) = self.m
        s, c = self._pair_minors()
        return [
            [a11 * c[5] - a12 * c[4] + a13 * c[3],
             -a01 * c[5] + a02 * c[4] - a03 * c[3],
             a31 * s[5] - a32 * s[4] + a33 * s[3],
             -a21 * s[5] + a22 * s[4] - a23 * s[3]],
            [-a10 * c[5] + a12 * c[2] - a13 * c[1],
             a00 * c[5] - a02 * c[2] + a03 * c[1],
             -a30 * s[5] + a32 * s[2] - a33 * s[1],
             a20 * s[5] - a22 * s[2] + a23 * s[1]],
            [a10 * c[4] - a11 * c[2] + a13 * c[0],
             -a00 * c[4] + a01 * c[2] - a03 * c[0],
             a30 * s[4] - a31 * s[2] + a33 * s[0],
             -a20 * s[4] + a21 * s[2] - a23 * s[0]],
            [-a10 * c[3] + a11 * c[1] - a12 * c[0],
             a00 * c[3] - a01 * c[1] + a02 * c[0],
             -a30 * s[3] + a31 * s[1] - a32 * s[0],
             a20 * s[3] - a21 * s[1] + a22 * s[0]],
        ]

    def mul_vec3(self, v: Vec3) -> Vec3:
        """Multiply with Vec3 as a point (w=1), dividing by the resulting w
        unless it is zero."""
        m = self.m
        x = m[0][0]*v.x + m[0][1]*v.y + m[0][2]*v.z + m[0][3]
        y = m[1][0]*v.x + m[1][1]*v.y + m[1][2]*v.z + m[1][3]
        z = m[2][0]*v.x + m[2][1]*v.y + m[2][2]*v.z + m[2][3]
        w = m[3][0]*v.x + m[3][1]*v.y + m[3][2]*v.z + m[3][3]
        if w != 0.0:
            return Vec3(x/w, y/w, z/w)
        return Vec3(x, y, z)

    def __matmul__(self, other):
        if isinstance(other, Vec3):
            return self.mul_vec3(other)
        return super().__matmul__(other)
