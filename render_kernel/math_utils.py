#
# PROJECT: render-kernel
# MODULE: render_kernel/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

# Absolute per-component tolerance for vector and matrix equality.
EPSILON = 1e-6


def ieee_div(a: float, b: float) -> float:
    """Float division giving inf/nan for a zero divisor instead of raising."""
    if b != 0.0:
        return a / b
    if math.isnan(a) or a == 0.0:
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


class _Vector:
    """
    Shared arithmetic for the fixed-size vectors.

    Every operation returns a new vector; subclasses only declare their
    component slots and constructor.
    """
    __slots__ = ()

    def _assign(self, *values):
        for name, value in zip(self.__slots__, values):
            object.__setattr__(self, name, float(value))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __iter__(self):
        for name in self.__slots__:
            yield getattr(self, name)

    def __len__(self):
        return len(self.__slots__)

    def __getitem__(self, index):
        if not -len(self.__slots__) <= index < len(self.__slots__):
            raise IndexError(f"{type(self).__name__} index out of range")
        return getattr(self, self.__slots__[index])

    def __repr__(self):
        inner = ", ".join(f"{c:.2f}" for c in self)
        return f"{type(self).__name__}({inner})"

    def __str__(self):
        return "(" + ", ".join(str(c) for c in self) + ")"

    @classmethod
    def from_iterable(cls, values):
        values = [float(v) for v in values]
        if len(values) != len(cls.__slots__):
            raise ValueError(f"{cls.__name__} expects {len(cls.__slots__)} "
                             f"components, got {len(values)}")
        return cls(*values)

    def to_tuple(self):
        return tuple(self)

    def _map(self, other, op):
        if isinstance(other, type(self)):
            return type(self)(*(op(a, b) for a, b in zip(self, other)))
        if isinstance(other, (int, float)):
            return type(self)(*(op(a, other) for a in self))
        return NotImplemented

    def __add__(self, other):
        return self._map(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._map(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._map(other, lambda a, b: a * b)

    def __rmul__(self, scalar):
        if isinstance(scalar, (int, float)):
            return self * scalar
        return NotImplemented

    def __truediv__(self, other):
        return self._map(other, ieee_div)

    def __neg__(self):
        return type(self)(*(-c for c in self))

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return all(abs(a - b) < EPSILON for a, b in zip(self, other))

    __hash__ = None

    def dot(self, other) -> float:
        return sum(a * b for a, b in zip(self, other))

    def magnitude_squared(self) -> float:
        return self.dot(self)

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self):
        """Unit vector in the same direction; the zero vector is returned as-is."""
        nor2 = self.dot(self)
        if nor2 > 0.0:
            return self / math.sqrt(nor2)
        return type(self)(*self)

    def lerp(self, other, t: float):
        return self + (other - self) * t


class Vec2(_Vector):
    """Immutable 2-component vector."""
    __slots__ = ('x', 'y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._assign(x, y)


class Vec3(_Vector):
    """Immutable 3-component vector."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._assign(x, y, z)

    @classmethod
    def from_vec4(cls, v: 'Vec4') -> 'Vec3':
        return cls(v.x, v.y, v.z)

    def cross(self, other: 'Vec3') -> 'Vec3':
        """Right-handed cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def transform(self, mat) -> 'Vec3':
        """Transform as a homogeneous point (w=1) by a 4x4 matrix."""
        return mat.mul_vec3(self)


class Vec4(_Vector):
    """Immutable 4-component vector, usually a homogeneous coordinate."""
    __slots__ = ('x', 'y', 'z', 'w')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0,
                 w: float = 0.0):
        self._assign(x, y, z, w)

    @classmethod
    def from_vec3(cls, v: Vec3, w: float = 1.0) -> 'Vec4':
        return cls(v.x, v.y, v.z, w)
