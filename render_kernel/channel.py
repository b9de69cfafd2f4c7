#
# PROJECT: render-kernel
# MODULE: render_kernel/channel.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

# Two channels compare equal when their clamped values differ by less than
# one 8-bit quantization step.
CHANNEL_TOLERANCE = 0.004

# Absorbs the rounding error of v / 255 * 255 before truncation.
_U8_BIAS = 1e-6


def _clamp(value: float) -> float:
    # NaN carries no intensity
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


class Channel:
    """
    A single color component holding a light intensity.

    Arithmetic runs on the raw float, which may leave [0, 1]; the value is
    clamped only when compared or narrowed to a byte or float.
    """
    __slots__ = ('value',)

    def __init__(self, value: float = 0.0):
        object.__setattr__(self, 'value', float(value))

    def __setattr__(self, name, value):
        raise AttributeError("Channel is immutable")

    def __delattr__(self, name):
        raise AttributeError("Channel is immutable")

    @classmethod
    def from_u8(cls, value: int) -> 'Channel':
        return cls(value / 255.0)

    @classmethod
    def from_f32(cls, value: float) -> 'Channel':
        return cls(value)

    def clamped(self) -> float:
        return _clamp(self.value)

    def to_u8(self) -> int:
        """Truncating conversion of the clamped value to 0-255."""
        return int(_clamp(self.value) * 255.0 + _U8_BIAS)

    def to_f32(self) -> float:
        return _clamp(self.value)

    def __float__(self):
        return self.to_f32()

    def __int__(self):
        return self.to_u8()

    def __repr__(self):
        return f"Channel({self.value:.4f})"

    def __str__(self):
        return f"{self.value:.4f}"

    def __eq__(self, other):
        if not isinstance(other, Channel):
            return NotImplemented
        return abs(_clamp(self.value) - _clamp(other.value)) < CHANNEL_TOLERANCE

    __hash__ = None

    def __add__(self, other):
        if isinstance(other, Channel):
            return Channel(self.value + other.value)
        if isinstance(other, (int, float)):
            return Channel(self.value + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Channel):
            return Channel(self.value - other.value)
        if isinstance(other, (int, float)):
            return Channel(self.value - other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, (int, float)):
            return Channel(other - self.value)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Channel):
            return Channel(self.value * other.value)
        if isinstance(other, (int, float)):
            return Channel(self.value * other)
        return NotImplemented

    __rmul__ = __mul__
