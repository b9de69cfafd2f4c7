#
# PROJECT: render-kernel
# MODULE: render_kernel/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .channel import Channel


class Color:
    """
    RGB color made of three Channels.

    Channel values are kept unclamped so intermediate sums can exceed the
    displayable range; alpha is not stored and is written as opaque (0xFF)
    by the packed conversions and encoders.
    """
    __slots__ = ('r', 'g', 'b')

    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0):
        for name, value in (('r', r), ('g', g), ('b', b)):
            if not isinstance(value, Channel):
                value = Channel.from_f32(value)
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError("Color is immutable")

    def __delattr__(self, name):
        raise AttributeError("Color is immutable")

    # ── Named colors ────────────────────────────────────────────────────
    @classmethod
    def black(cls): return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls): return cls(1.0, 1.0, 1.0)

    @classmethod
    def grey(cls): return cls(0.5, 0.5, 0.5)

    @classmethod
    def dark_red(cls): return cls(0.5, 0.0, 0.0)

    @classmethod
    def dark_green(cls): return cls(0.0, 0.5, 0.0)

    @classmethod
    def dark_blue(cls): return cls(0.0, 0.0, 0.5)

    @classmethod
    def dark_yellow(cls): return cls(0.5, 0.5, 0.0)

    @classmethod
    def dark_cyan(cls): return cls(0.0, 0.5, 0.5)

    @classmethod
    def dark_magenta(cls): return cls(0.5, 0.0, 0.5)

    @classmethod
    def bright_red(cls): return cls(1.0, 0.0, 0.0)

    @classmethod
    def bright_green(cls): return cls(0.0, 1.0, 0.0)

    @classmethod
    def bright_blue(cls): return cls(0.0, 0.0, 1.0)

    @classmethod
    def bright_yellow(cls): return cls(1.0, 1.0, 0.0)

    @classmethod
    def bright_cyan(cls): return cls(0.0, 1.0, 1.0)

    @classmethod
    def bright_magenta(cls): return cls(1.0, 0.0, 1.0)

    # ── Conversions ─────────────────────────────────────────────────────
    @classmethod
    def from_u8(cls, r: int, g: int, b: int) -> 'Color':
        return cls(Channel.from_u8(r), Channel.from_u8(g), Channel.from_u8(b))

    @classmethod
    def from_packed_rgba(cls, value: int) -> 'Color':
        return cls.from_u8((value >> 24) & 0xFF, (value >> 16) & 0xFF,
                           (value >> 8) & 0xFF)

    def to_u8_tuple(self):
        return (self.r.to_u8(), self.g.to_u8(), self.b.to_u8())

    def to_packed_rgba(self) -> int:
        """0xRRGGBBAA with AA = 0xFF."""
        r, g, b = self.to_u8_tuple()
        return (r << 24) | (g << 16) | (b << 8) | 0xFF

    def to_packed_argb(self) -> int:
        """0xAARRGGBB with AA = 0xFF."""
        r, g, b = self.to_u8_tuple()
        return 0xFF000000 | (r << 16) | (g << 8) | b

    def to_hex(self) -> str:
        return "#{:02X}{:02X}{:02X}".format(*self.to_u8_tuple())

    def __repr__(self):
        return (f"Color(r={self.r.value:.4f}, g={self.g.value:.4f}, "
                f"b={self.b.value:.4f}, {self.to_hex()})")

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    __hash__ = None

    # ── Arithmetic (componentwise, unclamped) ───────────────────────────
    def __add__(self, other):
        if isinstance(other, Color):
            return Color(self.r + other.r, self.g + other.g, self.b + other.b)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Color):
            return Color(self.r - other.r, self.g - other.g, self.b - other.b)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        # A single Channel scales all three components
        if isinstance(other, (int, float, Channel)):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, scalar):
        if isinstance(scalar, (int, float, Channel)):
            return self * scalar
        return NotImplemented

    def lerp(self, other: 'Color', t: float) -> 'Color':
        """Linear interpolation in RGB space, t=0 gives self."""
        return self + (other - self) * t


def parse_hex_color(hex_str):
    """
    Parse a hex color string to a Color.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: Color, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
    except ValueError:
        return None
    return Color.from_u8(r, g, b)


def build_gradient(color_a, color_b, steps):
    """Build a smooth gradient by interpolating in RGB space.
    Returns a list of `steps` Colors starting at color_a and ending at color_b."""
    palette = []
    for i in range(steps):
        t = i / float(steps - 1) if steps > 1 else 0.0
        palette.append(color_a.lerp(color_b, t))
    return palette
