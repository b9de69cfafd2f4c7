#
# PROJECT: render-kernel
# MODULE: render_kernel/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import EPSILON, Vec2, Vec3, Vec4
from .matrix import Mat2, Mat3, Mat4
from .channel import Channel
from .color import Color, parse_hex_color, build_gradient
from .canvas import Canvas
from .encoders import encode_ppm, encode_bmp, encode, save_image
from .camera import Camera
from .config import RenderConfig
