#
# PROJECT: render-kernel
# MODULE: render_kernel/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .camera import Camera
from .canvas import Canvas
from .color import Color, build_gradient, parse_hex_color
from .config import RenderConfig
from .math_utils import Vec3

logger = logging.getLogger(__name__)

CUBE_VERTICES = [
    Vec3(-1, -1, -1), Vec3(1, -1, -1), Vec3(1, 1, -1), Vec3(-1, 1, -1),
    Vec3(-1, -1, 1), Vec3(1, -1, 1), Vec3(1, 1, 1), Vec3(-1, 1, 1),
]

CUBE_EDGES = [
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
]

EDGE_SAMPLES = 24


def _plot_square(canvas, sx, sy, radius, color):
    cx, cy = int(sx), int(sy)
    for y in range(cy - radius, cy + radius + 1):
        for x in range(cx - radius, cx + radius + 1):
            canvas.plot(x, y, color)


def render_demo(config: RenderConfig, camera: Camera) -> Canvas:
    """
    Draw the demo frame: a vertical background gradient and the cube's
    vertices and edge sample points projected through the camera.
    """
    bg = parse_hex_color(config.bg_color) or Color.black()
    fg = parse_hex_color(config.fg_color) or Color.white()
    w, h = config.width, config.height

    canvas = Canvas(w, h)
    for y, color in enumerate(build_gradient(bg, bg * 0.25, h)):
        for x in range(w):
            canvas.set(x, y, color)

    view_proj = camera.view_projection(w, h)
    plotted = 0
    for a, b in CUBE_EDGES:
        for i in range(EDGE_SAMPLES + 1):
            p = CUBE_VERTICES[a].lerp(CUBE_VERTICES[b], i / EDGE_SAMPLES)
            hit = camera.project(p, w, h, view_proj)
            if hit is None:
                continue
            # Nearer points are drawn brighter
            shade = fg * (1.0 - 0.5 * hit[2])
            if canvas.plot(int(hit[0]), int(hit[1]), shade):
                plotted += 1

    for v in CUBE_VERTICES:
        hit = camera.project(v, w, h, view_proj)
        if hit is not None:
            _plot_square(canvas, hit[0], hit[1], 1, fg)

    logger.debug("Demo frame %dx%d: %d edge points plotted", w, h, plotted)
    return canvas
