#!/usr/bin/env python3
#
# PROJECT: render-kernel
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import logging
import math
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from render_kernel.camera import Camera
from render_kernel.config import RenderConfig
from render_kernel.demo import render_demo
from render_kernel.encoders import save_image


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s cube.ppm                                    Default 320x240 PPM
  %(prog)s cube.bmp --width 640 --height 480           Larger BMP
  %(prog)s cube.ppm --yaw 30 --pitch 20 --distance 8   Orbit the camera
  %(prog)s cube.ppm --fg-color #00FFFF --bg-color #1A1A2E
"""
    defaults = RenderConfig.from_env()
    parser = argparse.ArgumentParser(
        description="Render a projected cube to a PPM or BMP image",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("output", help="Output image path (.ppm or .bmp)")
    parser.add_argument("--width", type=int, default=defaults.width,
                        help=f"Image width in pixels (default: {defaults.width})")
    parser.add_argument("--height", type=int, default=defaults.height,
                        help=f"Image height in pixels (default: {defaults.height})")
    parser.add_argument("--fov", type=float, default=defaults.fov,
                        help=f"Vertical field of view in degrees (default: {defaults.fov})")
    parser.add_argument("--distance", type=float, default=defaults.distance,
                        help=f"Camera distance from origin (default: {defaults.distance})")
    parser.add_argument("--yaw", type=float, default=35.0,
                        help="Camera yaw in degrees (default: 35)")
    parser.add_argument("--pitch", type=float, default=25.0,
                        help="Camera pitch in degrees (default: 25)")
    parser.add_argument("--format", choices=("ppm", "bmp"), default=None,
                        help="Output format (default: from output extension)")
    parser.add_argument("--bg-color", default=defaults.bg_color,
                        help=f"Background color in hex #RRGGBB (default: {defaults.bg_color})")
    parser.add_argument("--fg-color", default=defaults.fg_color,
                        help=f"Wireframe color in hex #RRGGBB (default: {defaults.fg_color})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s")

    fmt = args.format or os.path.splitext(args.output)[1].lstrip('.') or 'ppm'
    config = RenderConfig(width=args.width, height=args.height, fov=args.fov,
                          distance=args.distance, output_format=fmt,
                          bg_color=args.bg_color, fg_color=args.fg_color)

    camera = Camera(fov=config.fov, distance=config.distance,
                    near=config.near_clip, far=config.far_plane)
    camera.orbit(math.radians(args.yaw), math.radians(args.pitch))

    canvas = render_demo(config, camera)
    save_image(canvas, args.output, config.output_format)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)
