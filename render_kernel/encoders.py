#
# PROJECT: render-kernel
# MODULE: render_kernel/encoders.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Serializers from a Canvas to image file bytes.

PPM is the ASCII "P3" variant with five pixels per data line. BMP is an
uncompressed 32 bits-per-pixel BITMAPINFOHEADER file whose rows are written
top to bottom, in canvas order, with each pixel laid out as
[0xFF, R, G, B]. Readers following the usual bottom-up convention will show
the image upside down; the layout is kept as-is because existing fixtures
depend on it.
"""

import logging
import os
import struct

from .canvas import Canvas

logger = logging.getLogger(__name__)

PPM_PIXELS_PER_LINE = 5

BMP_FILE_HEADER_SIZE = 14
BMP_INFO_HEADER_SIZE = 40
BMP_DATA_OFFSET = BMP_FILE_HEADER_SIZE + BMP_INFO_HEADER_SIZE


def encode_ppm(canvas: Canvas) -> bytes:
    parts = ["P3\n", f"{canvas.width} {canvas.height}\n", "255\n"]
    count = 0
    for row in canvas.rows():
        for color in row:
            r, g, b = color.to_u8_tuple()
            parts.append(f"{r} {g} {b}")
            # Every 5th pixel group ends the line
            if count < PPM_PIXELS_PER_LINE - 1:
                parts.append(" ")
                count += 1
            else:
                parts.append("\n")
                count = 0
    data = "".join(parts).encode("ascii")
    logger.debug("Encoded %dx%d canvas as PPM (%d bytes)",
                 canvas.width, canvas.height, len(data))
    return data


def encode_bmp(canvas: Canvas) -> bytes:
    data_size = canvas.width * canvas.height * 4
    file_size = BMP_DATA_OFFSET + data_size

    out = bytearray()
    # File header - 14 bytes: magic, file size, reserved, data offset
    out += struct.pack('<2sIII', b'BM', file_size, 0, BMP_DATA_OFFSET)
    # BITMAPINFOHEADER - 40 bytes
    out += struct.pack('<IiiHHIIiiII',
                       BMP_INFO_HEADER_SIZE,
                       canvas.width,
                       canvas.height,
                       1,           # color planes
                       32,          # bits per pixel
                       0,           # compression (BI_RGB)
                       data_size,
                       0, 0,        # horizontal / vertical resolution
                       0, 0)        # palette colors / important colors

    for row in canvas.rows():
        for color in row:
            r, g, b = color.to_u8_tuple()
            out += bytes((0xFF, r, g, b))

    logger.debug("Encoded %dx%d canvas as BMP (%d bytes)",
                 canvas.width, canvas.height, len(out))
    return bytes(out)


ENCODERS = {
    'ppm': encode_ppm,
    'bmp': encode_bmp,
}


def encode(canvas: Canvas, fmt: str) -> bytes:
    """Encode with the encoder registered for fmt ('ppm' or 'bmp')."""
    try:
        encoder = ENCODERS[fmt.lower()]
    except KeyError:
        raise ValueError(f"Unknown image format '{fmt}', "
                         f"expected one of: {', '.join(sorted(ENCODERS))}") from None
    return encoder(canvas)


def save_image(canvas: Canvas, path, fmt=None) -> int:
    """
    Encode canvas and write it to path.

    The format comes from fmt or, when omitted, from the file extension.
    Returns the number of bytes written.
    """
    if fmt is None:
        fmt = os.path.splitext(str(path))[1].lstrip('.')
    data = encode(canvas, fmt)
    with open(path, 'wb') as f:
        f.write(data)
    logger.info("Wrote %s (%d bytes)", path, len(data))
    return len(data)
