#!/usr/bin/env python
# coding: utf-8

"""
Grayscale Module
Luminance-weighted grayscale conversion of RGBA pixel buffers
"""

import logging
from typing import Callable, Optional

import numpy as np

from errors import InvalidInput

log = logging.getLogger(__name__)

# ITU-R BT.601 luma weights, in R, G, B order
LUMA_COEFFICIENTS = (0.2989, 0.5870, 0.1140)

# Pixels processed between two progress reports
PROGRESS_INTERVAL = 1000

ProgressCb = Callable[[float], None]


def _as_pixel_buffer(source, width: int, height: int) -> np.ndarray:
    """Return `source` as a flat uint8 RGBA buffer, checking it against the dimensions."""
    if isinstance(source, (bytes, bytearray, memoryview)):
        buf = np.frombuffer(source, dtype=np.uint8) if len(source) else np.zeros(0, dtype=np.uint8)
    else:
        buf = np.asarray(source)
        if buf.dtype != np.uint8:
            if buf.size and not np.issubdtype(buf.dtype, np.integer):
                raise InvalidInput(f"Pixel values must be integers, got {buf.dtype}")
            if buf.size and (buf.min() < 0 or buf.max() > 255):
                raise InvalidInput("Pixel values must be in the range 0-255")
            buf = buf.astype(np.uint8)
        buf = buf.reshape(-1)

    if buf.size % 4 != 0:
        raise InvalidInput(f"Pixel buffer length {buf.size} is not a multiple of 4")
    if width < 0 or height < 0:
        raise InvalidInput(f"Invalid image size {width}x{height}")
    if buf.size != width * height * 4:
        raise InvalidInput(
            f"Pixel buffer length {buf.size} does not match a {width}x{height} RGBA image"
        )
    return buf


def to_grayscale(source, width: int, height: int, on_progress: Optional[ProgressCb] = None) -> np.ndarray:
    """
    Convert an RGBA pixel buffer to grayscale.

    Each pixel's R, G and B become 0.2989*R + 0.5870*G + 0.1140*B rounded to
    the nearest integer; alpha is kept. The caller's buffer is not modified.

    Args:
        source: Flat RGBA values (uint8 array, bytes, or (H, W, 4) array)
        width: Image width in pixels
        height: Image height in pixels
        on_progress: Called with the percent complete every 1000 pixels,
            then once with 100

    Returns:
        New flat uint8 buffer of the same length as `source`
    """
    result = _as_pixel_buffer(source, width, height).copy()
    total = result.size // 4
    rgba = result.reshape(total, 4)
    r_w, g_w, b_w = LUMA_COEFFICIENTS

    # Without a listener there is nothing to report, so do the whole image at once
    step = PROGRESS_INTERVAL if on_progress is not None else max(total, 1)
    for start in range(0, total, step):
        stop = min(start + step, total)
        block = rgba[start:stop, :3].astype(np.float64)
        gray = r_w * block[:, 0] + g_w * block[:, 1] + b_w * block[:, 2]
        rgba[start:stop, :3] = np.clip(np.rint(gray), 0, 255).astype(np.uint8)[:, np.newaxis]
        if on_progress is not None and stop % PROGRESS_INTERVAL == 0:
            on_progress(stop / total * 100.0)

    if on_progress is not None:
        on_progress(100.0)

    log.debug("Converted %dx%d image to grayscale", width, height)
    return result
