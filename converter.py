#!/usr/bin/env python
# coding: utf-8

"""
Converter Module
Runs one upload through validation, decoding, grayscale conversion and encoding
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np

from errors import GrayifyError, ProcessingFailure
from grayscale import ProgressCb, to_grayscale
from image_io import (
    decode_image,
    download_name,
    encode_image,
    make_preview,
    original_extension,
    validate_upload,
)
from settings import GrayifySettings

log = logging.getLogger(__name__)

GRAYSCALE_EXTENSION = "jpg"


@dataclass
class ConversionOutcome:
    original_bytes: bytes
    grayscale_bytes: bytes
    width: int
    height: int
    original_name: str
    grayscale_name: str
    original_preview: np.ndarray
    grayscale_preview: np.ndarray
    elapsed_ms: float


def convert_upload(
    name: str,
    mime_type: Optional[str],
    data: bytes,
    on_progress: Optional[ProgressCb] = None,
    settings: Optional[GrayifySettings] = None,
) -> ConversionOutcome:
    """
    Convert an uploaded image to grayscale.

    Validation happens before any decoding. Errors from this package are
    raised as-is; anything else is wrapped in ProcessingFailure so that
    callers only deal with GrayifyError. Nothing is returned on failure.
    """
    settings = settings or GrayifySettings()
    validate_upload(name, mime_type, len(data), settings.max_upload_bytes)

    start = time.perf_counter()
    try:
        decoded = decode_image(data)
        w, h = decoded.width, decoded.height
        gray_pixels = to_grayscale(decoded.pixels, w, h, on_progress)
        gray_bytes = encode_image(gray_pixels, w, h, fmt="JPEG", quality=settings.jpeg_quality)
        original_preview = make_preview(decoded.pixels, w, h, settings.preview_max_side)
        gray_preview = make_preview(gray_pixels, w, h, settings.preview_max_side)
    except GrayifyError:
        raise
    except Exception as exc:
        log.exception("Unexpected failure converting %r", name)
        raise ProcessingFailure(f"Error processing {name!r}: {exc}") from exc

    elapsed = (time.perf_counter() - start) * 1000.0
    log.info("Converted %r (%dx%d, %d bytes) in %.0f ms", name, w, h, len(data), elapsed)

    return ConversionOutcome(
        original_bytes=bytes(data),
        grayscale_bytes=gray_bytes,
        width=w,
        height=h,
        original_name=download_name("original", original_extension(name, decoded.format)),
        grayscale_name=download_name("grayscale", GRAYSCALE_EXTENSION),
        original_preview=original_preview,
        grayscale_preview=gray_preview,
        elapsed_ms=elapsed,
    )
