#!/usr/bin/env python
# coding: utf-8

"""
Image I/O Module
Upload validation, decoding to RGBA pixel buffers, encoding and previews
"""

import io
import logging
import mimetypes
import os
from dataclasses import dataclass
from typing import Optional

import cv2
import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from errors import FileTooLarge, InvalidInput, ProcessingFailure, UnsupportedFileType
from settings import ACCEPTED_EXTENSIONS, MB

log = logging.getLogger(__name__)

DOWNLOAD_PREFIX = "grayify"


@dataclass
class DecodedImage:
    pixels: np.ndarray
    width: int
    height: int
    format: Optional[str] = None


def guess_mime_type(name: str) -> Optional[str]:
    mime_type, _ = mimetypes.guess_type(name or "")
    if mime_type is None:
        ext = os.path.splitext(name or "")[1].lower().lstrip(".")
        if ext in ACCEPTED_EXTENSIONS:
            mime_type = f"image/{'jpeg' if ext == 'jpg' else ext}"
    return mime_type


def validate_upload(name: str, mime_type: Optional[str], size: int, max_bytes: int = 10 * MB) -> None:
    """
    Reject uploads that are not images or are over the size limit.
    The type is checked first; neither check looks at the file contents.
    """
    if not mime_type:
        mime_type = guess_mime_type(name)
    if not mime_type or not mime_type.startswith("image/"):
        log.warning("Rejected %r: type %r is not an image", name, mime_type)
        raise UnsupportedFileType(f"{name!r} is not an image (type {mime_type!r})")

    if size > max_bytes:
        log.warning("Rejected %r: %d bytes exceeds limit of %d", name, size, max_bytes)
        limit_mb = max_bytes / MB
        raise FileTooLarge(
            f"{name!r} is {size} bytes, limit is {max_bytes}",
            user_message=f"File size too large. Please select an image smaller than {limit_mb:g}MB.",
        )


def decode_image(data: bytes) -> DecodedImage:
    """Decode image bytes into a flat RGBA buffer, honouring EXIF orientation."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            fmt = img.format
            img = ImageOps.exif_transpose(img)
            rgba = img.convert("RGBA")
    except (UnidentifiedImageError, OSError, ValueError, Image.DecompressionBombError) as exc:
        raise ProcessingFailure(f"Could not decode image: {exc}") from exc

    pixels = np.asarray(rgba, dtype=np.uint8).reshape(-1).copy()
    return DecodedImage(pixels=pixels, width=rgba.width, height=rgba.height, format=fmt)


def _to_image(pixels: np.ndarray, width: int, height: int) -> Image.Image:
    if width <= 0 or height <= 0:
        raise InvalidInput(f"Cannot build an image of size {width}x{height}")
    arr = np.asarray(pixels, dtype=np.uint8)
    if arr.size != width * height * 4:
        raise InvalidInput(
            f"Pixel buffer length {arr.size} does not match a {width}x{height} RGBA image"
        )
    return Image.fromarray(arr.reshape(height, width, 4))


def encode_image(pixels: np.ndarray, width: int, height: int, fmt: str = "JPEG", quality: int = 90) -> bytes:
    """Return encoded bytes for an RGBA buffer. JPEG output is flattened onto white."""
    img = _to_image(pixels, width, height)
    fmt = fmt.upper()
    buf = io.BytesIO()
    if fmt in ("JPEG", "JPG"):
        alpha = img.split()[-1]
        bg = Image.new("RGBA", img.size, (255, 255, 255, 255))
        bg.paste(img, mask=alpha)
        bg.convert("RGB").save(buf, "JPEG", quality=quality, optimize=True)
    else:
        img.save(buf, fmt)
    return buf.getvalue()


def make_preview(pixels: np.ndarray, width: int, height: int, max_side: int = 800) -> np.ndarray:
    """Return an (h, w, 4) array whose longest side is at most `max_side`."""
    arr = np.asarray(pixels, dtype=np.uint8).reshape(height, width, 4)
    longest = max(width, height)
    if longest <= max_side:
        return arr.copy()
    scale = max_side / longest
    new_w = max(1, int(round(width * scale)))
    new_h = max(1, int(round(height * scale)))
    return cv2.resize(arr, (new_w, new_h), interpolation=cv2.INTER_AREA)


def normalize_extension(ext: str) -> str:
    ext = (ext or "").lower().lstrip(".")
    return "jpg" if ext == "jpeg" else ext


def original_extension(name: str, fmt: Optional[str] = None) -> str:
    """Extension for re-offering the uploaded file: its own, else the decoded format's."""
    ext = normalize_extension(os.path.splitext(name or "")[1])
    if not ext and fmt:
        ext = normalize_extension(fmt)
    return ext or "img"


def download_name(kind: str, ext: str) -> str:
    """File name offered for download, e.g. grayify_grayscale.jpg"""
    return f"{DOWNLOAD_PREFIX}_{kind}.{normalize_extension(ext)}"


def mime_for_extension(ext: str) -> str:
    mime_type = guess_mime_type(f"file.{normalize_extension(ext)}")
    return mime_type or "application/octet-stream"
