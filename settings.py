#!/usr/bin/env python
# coding: utf-8

"""
Settings Module
Runtime configuration read from GRAYIFY_* environment variables
"""

import logging
import os
from dataclasses import dataclass

MB = 1024 * 1024

ACCEPTED_EXTENSIONS = ["png", "jpg", "jpeg", "gif", "bmp", "webp"]

# Streamlit server.maxUploadSize in .streamlit/config.toml; larger limits never reach validate_upload
SERVER_UPLOAD_CAP_MB = 200


@dataclass(frozen=True)
class GrayifySettings:
    max_upload_bytes: int = 10 * MB
    jpeg_quality: int = 90
    preview_max_side: int = 800
    log_level: str = "INFO"

    @property
    def max_upload_mb(self) -> float:
        return self.max_upload_bytes / MB


def _read_int(environ, key: str, default: int, low: int, high: int = None) -> int:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    if value < low or (high is not None and value > high):
        upper = f"-{high}" if high is not None else " or more"
        raise ValueError(f"{key} must be {low}{upper}, got {value}")
    return value


def load_settings(environ=None) -> GrayifySettings:
    """Build settings from the environment, falling back to the defaults."""
    if environ is None:
        environ = os.environ
    defaults = GrayifySettings()

    max_mb = _read_int(environ, "GRAYIFY_MAX_UPLOAD_MB", defaults.max_upload_bytes // MB, 1, SERVER_UPLOAD_CAP_MB)
    quality = _read_int(environ, "GRAYIFY_JPEG_QUALITY", defaults.jpeg_quality, 1, 95)
    preview = _read_int(environ, "GRAYIFY_PREVIEW_MAX_SIDE", defaults.preview_max_side, 16)

    level = environ.get("GRAYIFY_LOG_LEVEL", defaults.log_level).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"GRAYIFY_LOG_LEVEL must be a logging level name, got {level!r}")

    return GrayifySettings(
        max_upload_bytes=max_mb * MB,
        jpeg_quality=quality,
        preview_max_side=preview,
        log_level=level,
    )


def configure_logging(settings: GrayifySettings) -> None:
    """Set up root logging once for the app or the command line."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
