#!/usr/bin/env python
# coding: utf-8

"""
Convert a single image file to grayscale from the command line.
Run with: python convert_file.py photo.jpg -o out/
"""

import argparse
import os
import sys

from errors import GrayifyError
from grayscale import to_grayscale
from image_io import decode_image, download_name, encode_image, guess_mime_type, validate_upload
from settings import MB, configure_logging, load_settings


def build_parser():
    parser = argparse.ArgumentParser(description="Convert an image to grayscale.")
    parser.add_argument("image", help="path of the image to convert")
    parser.add_argument("-o", "--output-dir", help="directory to write into (default: next to the image)")
    parser.add_argument("--quality", type=int, default=None, help="JPEG quality, 1-95")
    parser.add_argument("--png", action="store_true", help="write PNG (keeps transparency) instead of JPEG")
    parser.add_argument("-v", "--verbose", action="store_true", help="print progress")
    return parser


def convert_file(path, output_dir=None, quality=90, png=False, max_bytes=10 * MB, on_progress=None):
    """Convert `path` and write grayify_grayscale.<ext>. Returns the output path."""
    with open(path, "rb") as f:
        data = f.read()
    validate_upload(os.path.basename(path), guess_mime_type(path), len(data), max_bytes)

    decoded = decode_image(data)
    gray = to_grayscale(decoded.pixels, decoded.width, decoded.height, on_progress)
    fmt, ext = ("PNG", "png") if png else ("JPEG", "jpg")
    encoded = encode_image(gray, decoded.width, decoded.height, fmt=fmt, quality=quality)

    output_dir = output_dir or os.path.dirname(os.path.abspath(path))
    os.makedirs(output_dir, exist_ok=True)
    out_path = os.path.join(output_dir, download_name("grayscale", ext))
    with open(out_path, "wb") as f:
        f.write(encoded)
    return out_path


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1
    configure_logging(settings)

    quality = args.quality if args.quality is not None else settings.jpeg_quality
    if not 1 <= quality <= 95:
        print("--quality must be between 1 and 95", file=sys.stderr)
        return 1

    def _print_progress(value):
        print(f"\rProcessing image... {value:.0f}%", end="", flush=True)

    try:
        out_path = convert_file(
            args.image,
            output_dir=args.output_dir,
            quality=quality,
            png=args.png,
            max_bytes=settings.max_upload_bytes,
            on_progress=_print_progress if args.verbose else None,
        )
    except OSError as exc:
        print(f"Cannot read or write file: {exc}", file=sys.stderr)
        return 1
    except GrayifyError as exc:
        print(exc.user_message, file=sys.stderr)
        return 1

    if args.verbose:
        print()
    print(f"Saved: {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
