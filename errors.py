#!/usr/bin/env python
# coding: utf-8

"""
Errors Module
Exceptions raised while accepting, decoding and converting an image
"""

from typing import Optional


class GrayifyError(Exception):
    """Base class for every error shown to the user."""

    user_message = "Error processing image. Please try again."

    def __init__(self, message: str = "", user_message: Optional[str] = None):
        super().__init__(message or self.user_message)
        if user_message is not None:
            self.user_message = user_message


class UnsupportedFileType(GrayifyError):
    """The upload is not recognised as an image."""

    user_message = "Please select a valid image file."


class FileTooLarge(GrayifyError):
    """The upload is over the size limit. Raised before decoding."""

    user_message = "File size too large. Please select an image smaller than 10MB."


class InvalidInput(GrayifyError):
    """Pixel buffer does not describe a decoded RGBA image."""


class ProcessingFailure(GrayifyError):
    """Decode, transform or encode failed for some other reason."""
