#!/usr/bin/env python
# coding: utf-8

"""
Session Module
State of one interactive Grayify session: view state, current result pair and errors
"""

import logging
from enum import Enum
from typing import Optional

from artifacts import ArtifactHandle, ArtifactRegistry
from converter import ConversionOutcome, convert_upload
from errors import GrayifyError
from grayscale import ProgressCb
from image_io import mime_for_extension
from settings import GrayifySettings

log = logging.getLogger(__name__)


class ViewState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"


class GrayifySession:
    """Holds at most one original/grayscale pair and swaps it only on success."""

    def __init__(self, settings: Optional[GrayifySettings] = None):
        self.settings = settings or GrayifySettings()
        self.registry = ArtifactRegistry()
        self.state = ViewState.IDLE
        self.error: Optional[str] = None
        self.show_features = True
        self.last_upload_id: Optional[str] = None
        self.original: Optional[ArtifactHandle] = None
        self.grayscale: Optional[ArtifactHandle] = None
        self.outcome: Optional[ConversionOutcome] = None

    @property
    def has_result(self) -> bool:
        return self.original is not None and self.grayscale is not None

    def is_new_upload(self, upload_id: str) -> bool:
        """True when `upload_id` has not been submitted since the last reset."""
        return upload_id != self.last_upload_id

    def submit(self, name: str, mime_type: Optional[str], data: bytes,
               on_progress: Optional[ProgressCb] = None, upload_id: Optional[str] = None) -> bool:
        """Convert an upload. Returns True on success; on failure `error` holds the message."""
        self.state = ViewState.LOADING
        self.error = None
        self.last_upload_id = upload_id
        try:
            outcome = convert_upload(
                name,
                mime_type,
                data,
                on_progress=on_progress,
                settings=self.settings,
            )
        except GrayifyError as exc:
            log.warning("Conversion of %r failed: %s", name, exc)
            self.error = exc.user_message
            self.state = ViewState.ERROR
            return False

        self._replace_result(outcome)
        self.state = ViewState.RESULT
        self.show_features = False
        return True

    def _replace_result(self, outcome: ConversionOutcome) -> None:
        self.registry.release(self.original)
        self.registry.release(self.grayscale)
        original_ext = outcome.original_name.rsplit(".", 1)[-1]
        self.original = self.registry.acquire(
            outcome.original_bytes, outcome.original_name, mime_for_extension(original_ext)
        )
        self.grayscale = self.registry.acquire(
            outcome.grayscale_bytes, outcome.grayscale_name, "image/jpeg"
        )
        self.outcome = outcome

    def reset(self) -> None:
        """Drop the current result and go back to the upload screen."""
        self.registry.release_all()
        self.original = None
        self.grayscale = None
        self.outcome = None
        self.error = None
        self.last_upload_id = None
        self.state = ViewState.IDLE
        self.show_features = True
