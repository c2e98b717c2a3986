#!/usr/bin/env python
# coding: utf-8

"""
Artifacts Module
Handles on encoded image bytes offered for preview and download
"""

import itertools
import logging
from typing import Dict

log = logging.getLogger(__name__)


class ArtifactHandle:
    """Encoded bytes plus the name and type they are downloaded under."""

    def __init__(self, registry: "ArtifactRegistry", handle_id: int, data: bytes, filename: str, mime_type: str):
        self._registry = registry
        self.handle_id = handle_id
        self._data = data
        self.filename = filename
        self.mime_type = mime_type

    @property
    def released(self) -> bool:
        return self._data is None

    @property
    def data(self) -> bytes:
        if self._data is None:
            raise RuntimeError(f"Artifact {self.filename!r} has been released")
        return self._data

    @property
    def size(self) -> int:
        return len(self.data)

    def release(self) -> None:
        self._registry.release(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    def __repr__(self):
        state = "released" if self.released else f"{len(self._data)} bytes"
        return f"<ArtifactHandle #{self.handle_id} {self.filename} ({state})>"


class ArtifactRegistry:
    """Tracks live handles so that replaced or reset results are freed."""

    def __init__(self):
        self._live: Dict[int, ArtifactHandle] = {}
        self._ids = itertools.count(1)

    @property
    def live_count(self) -> int:
        return len(self._live)

    def acquire(self, data: bytes, filename: str, mime_type: str) -> ArtifactHandle:
        handle = ArtifactHandle(self, next(self._ids), bytes(data), filename, mime_type)
        self._live[handle.handle_id] = handle
        log.debug("Acquired %r", handle)
        return handle

    def release(self, handle: ArtifactHandle) -> None:
        if handle is None or handle.released:
            return
        self._live.pop(handle.handle_id, None)
        handle._data = None
        log.debug("Released artifact #%d %s", handle.handle_id, handle.filename)

    def release_all(self) -> None:
        for handle in list(self._live.values()):
            self.release(handle)
