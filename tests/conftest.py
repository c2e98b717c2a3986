import io

import numpy as np
import pytest
from PIL import Image


def _encode(arr, fmt="PNG"):
    buf = io.BytesIO()
    Image.fromarray(arr).save(buf, fmt)
    return buf.getvalue()


@pytest.fixture
def make_png():
    """Return PNG bytes for a solid RGBA image."""
    def _make(color=(255, 0, 0, 255), size=(8, 6)):
        w, h = size
        arr = np.zeros((h, w, 4), dtype=np.uint8)
        arr[:, :] = color
        return _encode(arr)
    return _make


@pytest.fixture
def random_rgba():
    rng = np.random.default_rng(1234)

    def _make(width, height):
        return rng.integers(0, 256, size=width * height * 4, dtype=np.uint8)
    return _make
