import re
from pathlib import Path

import pytest

from settings import SERVER_UPLOAD_CAP_MB, GrayifySettings, MB, load_settings


def test_defaults():
    settings = load_settings({})
    assert settings == GrayifySettings()
    assert settings.max_upload_bytes == 10 * MB
    assert settings.max_upload_mb == 10
    assert settings.jpeg_quality == 90
    assert settings.log_level == "INFO"


def test_environment_overrides():
    settings = load_settings({
        "GRAYIFY_MAX_UPLOAD_MB": "25",
        "GRAYIFY_JPEG_QUALITY": "75",
        "GRAYIFY_PREVIEW_MAX_SIDE": "400",
        "GRAYIFY_LOG_LEVEL": "debug",
    })
    assert settings.max_upload_bytes == 25 * MB
    assert settings.jpeg_quality == 75
    assert settings.preview_max_side == 400
    assert settings.log_level == "DEBUG"


def test_blank_values_use_defaults():
    assert load_settings({"GRAYIFY_JPEG_QUALITY": " "}).jpeg_quality == 90


@pytest.mark.parametrize("key, value", [
    ("GRAYIFY_MAX_UPLOAD_MB", "ten"),
    ("GRAYIFY_MAX_UPLOAD_MB", "0"),
    ("GRAYIFY_JPEG_QUALITY", "100"),
    ("GRAYIFY_PREVIEW_MAX_SIDE", "2"),
    ("GRAYIFY_LOG_LEVEL", "LOUD"),
])
def test_invalid_values(key, value):
    with pytest.raises(ValueError):
        load_settings({key: value})


def test_upload_limit_cannot_exceed_server_cap():
    assert load_settings({"GRAYIFY_MAX_UPLOAD_MB": str(SERVER_UPLOAD_CAP_MB)}).max_upload_mb == SERVER_UPLOAD_CAP_MB
    with pytest.raises(ValueError):
        load_settings({"GRAYIFY_MAX_UPLOAD_MB": str(SERVER_UPLOAD_CAP_MB + 1)})


def test_streamlit_server_cap_is_not_below_settings_cap():
    config = (Path(__file__).resolve().parent.parent / ".streamlit" / "config.toml").read_text()
    match = re.search(r"^maxUploadSize\s*=\s*(\d+)", config, re.MULTILINE)
    assert match is not None
    assert int(match.group(1)) >= SERVER_UPLOAD_CAP_MB
