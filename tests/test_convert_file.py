import io
import os

import pytest
from PIL import Image

import convert_file


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("GRAYIFY_"):
            monkeypatch.delenv(key)


def test_writes_grayscale_jpeg(tmp_path, make_png, capsys):
    src = tmp_path / "red.png"
    src.write_bytes(make_png((255, 0, 0, 255), size=(16, 16)))
    out_dir = tmp_path / "out"

    assert convert_file.main([str(src), "-o", str(out_dir)]) == 0

    out = out_dir / "grayify_grayscale.jpg"
    assert out.exists()
    assert f"Saved: {out}" in capsys.readouterr().out
    with Image.open(out) as img:
        r, g, b = img.getpixel((8, 8))
        assert all(abs(c - 76) <= 2 for c in (r, g, b))


def test_png_keeps_alpha_and_defaults_to_source_dir(tmp_path, make_png):
    src = tmp_path / "clear.png"
    src.write_bytes(make_png((0, 0, 255, 100), size=(4, 4)))

    assert convert_file.main([str(src), "--png", "-v"]) == 0

    with Image.open(tmp_path / "grayify_grayscale.png") as img:
        assert img.getpixel((0, 0)) == (29, 29, 29, 100)


def test_rejects_non_images(tmp_path, capsys):
    src = tmp_path / "notes.txt"
    src.write_text("hello")
    assert convert_file.main([str(src)]) == 1
    assert "Please select a valid image file." in capsys.readouterr().err


def test_missing_file(tmp_path):
    assert convert_file.main([str(tmp_path / "missing.png")]) == 1


def test_bad_quality(tmp_path, make_png):
    src = tmp_path / "a.png"
    src.write_bytes(make_png())
    assert convert_file.main([str(src), "--quality", "0"]) == 1


def test_convert_file_returns_path(tmp_path):
    buf = io.BytesIO()
    Image.new("RGB", (3, 3), (255, 255, 255)).save(buf, "BMP")
    src = tmp_path / "white.bmp"
    src.write_bytes(buf.getvalue())
    out = convert_file.convert_file(str(src), output_dir=str(tmp_path / "x"), png=True)
    with Image.open(out) as img:
        assert img.getpixel((1, 1)) == (255, 255, 255, 255)
