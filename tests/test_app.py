from pathlib import Path

from streamlit.testing.v1 import AppTest

from session import GrayifySession

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


def test_app_renders_upload_page():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()

    assert not at.exception
    assert at.subheader[0].value == "Transform Your Images"
    text = " ".join(m.value for m in at.markdown)
    assert "Grayify" in text
    assert "Smart Conversion" in text
    assert not at.error


def test_app_renders_converted_result(make_png):
    session = GrayifySession()
    assert session.submit("red.png", "image/png", make_png(size=(4, 4)), upload_id="file-1")

    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.session_state["grayify"] = session
    at.run()

    assert not at.exception
    assert len(at.get("imgs")) == 2
    assert [b.label for b in at.button] == ["🔄 Upload New Image"]
    assert not at.error
    assert "4×4" in " ".join(c.value for c in at.caption)


def test_reset_button_returns_to_upload_page(make_png):
    session = GrayifySession()
    session.submit("red.png", "image/png", make_png(size=(4, 4)), upload_id="file-1")

    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.session_state["grayify"] = session
    at.run()
    at.button[0].click().run()

    assert not at.exception
    assert not at.session_state["grayify"].has_result
    assert "Smart Conversion" in " ".join(m.value for m in at.markdown)
