import re
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
PYPROJECT = (ROOT / "pyproject.toml").read_text()


def test_readme_is_a_real_readme():
    match = re.search(r'^readme\s*=\s*"([^"]+)"', PYPROJECT, re.MULTILINE)
    assert match is not None
    assert match.group(1) == "README.md"
    assert (ROOT / "README.md").read_text().startswith("# Grayify")


def test_streamlit_floor_supports_use_container_width():
    match = re.search(r'"streamlit>=(\d+)\.(\d+)"', PYPROJECT)
    assert match is not None
    assert (int(match.group(1)), int(match.group(2))) >= (1, 40)
