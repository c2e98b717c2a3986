"""
Convenience launcher for the Streamlit app.
Run with: python run_app.py [extra streamlit arguments]
This will invoke the same Python interpreter to run "streamlit run app.py".
"""
import os
import subprocess
import sys

HERE = os.path.dirname(os.path.abspath(__file__))
APP = os.path.join(HERE, "app.py")


def build_command(extra_args=None):
    return [sys.executable, "-m", "streamlit", "run", APP, *(extra_args or [])]


def main(argv=None):
    cmd = build_command(sys.argv[1:] if argv is None else argv)
    print("Starting Grayify: ", " ".join(cmd))
    return subprocess.run(cmd).returncode


if __name__ == "__main__":
    sys.exit(main())
