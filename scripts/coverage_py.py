#!/usr/bin/env python3
"""Run the territory unit tests with coverage.

Produces a terminal summary and an HTML report.

Usage:
    python scripts/coverage_py.py            # terminal + HTML report
    python scripts/coverage_py.py --html     # also open HTML report in browser
"""

import subprocess
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
COV_DIR = ROOT_DIR / "coverage_py"


def run(*args: str) -> None:
    """Run a command with the current interpreter, exiting on failure."""
    result = subprocess.run([sys.executable, *args], cwd=str(ROOT_DIR))
    if result.returncode != 0:
        sys.exit(result.returncode)


def main() -> None:
    data_file = str(COV_DIR / ".coverage")

    print("Running territory unit tests with coverage...")
    run(
        "-m",
        "coverage",
        "run",
        f"--data-file={data_file}",
        "--source=territory",
        "-m",
        "pytest",
        "territory/",
    )

    print("\n=== Coverage Report ===")
    run("-m", "coverage", "report", f"--data-file={data_file}")

    html_dir = str(COV_DIR / "html")
    run(
        "-m",
        "coverage",
        "html",
        f"--data-file={data_file}",
        f"--directory={html_dir}",
    )
    index = COV_DIR / "html" / "index.html"
    print(f"HTML report: {index}")

    if "--html" in sys.argv[1:]:
        import webbrowser

        webbrowser.open(index.as_uri())


if __name__ == "__main__":
    main()
