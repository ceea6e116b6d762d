"""Run the test suite: ``python tests.py [pytest args]``. Installs ``.[dev]`` first if needed."""
from __future__ import annotations

import importlib.util
import subprocess
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parent


def main() -> None:
    if any(importlib.util.find_spec(m) is None for m in ("pytest", "numpy", "tarot_cards")):
        subprocess.check_call([sys.executable, "-m", "pip", "install", "-e", ".[dev]"], cwd=str(ROOT))
    raise SystemExit(subprocess.call([sys.executable, "-m", "pytest", *sys.argv[1:]], cwd=str(ROOT)))


if __name__ == "__main__":
    main()
