"""Pytest configuration helpers.

Ensure the project's `src/` directory (and the root, for `demo.py`) is on
`sys.path` so imports like `from covid_dashboard...` work during test
collection.
"""
from pathlib import Path
import sys


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        # Insert at front so tests prefer local package sources
        sys.path.insert(0, str(path))
