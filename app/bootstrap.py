from __future__ import annotations

import sys
from pathlib import Path

# app/bootstrap.py -> <checkout>/src
SRC_DIR = Path(__file__).resolve().parents[1] / "src"


def add_src_to_path() -> None:
    """Make `cecalc` importable when the app is launched from a plain checkout."""
    src = str(SRC_DIR)
    if SRC_DIR.is_dir() and src not in sys.path:
        sys.path.insert(0, src)
