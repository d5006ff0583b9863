"""
Launcher for the web app.

Run:
  python backend/main.py
or, from backend/:
  python -m uvicorn app.main:app --host 127.0.0.1 --port 8000
"""

from __future__ import annotations

import sys
from pathlib import Path

# Allow `python backend/main.py` from the project root.
sys.path.insert(0, str(Path(__file__).resolve().parent))

from app.main import run  # noqa: E402


if __name__ == "__main__":
    raise SystemExit(run())
