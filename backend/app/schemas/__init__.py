"""
Pydantic schemas shared across the app.

Keep validation here (not in `main.py`) so it can be reused by scripts and tests.
"""
