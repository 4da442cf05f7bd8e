"""Recursive fractal tree demo (PySide6)."""
