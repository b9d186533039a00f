"""Mitten Index: how brutal does it feel outside, and what should you wear."""

__version__ = "1.0.0"
