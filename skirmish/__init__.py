"""Deterministic two-player grid combat simulator."""

__version__ = "0.1.0"
