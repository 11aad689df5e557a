"""Gather system information and render it as a single status line."""

__version__ = "0.1.0"