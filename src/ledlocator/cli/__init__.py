"""Command-line interface for LED locator package."""

from .commands import main

__all__ = ["main"]
