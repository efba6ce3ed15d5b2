"""Command line interface for dupblocks."""

from .main import app

__all__ = ["app"]
