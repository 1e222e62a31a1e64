"""Postboard - demo blog API with session-gated post management."""

from postboard.factory import create_app

__all__ = ["create_app"]
__version__ = "1.0.0"
