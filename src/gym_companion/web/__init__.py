"""Web interface for gym-companion."""

from .app import create_app

__all__ = ["create_app"]
