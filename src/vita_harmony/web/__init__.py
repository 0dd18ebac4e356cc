"""JSON API for vita-harmony."""

from .app import create_app

__all__ = ["create_app"]
