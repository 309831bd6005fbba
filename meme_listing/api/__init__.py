"""HTTP API for the meme token listing."""

from .app import create_app

__all__ = ["create_app"]
