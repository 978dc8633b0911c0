"""HTTP API for Report Views."""

from .server import app, create_app

__all__ = ['app', 'create_app']
