"""
Scholaris API package.

Provides the FastAPI application for the Scholaris e-learning backend.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
