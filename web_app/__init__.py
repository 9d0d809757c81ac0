"""FastAPI web application for the share link service."""

from .app_factory import create_app

__all__ = ["create_app"]
