"""JSON API for encoding, decoding and building share links."""

from .routes import router as api_router

__all__ = ["api_router"]
