"""Stateless short links for shared projects and proposals."""

from .codec import encode, decode, slugify, CodecError, CodecResult
from .links import build_short_link, resolve_vanity, ShortLink, Resolution

__all__ = [
    "encode",
    "decode",
    "slugify",
    "CodecError",
    "CodecResult",
    "build_short_link",
    "resolve_vanity",
    "ShortLink",
    "Resolution",
]
