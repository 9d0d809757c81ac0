"""Common utilities for the share link service."""

from .validators import is_valid_origin, is_valid_title
from .headers import extract_forwarded_headers, build_base_url, get_forwarded_path_prefix
from .url_builder import build_short_url
from .logging_config import setup_logging, get_logger

__all__ = [
    "is_valid_origin",
    "is_valid_title",
    "extract_forwarded_headers",
    "build_base_url",
    "get_forwarded_path_prefix",
    "build_short_url",
    "setup_logging",
    "get_logger",
]
