"""Validation utilities for link-building input."""

from urllib.parse import urlparse
from typing import Tuple


def is_valid_origin(origin: str) -> Tuple[bool, str]:
    """Validate an origin used as the base of short links.
    
    Args:
        origin: Scheme and host, e.g. https://example.com
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not origin or not isinstance(origin, str):
        return False, "Origin is required"
    
    result = urlparse(origin)
    
    if result.scheme not in ["http", "https"]:
        return False, "Origin must use http or https protocol"
    
    if not result.netloc:
        return False, "Origin must have a valid host"
    
    if result.query or result.fragment:
        return False, "Origin cannot contain a query or fragment"
    
    return True, ""


def is_valid_title(title: str, max_length: int = 200) -> Tuple[bool, str]:
    """Validate a display title before it is slugified.
    
    Empty titles are allowed; the link falls back to the entity name.
    
    Args:
        title: Display title
        max_length: Maximum accepted length
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(title, str):
        return False, "Title must be a string"
    
    if len(title) > max_length:
        return False, f"Title must be at most {max_length} characters"
    
    return True, ""
