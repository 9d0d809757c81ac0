"""Resolve the public origin of a request sitting behind a proxy."""

from typing import Dict, Mapping, Optional


FORWARDED_KEYS = {
    "forwarded_proto": "x-forwarded-proto",
    "forwarded_host": "x-forwarded-host",
    "forwarded_for": "x-forwarded-for",
    "forwarded_prefix": "x-forwarded-prefix",
}


def _first_hop(value: Optional[str]) -> Optional[str]:
    # Chained proxies append, the client-facing value comes first
    if not value:
        return None
    first = value.split(",")[0].strip()
    return first or None


def extract_forwarded_headers(headers: Mapping[str, str]) -> Dict[str, Optional[str]]:
    """Extract X-Forwarded-* headers from request.

    Args:
        headers: Request headers

    Returns:
        Dictionary with forwarded_proto, forwarded_host, forwarded_for,
        forwarded_prefix (None when absent)
    """
    headers_lower = {k.lower(): v for k, v in headers.items()}

    return {
        name: _first_hop(headers_lower.get(header))
        for name, header in FORWARDED_KEYS.items()
    }


def build_base_url(
    headers: Mapping[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Build the origin short links are issued under.

    Priority:
    1. X-Forwarded-Proto + X-Forwarded-Host
    2. Request scheme + host
    3. Fallback base URL from config

    Returns:
        Base URL without trailing slash (e.g., https://example.com)
    """
    forwarded = extract_forwarded_headers(headers)

    if forwarded["forwarded_proto"] and forwarded["forwarded_host"]:
        return f"{forwarded['forwarded_proto']}://{forwarded['forwarded_host']}"

    if request_scheme and request_host:
        return f"{request_scheme}://{request_host}"

    return fallback_base_url.rstrip("/")


def get_forwarded_path_prefix(headers: Mapping[str, str]) -> str:
    """Path prefix stripped by the proxy, normalized to ``/prefix`` or ''."""
    prefix = extract_forwarded_headers(headers)["forwarded_prefix"]
    if not prefix:
        return ""
    p = prefix.strip("/")
    return "/" + p if p else ""
