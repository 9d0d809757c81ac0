"""URL building utilities for short links."""


def build_short_url(
    route_prefix: str,
    slug: str,
    code: str,
    base_url: str,
) -> str:
    """Build a complete short URL.
    
    Args:
        route_prefix: Entity route segment (e.g. p, pr)
        slug: Human-readable slug; omitted when empty
        code: Share code
        base_url: Base URL (e.g., https://example.com)
        
    Returns:
        ``<base_url>/<route_prefix>/<slug>-<code>``
    """
    base = base_url.rstrip("/")
    prefix = route_prefix.strip("/")
    vanity = f"{slug}-{code}" if slug else code
    
    if prefix:
        return f"{base}/{prefix}/{vanity}"
    return f"{base}/{vanity}"
