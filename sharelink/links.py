"""Building and resolving vanity short links."""

from typing import List, NamedTuple, Optional

from . import codec, entities
from .common.logging_config import get_logger
from .common.url_builder import build_short_url


logger = get_logger("links")


class ShortLink(NamedTuple):
    url: str
    entity_type: str
    code: str
    slug: str


class Resolution(NamedTuple):
    entity_type: str
    share_id: str
    decoded: bool
    target_path: str


def build_short_link(
    share_id: str,
    title: Optional[str],
    origin: str,
    default_title: Optional[str] = None,
) -> Optional[ShortLink]:
    """Build ``<origin>/<route prefix>/<slug>-<code>`` for a share id.

    Args:
        share_id: Share id to encode
        title: Display title used for the slug
        origin: Scheme and host, e.g. https://example.com
        default_title: Title to use when ``title`` produces no slug
            (defaults to the entity name)

    Returns:
        ShortLink, or None if the share id cannot be encoded; callers should
        fall back to linking the full share id
    """
    parsed, error = codec.parse_share_id(share_id)
    if error is not None:
        logger.debug(f"Cannot build short link for {share_id!r}: {error.value}")
        return None

    entity = parsed.entity
    code = codec.encode(share_id)

    slug = codec.slugify(title or "")
    if not slug:
        slug = codec.slugify(default_title or entity.name)

    url = build_short_url(
        route_prefix=entity.route_prefix,
        slug=slug,
        code=code,
        base_url=origin,
    )

    return ShortLink(url=url, entity_type=entity.name, code=code, slug=slug)


def _code_candidates(entity: entities.EntityType, vanity: str) -> List[str]:
    """Candidate codes in a vanity segment, last marker first.

    Both the slug and a base64url payload may contain the marker text, so
    every occurrence is a candidate.
    """
    candidates = []
    idx = vanity.rfind(entity.marker)
    while idx != -1:
        candidates.append(f"{entity.code_prefix}-{vanity[idx + len(entity.marker):]}")
        # Markers may overlap ("-p-p-"), so the next search may end inside this one
        idx = vanity.rfind(entity.marker, 0, idx + len(entity.marker) - 1)

    # Link built from an empty slug
    if vanity.lower().startswith(f"{entity.code_prefix}-"):
        candidates.append(vanity)

    return candidates


def resolve_vanity(
    route_prefix: str,
    vanity: str,
    shared_path: str = "/shared",
) -> Optional[Resolution]:
    """Resolve the trailing segment of a short link to a share id.

    Looks for ``<slug>-<marker><code suffix>`` and decodes the code. When no
    candidate decodes, the whole segment is passed through as a literal share
    id so the shared page can decide whether it exists.

    Args:
        route_prefix: Route segment the link was served under (``p``, ``pr``)
        vanity: Trailing path segment
        shared_path: Path the shared pages live under

    Returns:
        Resolution, or None for an unknown route prefix or an empty segment
    """
    entity = entities.by_route_prefix(route_prefix)
    if entity is None or not vanity:
        return None

    base = "/" + shared_path.strip("/") if shared_path.strip("/") else ""

    for candidate in _code_candidates(entity, vanity):
        share_id = codec.decode(candidate)
        if share_id is not None:
            return Resolution(
                entity_type=entity.name,
                share_id=share_id,
                decoded=True,
                target_path=f"{base}/{entity.name}/{share_id}",
            )

    logger.debug(f"No decodable code in {vanity!r}, using it as a literal share id")
    return Resolution(
        entity_type=entity.name,
        share_id=vanity,
        decoded=False,
        target_path=f"{base}/{entity.name}/{vanity}",
    )
