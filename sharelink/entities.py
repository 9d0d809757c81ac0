"""Registry of shareable entity types."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class EntityType:
    """A shareable entity and the prefixes used for its short links."""

    name: str
    code_prefix: str
    route_prefix: str

    @property
    def marker(self) -> str:
        """Substring separating the slug from the code in a vanity segment."""
        return f"-{self.code_prefix}-"


PROJECT = EntityType(name="project", code_prefix="p", route_prefix="p")
PROPOSAL = EntityType(name="proposal", code_prefix="pr", route_prefix="pr")

ENTITY_TYPES: Tuple[EntityType, ...] = (PROJECT, PROPOSAL)

_BY_NAME: Dict[str, EntityType] = {e.name: e for e in ENTITY_TYPES}
_BY_CODE_PREFIX: Dict[str, EntityType] = {e.code_prefix: e for e in ENTITY_TYPES}
_BY_ROUTE_PREFIX: Dict[str, EntityType] = {e.route_prefix: e for e in ENTITY_TYPES}


def by_name(name: str) -> Optional[EntityType]:
    """Look up an entity type by its share id tag (exact match)."""
    return _BY_NAME.get(name)


def by_code_prefix(prefix: str) -> Optional[EntityType]:
    """Look up an entity type by short code prefix (case-insensitive)."""
    return _BY_CODE_PREFIX.get(prefix.lower())


def by_route_prefix(prefix: str) -> Optional[EntityType]:
    """Look up an entity type by URL route segment."""
    return _BY_ROUTE_PREFIX.get(prefix.strip("/").lower())
