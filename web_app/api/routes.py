"""API routes implementation."""

from fastapi import APIRouter, Request, HTTPException, status
from datetime import datetime, timezone

from .schemas import (
    EncodeRequest,
    EncodeResponse,
    DecodeResponse,
    SlugifyRequest,
    SlugifyResponse,
    LinkRequest,
    LinkResponse,
    ResolutionResponse,
    HealthResponse,
)
from sharelink import codec, entities
from sharelink.links import build_short_link, resolve_vanity
from sharelink.common.headers import build_base_url
from sharelink.common.validators import is_valid_title

router = APIRouter()


def _request_origin(request: Request) -> str:
    config = request.app.state.config
    return build_base_url(
        headers=dict(request.headers),
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )


@router.post(
    "/encode",
    response_model=EncodeResponse,
    responses={422: {"description": "Share id cannot be encoded"}},
    summary="Encode share id",
)
async def encode_share_id(body: EncodeRequest):
    """Encode a verbose share id into a compact share code."""
    result = codec.encode_result(body.share_id)
    
    if not result.ok:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": "Share id cannot be encoded", "reason": result.error.value},
        )
    
    return EncodeResponse(share_id=body.share_id, code=result.value)


@router.get(
    "/decode/{code}",
    response_model=DecodeResponse,
    responses={404: {"description": "Code cannot be decoded"}},
    summary="Decode share code",
)
async def decode_share_code(code: str):
    """Decode a compact share code back into its share id."""
    result = codec.decode_result(code)
    
    if not result.ok:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": f"Code '{code}' cannot be decoded", "reason": result.error.value},
        )
    
    return DecodeResponse(
        code=code,
        share_id=result.value,
        entity_type=result.value.split("_", 1)[0],
    )


@router.post(
    "/slugify",
    response_model=SlugifyResponse,
    summary="Slugify title",
)
async def slugify_text(body: SlugifyRequest):
    """Turn a display title into a URL slug."""
    return SlugifyResponse(text=body.text, slug=codec.slugify(body.text))


@router.post(
    "/links",
    response_model=LinkResponse,
    responses={
        400: {"description": "Invalid title"},
        422: {"description": "Share id cannot be encoded"},
    },
    summary="Build short link",
    description="Build <origin>/<route prefix>/<slug>-<code> for a share id.",
)
async def create_link(request: Request, body: LinkRequest):
    """Build a short link for a share id."""
    config = request.app.state.config
    
    if body.title is not None:
        is_valid, error = is_valid_title(body.title, max_length=config.max_title_length)
        if not is_valid:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"error": error, "reason": "bad_title"},
            )
    
    result = codec.encode_result(body.share_id)
    if not result.ok:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": "Share id cannot be encoded", "reason": result.error.value},
        )
    
    link = build_short_link(
        share_id=body.share_id,
        title=body.title,
        origin=_request_origin(request) + request.state.path_prefix,
    )
    
    return LinkResponse(**link._asdict())


@router.get(
    "/resolve/{route_prefix}/{vanity}",
    response_model=ResolutionResponse,
    responses={404: {"description": "Unknown route prefix"}},
    summary="Resolve vanity segment",
)
async def resolve_link(request: Request, route_prefix: str, vanity: str):
    """Resolve the trailing segment of a short link without redirecting."""
    config = request.app.state.config
    
    resolution = resolve_vanity(route_prefix, vanity, shared_path=config.shared_path)
    
    if resolution is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": f"Cannot resolve '{route_prefix}/{vanity}'", "reason": "unresolvable"},
        )
    
    return ResolutionResponse(**resolution._asdict())


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
async def health_check():
    """Health check endpoint for load balancers and monitoring."""
    return HealthResponse(
        status="healthy",
        entity_types=[e.name for e in entities.ENTITY_TYPES],
        timestamp=datetime.now(timezone.utc),
    )
