"""Vanity short link routes."""

from urllib.parse import quote

from fastapi import APIRouter, Request, HTTPException, status
from fastapi.responses import RedirectResponse

from sharelink.links import resolve_vanity

router = APIRouter()


@router.get("/health", include_in_schema=False)
async def health_check_web():
    """Health check endpoint (simple version for load balancers)."""
    return {"status": "healthy"}


@router.get("/{route_prefix}/{vanity}", include_in_schema=False)
async def redirect_vanity(request: Request, route_prefix: str, vanity: str):
    """Redirect ``/<route prefix>/<slug>-<code>`` to the shared page.

    Undecodable segments are passed through literally so the shared page
    shows its own not-found state.
    """
    config = request.app.state.config
    
    resolution = resolve_vanity(route_prefix, vanity, shared_path=config.shared_path)
    
    if resolution is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Link '/{route_prefix}/{vanity}' not found",
        )
    
    if not resolution.decoded:
        request.app.state.logger.info(
            f"Passing through undecodable {resolution.entity_type} link: {vanity}"
        )
    
    target = request.state.path_prefix + quote(resolution.target_path)
    return RedirectResponse(url=target, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
