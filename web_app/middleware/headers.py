"""Forwarded headers middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from sharelink.common.headers import extract_forwarded_headers, get_forwarded_path_prefix


class ForwardedHeadersMiddleware(BaseHTTPMiddleware):
    """Store X-Forwarded-* values on ``request.state`` for the routes."""
    
    async def dispatch(self, request: Request, call_next: Callable):
        headers = dict(request.headers)
        forwarded = extract_forwarded_headers(headers)
        
        request.state.forwarded_proto = forwarded["forwarded_proto"]
        request.state.forwarded_host = forwarded["forwarded_host"]
        request.state.forwarded_for = forwarded["forwarded_for"]
        request.state.path_prefix = get_forwarded_path_prefix(headers)
        
        return await call_next(request)
