"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sharelink.common.logging_config import get_logger

from .api import api_router
from .web import web_router
from .middleware.headers import ForwardedHeadersMiddleware
from .middleware.logging import LoggingMiddleware


def create_app(config, logger: Optional[logging.Logger] = None) -> FastAPI:
    """Create and configure FastAPI application.
    
    Args:
        config: Configuration instance
        logger: Logger for app-level messages (defaults to ``sharelink``)
        
    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Share Links",
        description="Stateless short links for shared projects and proposals",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    
    app.state.config = config
    app.state.logger = logger or get_logger()
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ForwardedHeadersMiddleware)
    
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])
    
    return app
