#!/usr/bin/env python3
"""
Main entry point for the share link service.

The service is stateless: every request is a pure encode/decode, so
WORKERS > 1 simply adds processes with nothing to share between them.

Usage:
    python app.py

Environment variables:
    BASE_URL - Origin for short links when the request carries none
    SHARED_PATH - Path the shared pages live under
    HOST / PORT - Bind address
    WORKERS - Number of uvicorn worker processes (default 1)
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from sharelink.common.logging_config import setup_logging
from sharelink.entities import ENTITY_TYPES
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger
    
    logger.info("Starting share link service...")
    logger.info(
        "Serving entity types: "
        + ", ".join(f"{e.name} (/{e.route_prefix}/)" for e in ENTITY_TYPES)
    )
    
    yield
    
    logger.info("Share link service stopped")


def build_app(config=None, logger=None) -> FastAPI:
    """Create the app with its lifespan.

    Also the factory each worker process calls when WORKERS > 1, in which case
    configuration and logging are loaded from the environment per process.
    """
    config = config or load_config()
    if logger is None:
        logger = setup_logging(
            level=config.log_level,
            log_file=config.log_file,
            json_format=config.log_json,
        )
    
    app = create_app(config=config, logger=logger)
    app.router.lifespan_context = lifespan
    return app


def main():
    """Main entry point."""
    config = load_config()
    
    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )
    
    logger.info("Share Link Service")
    logger.info(f"Configuration: {config.model_dump()}")
    
    if config.workers > 1:
        # uvicorn only spawns workers for an import string, not an app object
        logger.info(
            f"Starting {config.workers} workers on {config.host}:{config.port}"
        )
        uvicorn.run(
            "app:build_app",
            factory=True,
            host=config.host,
            port=config.port,
            workers=config.workers,
            log_level=config.log_level.lower(),
            access_log=True,
        )
        return
    
    app = build_app(config=config, logger=logger)
    
    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )
    
    server = uvicorn.Server(uvicorn_config)
    
    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True
    
    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)
    
    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
