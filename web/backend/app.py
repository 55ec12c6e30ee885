#!/usr/bin/env python3
"""
TechScout Web API - FastAPI Application

Technology search and scout campaign endpoints with automatic API documentation.

Usage:
    python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import sys
import logging
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from core.exceptions import TechScoutError
from .config import get_config
from .exceptions import (
    domain_exception_handler,
    request_validation_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    search_router,
    technologies_router,
    invitations_router,
    campaigns_router
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load configuration
config = get_config()

# Create FastAPI app
app = FastAPI(
    title="TechScout API",
    description="Technology matching and scout campaign API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Register exception handlers
app.add_exception_handler(TechScoutError, domain_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(search_router)
app.include_router(technologies_router)
app.include_router(invitations_router)
app.include_router(campaigns_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "techscout-web"}


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting TechScout Web Server on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
