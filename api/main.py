"""
Safe Walk Routing API - FastAPI Main Application

A RESTful API for safety-weighted pedestrian routing over an OpenStreetMap extract.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
import uvicorn

from safe_walk_routing import __version__
from api.routes.routing import router as routing_router
from api.schemas.routing import ErrorResponse
from api.services.routing_service import SafeWalkRoutingService, routing_service as default_service

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(service: Optional[SafeWalkRoutingService] = None) -> FastAPI:
    """
    Create the FastAPI application around a routing service.

    The walking graph is built in the lifespan startup hook if the service is
    not loaded yet; an ingestion failure aborts startup.
    """
    service = service or default_service

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Manage application lifecycle - startup and shutdown events.
        """
        # Startup
        logger.info("Starting Safe Walk Routing API...")

        if not service.is_initialized:
            service.initialize()

        health = service.get_health_status()
        logger.info(f"✓ Routing service ready with {health.node_count} nodes, {health.edge_count} edges")

        yield

        # Shutdown
        logger.info("Shutting down Safe Walk Routing API...")

    app = FastAPI(
        title="Safe Walk Routing API",
        description="""
        **Walking directions that balance distance against personal safety**

        Routes are computed over an OpenStreetMap extract. Every walkable way
        gets a risk score from its tags (lighting, sidewalks, surface, road
        class) and the planner inflates edge cost by `1 + alpha * risk`.

        ## Quick Start

        1. Check service health: `GET /health`
        2. Calculate a route: `POST /route`
        """,
        version=__version__,
        lifespan=lifespan
    )
    app.state.routing_service = service

    # Add CORS middleware for web applications
    app.add_middleware(
        CORSMiddleware,
        allow_origins=service.config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Custom exception handlers
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """
        Handle request validation errors with detailed information.
        """
        logger.warning(f"Validation error for {request.url}: {exc}")
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error="validation_error",
                message="Request validation failed",
                details=jsonable_encoder(exc.errors())
            ).model_dump()
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """
        Handle unexpected errors gracefully.
        """
        logger.exception(f"Unexpected error for {request.url}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="internal_server_error",
                message="An unexpected error occurred"
            ).model_dump()
        )

    # Include routers
    app.include_router(routing_router)

    @app.get("/", tags=["general"])
    async def root():
        """
        API root endpoint with basic information.
        """
        return {
            "api": "Safe Walk Routing API",
            "version": __version__,
            "documentation": "/docs",
            "health_check": "/health",
            "route": "/route"
        }

    return app


app = create_app()


# Development server configuration
if __name__ == "__main__":
    uvicorn.run(
        "api.main:app",
        host=default_service.config.host,
        port=default_service.config.port,
        reload=True,  # Enable auto-reload for development
        log_level=default_service.config.log_level
    )
