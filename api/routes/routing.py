"""
FastAPI routes for safety-weighted routing endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status
import logging

from api.schemas.routing import RouteRequest, RouteResponse, HealthResponse
from api.services.routing_service import SafeWalkRoutingService

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(tags=["routing"])


def get_routing_service(request: Request) -> SafeWalkRoutingService:
    """Routing service attached to the running application."""
    return request.app.state.routing_service


@router.get("/health", response_model=HealthResponse, summary="Health Check")
def health_check(service: SafeWalkRoutingService = Depends(get_routing_service)):
    """
    Liveness check.

    Returns:
        HealthResponse: "healthy" once the walking graph is built
    """
    return service.get_health_status()


@router.post("/route", response_model=RouteResponse, summary="Calculate Safety-Weighted Route")
def calculate_route(request: RouteRequest,
                    service: SafeWalkRoutingService = Depends(get_routing_service)):
    """
    Calculate a pedestrian route that trades distance against safety.

    Declared sync so the CPU-bound search runs in the threadpool instead of
    the event loop.

    Example:
        ```json
        {
            "origin": [30.3515, 76.3700],
            "destination": [30.3410, 76.3940],
            "alpha": 5.0
        }
        ```
    """
    logger.info(f"Route request from {request.origin} to {request.destination} (alpha={request.alpha})")

    try:
        return service.calculate_route(request)
    except RuntimeError as e:
        logger.error(f"Route calculation unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )
    except ValueError as e:
        logger.warning(f"Route calculation validation error: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
