"""
Pydantic schemas for the safety-weighted routing API.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator

# Route statuses: every one of them is returned with HTTP 200
STATUS_OK = "ok"
STATUS_UNSNAPPABLE = "unsnappable"
STATUS_NO_PATH = "no_path"


class RouteRequest(BaseModel):
    """Request model for route calculation."""
    origin: List[float] = Field(..., min_length=2, max_length=2, description="Origin as [lat, lon]")
    destination: List[float] = Field(..., min_length=2, max_length=2, description="Destination as [lat, lon]")
    alpha: float = Field(..., ge=0.0, description="Safety preference (0.0 = shortest, 5.0 = strongly safer)")

    @field_validator('origin', 'destination')
    @classmethod
    def validate_coordinate(cls, v: List[float]) -> List[float]:
        """Validate [lat, lon] is a real coordinate."""
        lat, lon = v
        if not -90.0 <= lat <= 90.0:
            raise ValueError('Latitude must be between -90 and 90')
        if not -180.0 <= lon <= 180.0:
            raise ValueError('Longitude must be between -180 and 180')
        return v


class RouteResponse(BaseModel):
    """Response model for route calculation."""
    geometry: Dict[str, Any] = Field(..., description="GeoJSON LineString with [lon, lat] coordinates")
    total_distance: float = Field(..., ge=0.0, description="Real route distance in meters")
    average_safety: float = Field(..., ge=0.0, le=1.0, description="Mean safety score (0 = safest, 1 = riskiest)")
    status: str = Field(STATUS_OK, description="'ok', 'unsnappable' or 'no_path'")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    graph_loaded: bool = Field(..., description="Whether the walking graph is built")
    node_count: int = Field(..., description="Number of graph nodes")
    edge_count: int = Field(..., description="Number of directed graph edges")


class ErrorResponse(BaseModel):
    """Error response model."""
    success: bool = Field(False, description="Always false for error responses")
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Detailed error message")
    details: Optional[Any] = Field(None, description="Additional error details")
