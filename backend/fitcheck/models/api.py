"""
API Request/Response Schemas

Pydantic models for API endpoints.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from fitcheck.models.room import FurnitureItem, RoomGeometry
from fitcheck.models.results import FitCheckOptions, FitCheckResult


# ============ Fit Check Endpoint ============

class FitCheckRequest(BaseModel):
    """Request body for /fit-check (camelCase keys on the wire)."""
    model_config = ConfigDict(populate_by_name=True)

    room_geometry: RoomGeometry = Field(..., alias="roomGeometry")
    furniture_items: List[FurnitureItem] = Field(..., alias="furnitureItems")
    options: Optional[FitCheckOptions] = None
    request_id: Optional[str] = Field(None, alias="requestId")


class FitCheckResponse(BaseModel):
    """Success envelope from /fit-check."""
    success: bool = True
    data: FitCheckResult
    request_id: str
    processing_time_ms: float


# ============ Rules Endpoint ============

class RulesResponse(BaseModel):
    """The loaded rules document, verbatim."""
    success: bool = True
    data: Dict[str, Any]


# ============ Health Check ============

class HealthResponse(BaseModel):
    """Response from /health endpoint."""
    status: str = "ok"
    version: str
    message: str = "Fit Check API is running"


# ============ Error Response ============

class ErrorResponse(BaseModel):
    """Failure envelope."""
    success: bool = False
    error: str
    details: Optional[List[Dict[str, Any]]] = None
    request_id: Optional[str] = None
