"""
NutriSnap Backend - Shared Response Schemas
=============================================

What:  Response shapes shared across endpoints.
"""

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Returned by every successful mutation: `{"success": true}`."""
    success: bool = True


class ErrorResponse(BaseModel):
    """
    What:  Error body produced by the global exception handlers.

    Example:
        {"error": "Invalid index"}

    The request ID is not repeated here; it is in the X-Request-ID header.
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and collection file status.
    Who:   Returned by GET /health for monitoring and container health checks.
    """
    status: str = Field(description="Overall service status: healthy or degraded")
    version: str = Field(description="Application version")
    meals: str = Field(description="Meal collection file: ok or unreadable")
    calories: str = Field(description="Calorie database file: ok or unreadable")
    uptime_seconds: float = Field(description="Seconds since service started")
