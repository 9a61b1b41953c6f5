"""
Doubler API - Pydantic Request/Response Schemas
================================================

What:  Pydantic models defining the API contract of the doubler operation.
How:   FastAPI uses these models to validate the request body, serialize
       responses, and generate the OpenAPI documentation.
Who:   DoublerBody is bound to the HTTP body by the route; DoublerInput and
       DoublerOutput are the values the transformation service works on.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class DoublerBody(BaseModel):
    """JSON body of POST /doubler/{param1}."""
    param2: str = Field(default="", description="Parameter in resource body.")


class DoublerInput(BaseModel):
    """
    What:  Complete input of the doubler operation, assembled per request
           from the path (param1) and the body (param2).
    Who:   Passed by the route to services.doubler_service.double().
    """
    param1: int = Field(description="Parameter in resource path.")
    param2: str = Field(default="", description="Parameter in resource body.")

    model_config = {"frozen": True}


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class DoublerOutput(BaseModel):
    """Result of the doubler operation, returned with HTTP 200."""
    value1: int = Field(description="Doubled param1.")
    value2: str = Field(description="param2 concatenated with itself.")

    model_config = {"frozen": True}


class ErrorResponse(BaseModel):
    """
    What:  Standardized error envelope for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "invalid_argument")
        message: Human-readable description
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "invalid_argument",
            "message": "invalid argument",
            "details": {"field": "param1", "value": 3},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for liveness probes."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    uptime_seconds: float = Field(description="Seconds since service started")
