"""
Doubler API - Doubler Route Handler
====================================

What:  Handles POST /doubler/{param1}.
How:   Binds param1 from the path and param2 from the JSON body, delegates to
       doubler_service.double(), returns the result as JSON.
Who:   Mounted by the application factory via create_router().

The path parameter is declared with multiple_of=2, so the OpenAPI document
publishes the evenness constraint and odd values are rejected by request
validation before the handler runs. The service repeats the check so the
operation stays correct when called without the HTTP layer.
"""

from typing import Optional

from fastapi import APIRouter, Path

from doubler.schemas.doubler import (
    DoublerBody,
    DoublerInput,
    DoublerOutput,
    ErrorResponse,
)
from doubler.services import doubler_service


def create_router(deprecated: bool = False) -> APIRouter:
    """
    Build the router for the doubler operation.

    Args:
        deprecated: Mark the operation as deprecated in the OpenAPI document
    """
    router = APIRouter(tags=doubler_service.TAGS)

    @router.post(
        "/doubler/{param1}",
        response_model=DoublerOutput,
        responses={
            200: {"description": "Doubled values", "model": DoublerOutput},
            400: {"description": "Invalid argument", "model": ErrorResponse},
        },
        summary=doubler_service.TITLE,
        description=doubler_service.DESCRIPTION,
        deprecated=deprecated,
    )
    async def double_values(
        param1: int = Path(description="Parameter in resource path.", multiple_of=2),
        body: Optional[DoublerBody] = None,
    ) -> DoublerOutput:
        # A request without a body carries an empty param2.
        param2 = body.param2 if body is not None else ""
        return doubler_service.double(DoublerInput(param1=param1, param2=param2))

    return router
