"""
Health check endpoint for the application.

Description:
This module defines a FastAPI route for checking the health status of the application.

Arguments:
- request: An instance of Request, required for rate limiting.

Returns:
- A JSON response of the form {"success": true, "message": "Server is running!"}.

Dependencies:
- fastapi: For creating the FastAPI application and defining routes.
- virtual_panel.core.route_limiters: For rate limiting functionality.
- virtual_panel.schemas.health_response: For defining the response model.
- loguru: For logging information about the health check endpoint.
"""
from fastapi import APIRouter, Request
from loguru import logger

from virtual_panel.core.route_limiters import limiter, ROUTE_LIMIT
from virtual_panel.schemas.health_response import HealthResponse

router = APIRouter(
    prefix="/api",
    tags=["health"],
    responses={404: {"description": "Not found"}}
)


@router.get("/health", response_model=HealthResponse)
@limiter.limit(ROUTE_LIMIT)
async def health(request: Request):
    """
    Request parameter is required for rate limiting.
    """
    logger.info("Health check endpoint called")
    return HealthResponse(message="Server is running!")
