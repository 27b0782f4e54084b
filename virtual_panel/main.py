from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
# Logger
from loguru import logger

# Configuration
from virtual_panel.core.config import settings
from virtual_panel.core.logging_config import setup_logging
# Rate Limiter
from virtual_panel.core.route_limiters import limiter
# CORS Middleware
from virtual_panel.core.cors_middleware import add_cors_middleware
# Routers
from virtual_panel.routes.health import router as health_router
from virtual_panel.routes.interview import router as interview_router
from virtual_panel.routes.resume import router as resume_router
# Error Handling
from virtual_panel.errors.handlers import (
    generic_exception_handler,
    http_exception_handler,
    rate_limit_exceeded_handler,
    validation_exception_handler,
)

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    # Startup
    logger.info(f"Virtual Panel API starting ({settings.environment})")
    if not settings.ai_enabled:
        logger.warning("No valid API key, all analysis endpoints will use fallback results")

    yield

    # Shutdown
    logger.info("Application shutdown")

# Initialize FastAPI app
app = FastAPI(
    title="Virtual Panel API",
    description="Interview question generation, transcript feedback and resume ATS scoring",
    version="0.1.0",
    lifespan=lifespan
)
# Add CORS middleware
add_cors_middleware(app)

# Centralized error handlers
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Add rate limiter to the app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# Include routers
app.include_router(health_router)
app.include_router(interview_router)
app.include_router(resume_router)
