"""FastAPI application main entry point."""

import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ordering.infrastructure.database import close_database, init_database
from ordering.infrastructure.logging import configure_logging
from ordering.settings import get_app_settings

from apps.api.v1.endpoints import orders

settings = get_app_settings()
configure_logging(settings.api.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.api.title,
    description="Order listing, status updates, creation and monthly profit",
    version=settings.api.version,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(orders.router, prefix="/api/v1")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} [{response.status_code}] ({duration:.3f}s)"
    )
    return response


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions.

    Args:
        request: FastAPI request
        exc: Exception

    Returns:
        JSONResponse with error details
    """
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.on_event("startup")
async def startup_event():
    """Create tables (and seed reference data when enabled)."""
    await init_database()
    logger.info("Order API started")


@app.on_event("shutdown")
async def shutdown_event():
    """Dispose the engine."""
    await close_database()
    logger.info("Order API stopped")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Health status
    """
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
