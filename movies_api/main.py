"""
=============================================================================
MOVIES API - CRUD service for the Movie resource
=============================================================================
Endpoints:
  - GET    /movies                      list all movies
  - GET    /movies/{id}                 movie by id
  - GET    /movies/title/{title}        movie by exact title
  - GET    /movies/country/{country}    movies by exact country
  - POST   /movies                      create (201 + Location)
  - PUT    /movies/{id}                 update given fields
  - DELETE /movies/{id}                 delete (204)
=============================================================================
"""

from datetime import datetime

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings, APP_VERSION
from .dependencies import init_resources, close_resources
from .exceptions import (
    ServiceUnavailableException,
    global_exception_handler,
    http_exception_handler,
    service_unavailable_handler,
    validation_exception_handler,
)
from .limiter import limiter
from .logging_config import setup_logging
from .middleware import RequestTrackingMiddleware
from .routers import movie_router

setup_logging(settings.LOG_LEVEL)

# =============================================================================
# FASTAPI APP
# =============================================================================
app = FastAPI(
    title="Movies API",
    description="CRUD service for movies backed by PostgreSQL",
    version=APP_VERSION
)

app.state.limiter = limiter

app.add_middleware(RequestTrackingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(ServiceUnavailableException, service_unavailable_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.include_router(movie_router.router)


# =============================================================================
# STARTUP & SHUTDOWN
# =============================================================================
@app.on_event("startup")
async def startup():
    """Initialize connections on startup"""
    await init_resources()


@app.on_event("shutdown")
async def shutdown():
    """Cleanup connections on shutdown"""
    await close_resources()


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": APP_VERSION
    }


# =============================================================================
# MAIN
# =============================================================================
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
