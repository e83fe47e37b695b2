"""FastAPI application configuration.

Main entry point for the Password Generator REST API.
Adds rate limiting, security headers, optional HTTPS enforcement, and a
restrictive CORS configuration around the generation core.
"""

import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import configure_logging, shutdown_logging
from core.config import CORS_ORIGINS, RATE_LIMIT, REQUIRE_HTTPS
from api.routes import health_router, tools_router
from api.routes.health import API_VERSION


# Rate limiter configuration
# Uses client IP for rate limit tracking
limiter = Limiter(key_func=get_remote_address, default_limits=[RATE_LIMIT])


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    configure_logging()
    yield
    shutdown_logging()


app = FastAPI(
    title="Password Generator API",
    description="""
    Random password generation with a 0-5 strength score:
    - Uppercase, lowercase, digit and symbol classes
    - Uniform draws from a secure random source
    - Six-tier strength labels (en, ru)
    - Rate limiting per client IP
    """,
    version=API_VERSION,
    lifespan=lifespan
)

# Attach rate limiter to app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


# Paths reachable over plain HTTP for load balancer probes
HTTP_EXEMPT_PATHS = {"/", "/health"}

# Responses carry fresh passwords, so nothing may be cached or framed
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Content-Security-Policy": "default-src 'self'; frame-ancestors 'none'",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store, no-cache, must-revalidate, private",
    "Pragma": "no-cache",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=(), clipboard-read=()",
}


def _is_secure(request: Request) -> bool:
    """True for direct HTTPS or HTTPS terminated at a reverse proxy."""
    if request.url.scheme == "https":
        return True
    return request.headers.get("X-Forwarded-Proto", "").lower() == "https"


@app.middleware("http")
async def enforce_https(request: Request, call_next) -> Response:
    """Reject plain HTTP requests when REQUIRE_HTTPS is enabled."""
    if REQUIRE_HTTPS and request.url.path not in HTTP_EXEMPT_PATHS and not _is_secure(request):
        return JSONResponse(
            status_code=403,
            content={
                "detail": "HTTPS required. This API requires secure connections.",
                "error": "https_required"
            }
        )

    return await call_next(request)


@app.middleware("http")
async def add_security_headers(request: Request, call_next) -> Response:
    """Add security headers to all responses."""
    response = await call_next(request)
    response.headers.update(SECURITY_HEADERS)
    return response


# CORS configuration - explicitly restricted
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
    expose_headers=["X-RateLimit-Limit", "X-RateLimit-Remaining", "X-RateLimit-Reset"],
    max_age=600,  # Cache preflight requests for 10 minutes
)

# Register routers
app.include_router(health_router)
app.include_router(tools_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
