"""FastAPI application for password analysis.

Passwords arrive in POST bodies. With REQUIRE_HTTPS enabled those requests
are refused over plain HTTP, while health checks stay reachable for load
balancers. Analysis responses are marked uncacheable.
"""

import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.config import API_CORS_ORIGINS, API_RATE_LIMIT, REQUIRE_HTTPS
from core.siem import configure_siem_logging
from api.routes import health_router, tools_router


# Per client IP; every breach check costs a request to the range API
limiter = Limiter(key_func=get_remote_address, default_limits=[API_RATE_LIMIT])


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_siem_logging()
    yield


app = FastAPI(
    title="Password Analyzer API",
    description="""
    Password strength and breach analysis with:
    - Offline composition scoring (7 criteria)
    - HaveIBeenPwned breach detection (k-Anonymity, only a 5-char hash prefix is sent)
    """,
    version="1.0.0",
    lifespan=lifespan
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


def is_secure_request(request: Request) -> bool:
    """True if the request arrived over HTTPS, directly or via a proxy."""
    forwarded_proto = request.headers.get("X-Forwarded-Proto", "")
    return request.url.scheme == "https" or forwarded_proto.lower() == "https"


@app.middleware("http")
async def require_https_for_passwords(request: Request, call_next) -> Response:
    """Refuse password-bearing requests over plain HTTP when REQUIRE_HTTPS is set."""
    # GET endpoints (health, docs) carry no password
    if REQUIRE_HTTPS and request.method == "POST" and not is_secure_request(request):
        return JSONResponse(
            status_code=403,
            content={
                "detail": "Passwords must be sent over HTTPS.",
                "error": "https_required"
            }
        )

    return await call_next(request)


@app.middleware("http")
async def no_store_headers(request: Request, call_next) -> Response:
    """Keep browsers and proxies from storing analysis results."""
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["Cache-Control"] = "no-store"
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=API_CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

app.include_router(health_router)
app.include_router(tools_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
