"""HTTP server - FastAPI routes over the API views."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

import settings
from app.container import container
from app.models.common import RateLimitExceeded
from web.api.auth import API_KEY_HEADERS, check_api_key, extract_api_key, resolve_client_id
from web.api.directory import get_directory, get_directory_summary
from web.api.directory.schemas import DirectoryResponse, SummaryResponse
from web.api.errors import AuthenticationError, ForbiddenError, NotFoundError, ValidationError
from web.api.postcode import lookup_postcode
from web.api.postcode.schemas import PostcodeLookupRequest, PostcodeLookupResponse

ENDPOINTS = [
    "GET /",
    "GET /health",
    "GET /mps/data (public JSON data)",
    "GET /mps/summary (public JSON data)",
    "POST /api/postcode_lookup",
    "GET /api/postcode_lookup/:postcode",
]


@asynccontextmanager
async def lifespan(_app: FastAPI):
    container.init()
    logger.info("VIC State District API ready (v{})", settings.API_VERSION)
    yield


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message, **extra})


def require_api_key(request: Request) -> str | None:
    """Dependency: validate the API key (when one is configured) and stash it on the request."""
    api_key = check_api_key(extract_api_key(request.headers), settings.API_KEY)
    request.state.api_key = api_key
    return api_key


def enforce_rate_limit(request: Request, api_key: str | None = Depends(require_api_key)) -> None:
    """Dependency: admit the request against the client's sliding window."""
    remote_addr = request.client.host if request.client else None
    container.rate_limit.admit(resolve_client_id(api_key, remote_addr))


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="VIC State District API", version=settings.API_VERSION, lifespan=lifespan)
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

    @app.exception_handler(ValidationError)
    async def validation_error(_request: Request, exc: ValidationError):
        return _error(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(_request: Request, exc: RequestValidationError):
        logger.debug("Rejected request body: {}", exc.errors())
        return _error(400, "Invalid request body")

    @app.exception_handler(NotFoundError)
    async def not_found(_request: Request, exc: NotFoundError):
        return _error(404, exc.message)

    @app.exception_handler(AuthenticationError)
    async def unauthorized(_request: Request, exc: AuthenticationError):
        return _error(401, exc.message, requiredHeaders=API_KEY_HEADERS)

    @app.exception_handler(ForbiddenError)
    async def forbidden(_request: Request, exc: ForbiddenError):
        return _error(403, exc.message)

    @app.exception_handler(RateLimitExceeded)
    async def too_many_requests(_request: Request, exc: RateLimitExceeded):
        response = _error(429, exc.message, retryAfter=exc.retry_after_seconds)
        response.headers["Retry-After"] = str(exc.retry_after_seconds)
        return response

    @app.exception_handler(Exception)
    async def server_error(request: Request, exc: Exception):
        logger.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
        return _error(500, "Internal server error")

    @app.get("/health")
    def health() -> dict:
        stats = container.rate_limit.stats()
        return {
            "success": True,
            "message": "VIC State District API is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": settings.API_VERSION,
            "rateLimit": {
                "admitted": stats.admitted,
                "rejected": stats.rejected,
                "trackedClients": stats.tracked_clients,
            },
        }

    @app.get("/")
    def root() -> dict:
        return {
            "success": True,
            "message": "Welcome to VIC State District API",
            "authentication": {"required": settings.API_KEY is not None, "headers": API_KEY_HEADERS},
            "rateLimit": {
                "requests": settings.RATE_LIMIT_MAX_REQUESTS,
                "windowMs": settings.RATE_LIMIT_WINDOW_MS,
            },
            "endpoints": ENDPOINTS,
        }

    @app.get("/mps/data", response_model=DirectoryResponse)
    def mps_data():
        return get_directory()

    @app.get("/mps/summary", response_model=SummaryResponse)
    def mps_summary():
        return get_directory_summary()

    @app.post(
        "/api/postcode_lookup",
        response_model=PostcodeLookupResponse,
        dependencies=[Depends(enforce_rate_limit)],
    )
    def postcode_lookup_post(body: PostcodeLookupRequest):
        return lookup_postcode(body.postcode)

    @app.get(
        "/api/postcode_lookup/{postcode}",
        response_model=PostcodeLookupResponse,
        dependencies=[Depends(enforce_rate_limit)],
    )
    def postcode_lookup_get(postcode: str):
        return lookup_postcode(postcode)

    @app.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
    def fallback(path: str):
        return _error(404, "Endpoint not found", availableEndpoints=ENDPOINTS)

    return app


app = create_app()
