"""FastAPI entrypoint for the document validation service."""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware

from docschema.catalog import all_collections
from docschema.observability import attach_instrumentation, init_logging
from docschema.service.routers import collections as collections_router
from docschema.service.routers import validate as validate_router
from docschema.settings import settings

app = FastAPI(title="Document Validation API", version="0.1.0")

# ---- Rate limiting ----
_rate_limit = f"{settings.RATE_LIMIT_REQUESTS}/{settings.RATE_LIMIT_WINDOW_SECONDS} seconds"
limiter = Limiter(key_func=get_remote_address, default_limits=[_rate_limit])
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


class DocumentSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject request bodies larger than the configured cap."""

    def __init__(self, app, max_bytes: int):
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(self, request: Request, call_next):
        cl = request.headers.get("content-length")
        if cl and cl.isdigit() and int(cl) > self.max_bytes:
            return JSONResponse(status_code=413, content={"detail": "Payload too large"})
        return await call_next(request)


app.add_middleware(DocumentSizeLimitMiddleware, max_bytes=settings.MAX_DOCUMENT_BYTES)

init_logging()
attach_instrumentation(app)


# Configure CORS differently for production vs development.
def _resolve_cors_origins() -> list[str]:
    if settings.ENVIRONMENT != "production":
        return ["*"]
    if not settings.ALLOWED_CORS_ORIGINS:
        raise RuntimeError("ALLOWED_ORIGINS must be set when ENVIRONMENT=production")
    return settings.ALLOWED_CORS_ORIGINS


app.add_middleware(
    CORSMiddleware,
    allow_origins=_resolve_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)


@app.get("/health", tags=["ops"])
def health() -> dict[str, object]:
    """Simple readiness probe."""
    return {"status": "ok", "collections": len(list(all_collections()))}


app.include_router(collections_router.router, prefix="/api")
app.include_router(validate_router.router, prefix="/api")

__all__ = ["app", "limiter"]
