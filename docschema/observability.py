"""Structured logging and metrics for the validation service."""
from __future__ import annotations

import logging
import sys
import time
import uuid

import structlog
from fastapi import FastAPI, Request
from prometheus_fastapi_instrumentator import Instrumentator


def init_logging(level: int = logging.INFO) -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
    logging.basicConfig(stream=sys.stdout, level=level)


def attach_instrumentation(app: FastAPI) -> None:
    Instrumentator().instrument(app).expose(app, endpoint="/metrics")

    @app.middleware("http")
    async def _request_log(request: Request, call_next):
        # validation events logged while handling carry the request id
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=uuid.uuid4().hex[:12])
        start = time.perf_counter()
        resp = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        structlog.get_logger("docschema.request").info(
            "req",
            path=request.url.path,
            method=request.method,
            status=resp.status_code,
            duration_ms=round(elapsed_ms, 2),
        )
        return resp


def log_validation(collection: str | None, valid: bool, path: str | None = None) -> None:
    """Emit one structured event per validated document."""
    structlog.get_logger("docschema.validation").info(
        "validated",
        collection=collection,
        valid=valid,
        path=path,
    )
