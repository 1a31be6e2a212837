"""Runtime settings for the validation service."""
from __future__ import annotations

import math
import os
from pathlib import Path
from types import SimpleNamespace

ROOT = Path(__file__).resolve().parents[1]


def _default_collections_dir() -> Path:
    return ROOT / "config" / "collections"


def _compute_collections_dir() -> Path:
    override = os.getenv("COLLECTIONS_DIR")
    if override:
        return Path(override).expanduser()
    return _default_collections_dir()


def _comma_separated_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


ENV = os.getenv("ENV", os.getenv("ENVIRONMENT", "development")).strip().lower()
ENVIRONMENT = os.getenv("ENVIRONMENT", ENV).strip().lower()
ALLOWED_CORS_ORIGINS = _comma_separated_list(os.getenv("ALLOWED_ORIGINS"))

COLLECTIONS_DIR = _compute_collections_dir().resolve()

MAX_DOCUMENT_MB = int(os.getenv("MAX_DOCUMENT_MB", "4"))
MAX_DOCUMENT_BYTES = int(os.getenv("MAX_DOCUMENT_BYTES", str(MAX_DOCUMENT_MB * 1024 * 1024)))
if MAX_DOCUMENT_BYTES < MAX_DOCUMENT_MB * 1024 * 1024:
    MAX_DOCUMENT_BYTES = MAX_DOCUMENT_MB * 1024 * 1024
else:
    MAX_DOCUMENT_MB = max(MAX_DOCUMENT_MB, math.ceil(MAX_DOCUMENT_BYTES / (1024 * 1024)))

RATE_LIMIT_REQUESTS = int(os.getenv("RATE_LIMIT_REQUESTS", "120"))
RATE_LIMIT_WINDOW_SECONDS = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))

settings = SimpleNamespace(
    ENV=ENV,
    ENVIRONMENT=ENVIRONMENT,
    ALLOWED_ORIGINS=ALLOWED_CORS_ORIGINS,
    ALLOWED_CORS_ORIGINS=ALLOWED_CORS_ORIGINS,
    COLLECTIONS_DIR=COLLECTIONS_DIR,
    MAX_DOCUMENT_MB=MAX_DOCUMENT_MB,
    MAX_DOCUMENT_BYTES=MAX_DOCUMENT_BYTES,
    RATE_LIMIT_REQUESTS=RATE_LIMIT_REQUESTS,
    RATE_LIMIT_WINDOW_SECONDS=RATE_LIMIT_WINDOW_SECONDS,
)

__all__ = [
    "ENV",
    "ENVIRONMENT",
    "ALLOWED_CORS_ORIGINS",
    "COLLECTIONS_DIR",
    "MAX_DOCUMENT_MB",
    "MAX_DOCUMENT_BYTES",
    "RATE_LIMIT_REQUESTS",
    "RATE_LIMIT_WINDOW_SECONDS",
    "ROOT",
    "settings",
]
