"""Collection validator registry."""
from __future__ import annotations

from .registry import (
    Collection,
    CollectionSummary,
    all_collections,
    collection_summaries,
    reload_registry,
    resolve_collection,
    validate_document,
)

__all__ = [
    "Collection",
    "CollectionSummary",
    "all_collections",
    "collection_summaries",
    "reload_registry",
    "resolve_collection",
    "validate_document",
]
