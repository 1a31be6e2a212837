"""Collection registry endpoints."""
from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException

from docschema.catalog import Collection, collection_summaries, resolve_collection
from docschema.models.api import (
    CollectionSummaryPayload,
    CollectionValidateRequest,
    ValidateResponse,
)
from docschema.service.codec import encode_value
from docschema.service.routers.validate import decode_or_400, run_validation

router = APIRouter(tags=["collections"])


def _collection_or_404(name: str) -> Collection:
    try:
        return resolve_collection(name)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=exc.args[0]) from exc


@router.get("/collections", response_model=List[CollectionSummaryPayload])
def list_collections():
    """Return lightweight collection summaries."""
    return collection_summaries()


@router.get("/collections/{name}/schema")
def collection_schema(name: str) -> Dict[str, Any]:
    collection = _collection_or_404(name)
    return {"name": collection.name, "schema": encode_value(collection.schema.to_wire())}


@router.post("/collections/{name}/validate", response_model=ValidateResponse)
def validate_for_collection(name: str, payload: CollectionValidateRequest) -> ValidateResponse:
    """Validate a document against a registered collection validator."""
    collection = _collection_or_404(name)
    return run_validation(collection.schema, decode_or_400(payload.document), collection.name)
