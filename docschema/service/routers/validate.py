"""Ad-hoc validation endpoint."""
from __future__ import annotations

import re
from typing import Any

from bson.errors import BSONError
from fastapi import APIRouter, HTTPException

from docschema.core import Result, Schema, parse_schema, safe_validate
from docschema.errors import SchemaError
from docschema.models.api import ErrorPayload, ValidateRequest, ValidateResponse
from docschema.observability import log_validation
from docschema.service.codec import decode_document, encode_value

router = APIRouter(tags=["validate"])


def decode_or_400(value: Any) -> Any:
    try:
        return decode_document(value)
    except (ValueError, TypeError, BSONError) as exc:
        raise HTTPException(status_code=400, detail=f"Invalid Extended JSON: {exc}") from exc


def run_validation(schema: Schema, document: Any, collection: str | None = None) -> ValidateResponse:
    try:
        result: Result = safe_validate(schema, document)
    except re.error as exc:
        raise HTTPException(status_code=422, detail=f"Invalid pattern in schema: {exc}") from exc
    log_validation(collection, result.valid, result.error.dotted_path if result.error else None)
    if result.valid:
        return ValidateResponse(valid=True, collection=collection)
    error = result.error
    return ValidateResponse(
        valid=False,
        collection=collection,
        error=ErrorPayload(message=error.message, path=error.dotted_path, data=encode_value(error.data)),
    )


@router.post("/validate", response_model=ValidateResponse)
def validate_inline(payload: ValidateRequest) -> ValidateResponse:
    """Validate a document against a schema sent with the request."""
    try:
        schema = parse_schema(decode_or_400(payload.schema_))
    except SchemaError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return run_validation(schema, decode_or_400(payload.document))
