"""Pydantic models shared by the HTTP routers."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ValidateRequest(BaseModel):
    """Ad-hoc validation of a document against an inline schema."""

    model_config = ConfigDict(populate_by_name=True)

    schema_: Dict[str, Any] = Field(..., alias="schema", description="Schema in wire format")
    document: Any = Field(..., description="Document as (Extended) JSON")


class CollectionValidateRequest(BaseModel):
    """Validation of a document against a registered collection."""

    document: Any = Field(..., description="Document as (Extended) JSON")


class ErrorPayload(BaseModel):
    """Serializable view of a ValidationError."""

    message: str
    path: str = ""
    data: Any = None


class ValidateResponse(BaseModel):
    """Outcome of a validation request."""

    valid: bool
    collection: Optional[str] = None
    error: Optional[ErrorPayload] = None


class CollectionSummaryPayload(BaseModel):
    name: str
    title: Optional[str] = None
    description: Optional[str] = None
    required: List[str] = Field(default_factory=list)


__all__ = [
    "CollectionSummaryPayload",
    "CollectionValidateRequest",
    "ErrorPayload",
    "ValidateRequest",
    "ValidateResponse",
]
