"""Validate decoded documents against JSON Schema with MongoDB bsonType support."""
from __future__ import annotations

from docschema.build import B, SchemaBuilder
from docschema.core import (
    Err,
    Ok,
    Result,
    Schema,
    evaluate,
    is_valid,
    parse_schema,
    safe_validate,
    validate,
)
from docschema.errors import SchemaError, ValidationError

__version__ = "0.1.0"

__all__ = [
    "B",
    "Err",
    "Ok",
    "Result",
    "Schema",
    "SchemaBuilder",
    "SchemaError",
    "ValidationError",
    "evaluate",
    "is_valid",
    "parse_schema",
    "safe_validate",
    "validate",
]
