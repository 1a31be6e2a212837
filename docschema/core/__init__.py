"""Validation engine: schema model, classifiers, keyword validators, dispatcher."""
from __future__ import annotations

from .classifiers import BSON_TYPES, JSON_TYPES, classify
from .kinds import DataKind, kind_of, values_equal
from .partition import PropertyPartition, partition_properties
from .result import OK, Err, Ok, Result
from .schema import Schema, parse_schema
from .validate import evaluate, is_valid, safe_validate, validate

__all__ = [
    "BSON_TYPES",
    "DataKind",
    "Err",
    "JSON_TYPES",
    "OK",
    "Ok",
    "PropertyPartition",
    "Result",
    "Schema",
    "classify",
    "evaluate",
    "is_valid",
    "kind_of",
    "parse_schema",
    "partition_properties",
    "safe_validate",
    "validate",
    "values_equal",
]
