"""Recursive evaluator walking a schema and a value in lock-step."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, List, Mapping, Type, Union

from .keywords import (
    VALIDATORS,
    ArrayKeyword,
    LogicalKeyword,
    NumberKeyword,
    ObjectKeyword,
    StringKeyword,
    TypeKeyword,
    keyword_value,
)
from .kinds import NUMERIC_KINDS, DataKind, kind_of
from .result import OK, Result
from .schema import Schema, parse_schema

LOGGER = logging.getLogger(__name__)

SchemaLike = Union[Schema, Mapping[str, Any]]


def _keyword_groups(kind: DataKind) -> List[Type[Enum]]:
    groups: List[Type[Enum]] = [LogicalKeyword, TypeKeyword]
    if kind == DataKind.STRING:
        groups.append(StringKeyword)
    elif kind in NUMERIC_KINDS:
        groups.append(NumberKeyword)
    elif kind == DataKind.ARRAY:
        groups.append(ArrayKeyword)
    elif kind == DataKind.OBJECT:
        groups.append(ObjectKeyword)
    return groups


def evaluate(schema: SchemaLike, data: Any) -> Result:
    """Check ``data`` against ``schema`` and return the first failure, if any."""
    schema = parse_schema(schema)
    if not schema.has_validation_keywords():
        return OK
    for group in _keyword_groups(kind_of(data)):
        for keyword in group:
            value = keyword_value(schema, keyword)
            if value is None:
                continue
            result = VALIDATORS[keyword](value, data, schema)
            if not result.valid:
                return result
    return OK


def validate(schema: SchemaLike, data: Any) -> None:
    """Raise ``ValidationError`` for the first keyword ``data`` violates."""
    result = evaluate(schema, data)
    if not result.valid:
        LOGGER.debug("Validation failed at %r: %s", result.error.dotted_path, result.error.message)
    result.unwrap()


def safe_validate(schema: SchemaLike, data: Any) -> Result:
    """Like ``validate`` but returns ``Ok``/``Err`` instead of raising."""
    return evaluate(schema, data)


def is_valid(schema: SchemaLike, data: Any) -> bool:
    return evaluate(schema, data).valid


__all__ = ["evaluate", "is_valid", "safe_validate", "validate"]
