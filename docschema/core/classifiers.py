"""Primitive type classifiers for the ``type`` and ``bsonType`` keywords."""
from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from .kinds import DataKind, is_integral, kind_of

Classifier = Callable[[Any, DataKind], bool]


def _kind(expected: DataKind) -> Classifier:
    return lambda data, kind: kind == expected


def _int(data: Any, kind: DataKind) -> bool:
    return kind == DataKind.NUMBER and is_integral(data)


def _double(data: Any, kind: DataKind) -> bool:
    return kind == DataKind.NUMBER and not is_integral(data)


JSON_TYPES: Mapping[str, Classifier] = {
    "null": _kind(DataKind.NULL),
    "boolean": _kind(DataKind.BOOLEAN),
    "string": _kind(DataKind.STRING),
    "number": _kind(DataKind.NUMBER),
    "array": _kind(DataKind.ARRAY),
    "object": _kind(DataKind.OBJECT),
}

# A hex string is deliberately not an objectId; only bson.ObjectId is.
BSON_TYPES: Mapping[str, Classifier] = {
    "null": JSON_TYPES["null"],
    "bool": JSON_TYPES["boolean"],
    "string": JSON_TYPES["string"],
    "array": JSON_TYPES["array"],
    "object": JSON_TYPES["object"],
    "int": _int,
    "double": _double,
    "long": _kind(DataKind.LONG),
    "decimal": _kind(DataKind.DECIMAL),
    "date": _kind(DataKind.DATE),
    "timestamp": _kind(DataKind.TIMESTAMP),
    "objectId": _kind(DataKind.OBJECT_ID),
    "binData": _kind(DataKind.BINARY),
}


def classify(type_name: str, data: Any, extended: bool = False) -> Optional[bool]:
    """Return whether ``data`` is a ``type_name``, or ``None`` for unknown names."""
    table = BSON_TYPES if extended else JSON_TYPES
    classifier = table.get(type_name) if isinstance(type_name, str) else None
    if classifier is None:
        return None
    return classifier(data, kind_of(data))


__all__ = ["BSON_TYPES", "JSON_TYPES", "classify"]
