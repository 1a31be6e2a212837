"""Load named collection validators and expose lookup helpers."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Iterable, List

from bson import json_util
from bson.errors import BSONError

from docschema.core import Result, Schema, evaluate, parse_schema
from docschema.errors import SchemaError
from docschema.settings import COLLECTIONS_DIR

LOGGER = logging.getLogger(__name__)

CollectionSummary = Dict[str, object]


@dataclass(frozen=True)
class Collection:
    name: str
    schema: Schema
    description: str | None = None
    source: Path | None = None


_by_name: Dict[str, Collection] = {}
_by_name_lower: Dict[str, Collection] = {}


def _read_collection(path: Path) -> Collection:
    # Extended JSON lets enum values carry ObjectIds, dates and longs.
    raw: Any = json_util.loads(path.read_text())
    if not isinstance(raw, dict):
        raise SchemaError("collection file must hold a JSON object")
    validator = raw.get("validator")
    if validator is None:
        raise SchemaError("collection file has no 'validator'")
    return Collection(
        name=str(raw.get("name") or path.stem),
        schema=parse_schema(validator),
        description=raw.get("description"),
        source=path,
    )


def _load_collections(directory: Path) -> Dict[str, Collection]:
    collections: Dict[str, Collection] = {}
    if not directory.is_dir():
        LOGGER.warning("Collections directory %s does not exist; registry is empty.", directory)
        return collections
    for path in sorted(directory.glob("*.json")):
        if path.name.startswith("_"):
            continue
        try:
            collection = _read_collection(path)
        except (ValueError, OSError, BSONError) as exc:
            LOGGER.warning("Skipping collection file %s: %s", path, exc)
            continue
        collections[collection.name] = collection
    return collections


def reload_registry(directory: Path | None = None) -> None:
    """Reload collection validators from disk."""
    global _by_name, _by_name_lower
    collections = _load_collections(directory or COLLECTIONS_DIR)
    _by_name = collections
    _by_name_lower = {name.lower(): collection for name, collection in collections.items()}


def all_collections() -> Iterable[Collection]:
    return _by_name.values()


def collection_summaries() -> List[CollectionSummary]:
    summaries: List[CollectionSummary] = [
        {
            "name": collection.name,
            "title": collection.schema.title,
            "description": collection.description or collection.schema.description,
            "required": list(collection.schema.required or []),
        }
        for collection in _by_name.values()
    ]
    summaries.sort(key=lambda item: str(item["name"]).lower())
    return summaries


def resolve_collection(name: str) -> Collection:
    if not name:
        raise KeyError("Collection name cannot be empty")
    token = name.strip()
    direct = _by_name.get(token) or _by_name_lower.get(token.lower())
    if direct:
        return direct
    matches = get_close_matches(token.lower(), list(_by_name_lower), n=1, cutoff=0.6)
    hint = f"; did you mean '{_by_name_lower[matches[0]].name}'?" if matches else ""
    raise KeyError(f"Collection '{name}' was not found in the registry{hint}")


def validate_document(name: str, document: Any) -> Result:
    """Check a decoded document against a registered collection validator."""
    return evaluate(resolve_collection(name).schema, document)


# Initial load during module import.
reload_registry()
