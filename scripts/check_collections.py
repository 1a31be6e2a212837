"""Check every collection definition file against config/collections/_collection.json."""
from __future__ import annotations

import json
import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from docschema.core import parse_schema, safe_validate  # noqa: E402
from docschema.errors import SchemaError  # noqa: E402

DIR = os.path.join(ROOT, "config", "collections")


def drops_keywords(validator: dict) -> bool:
    """True when parsing loses part of the validator (unknown or malformed keywords)."""
    try:
        schema = parse_schema(validator)
    except SchemaError:
        return True
    return schema.to_wire() != validator.get("$jsonSchema", validator)


def main(directory: str = DIR) -> int:
    with open(os.path.join(directory, "_collection.json")) as f:
        meta = parse_schema(json.load(f))

    bad = 0
    for fn in sorted(os.listdir(directory)):
        if not fn.endswith(".json") or fn.startswith("_"):
            continue
        with open(os.path.join(directory, fn)) as f:
            definition = json.load(f)
        result = safe_validate(meta, definition)
        if not result.valid:
            print("Invalid:", fn, result.error)
            bad += 1
        elif drops_keywords(definition["validator"]):
            print("Invalid:", fn, "validator has unknown or malformed keywords")
            bad += 1
    print("OK" if bad == 0 else f"{bad} invalid files")
    return 0 if bad == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
