"""Validate JSON / Extended JSON documents against a registered collection."""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Sequence

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from bson import json_util  # noqa: E402

from docschema.catalog import reload_registry, resolve_collection  # noqa: E402
from docschema.core import safe_validate  # noqa: E402


def _load_documents(path: Path) -> List[object]:
    documents = json_util.loads(path.read_text())
    # a top-level array is a batch of documents
    return documents if isinstance(documents, list) else [documents]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("collection", help="Registered collection name")
    parser.add_argument("files", nargs="+", type=Path, help="Document files")
    parser.add_argument("--collections-dir", type=Path, default=None)
    args = parser.parse_args(argv)

    if args.collections_dir is not None:
        reload_registry(args.collections_dir)
    try:
        collection = resolve_collection(args.collection)
    except KeyError as exc:
        print(exc.args[0], file=sys.stderr)
        return 2

    bad = 0
    for path in args.files:
        for index, document in enumerate(_load_documents(path)):
            result = safe_validate(collection.schema, document)
            if not result.valid:
                print(f"Invalid: {path}[{index}] {result.error}")
                bad += 1
    print("OK" if bad == 0 else f"{bad} invalid documents")
    return 0 if bad == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
