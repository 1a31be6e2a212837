"""MongoDB Extended JSON conversion at the HTTP boundary."""
from __future__ import annotations

import json
from typing import Any

from bson import json_util
from bson.json_util import RELAXED_JSON_OPTIONS


def decode_document(value: Any) -> Any:
    """Turn parsed JSON carrying ``$oid``/``$date``/... wrappers into BSON values."""
    return json_util.loads(json.dumps(value))


def encode_value(value: Any) -> Any:
    """Inverse of ``decode_document``, producing relaxed Extended JSON."""
    return json.loads(json_util.dumps(value, json_options=RELAXED_JSON_OPTIONS))


__all__ = ["decode_document", "encode_value"]
