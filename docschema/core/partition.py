"""Split an object's keys between properties, patternProperties and the rest."""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, List, Mapping, Optional, Tuple

from .schema import Schema


@lru_cache(maxsize=512)
def compile_pattern(source: str) -> re.Pattern[str]:
    return re.compile(source)


@dataclass(frozen=True)
class PropertyPartition:
    """Keys of an object that are not declared in ``properties``.

    At most one side is populated: when every undeclared key is claimed by a
    pattern the partition is ``pattern_keys``; as soon as one key is left
    unclaimed it is ``additional_keys`` and the claimed keys are dropped.
    """

    pattern_keys: Optional[Tuple[Tuple[str, Schema], ...]] = None
    additional_keys: Optional[Tuple[str, ...]] = None


def partition_properties(
    data: Mapping[str, Any],
    properties: Optional[Mapping[str, Schema]],
    pattern_properties: Optional[Mapping[str, Schema]],
) -> PropertyPartition:
    declared = properties or {}
    other_keys = [key for key in data if key not in declared]
    if not other_keys:
        return PropertyPartition()

    patterns = [
        (compile_pattern(source), schema) for source, schema in (pattern_properties or {}).items()
    ]
    claimed: List[Tuple[str, Schema]] = []
    unclaimed: List[str] = []
    for key in other_keys:
        # first matching pattern wins, in declaration order
        for pattern, schema in patterns:
            if pattern.search(key):
                claimed.append((key, schema))
                break
        else:
            unclaimed.append(key)

    if unclaimed:
        return PropertyPartition(additional_keys=tuple(unclaimed))
    return PropertyPartition(pattern_keys=tuple(claimed))


__all__ = ["PropertyPartition", "compile_pattern", "partition_properties"]
