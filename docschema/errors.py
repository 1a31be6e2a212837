"""Error types raised by the validation engine."""
from __future__ import annotations

from typing import Any, Dict, Iterable, Tuple


class SchemaError(ValueError):
    """Raised when a raw mapping cannot be turned into a Schema."""


class ValidationError(Exception):
    """A single failed keyword check.

    ``data`` is the value that failed its check, which may be nested deep
    inside the top-level input. ``path`` only records object keys walked on
    the way down; array indices and logical branches are not part of it.
    """

    def __init__(self, message: str, data: Any = None, path: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.data = data
        self.path: Tuple[str, ...] = tuple(path)

    @property
    def dotted_path(self) -> str:
        return ".".join(self.path)

    @property
    def key(self) -> str | None:
        """Outermost object key the failure was reached through."""
        return self.path[0] if self.path else None

    def prefixed(self, key: str) -> "ValidationError":
        return ValidationError(self.message, self.data, (key, *self.path))

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "path": self.dotted_path, "data": self.data}

    def __str__(self) -> str:
        if self.path:
            return f"{self.dotted_path}: {self.message}"
        return self.message

    def __repr__(self) -> str:
        return f"ValidationError({self.message!r}, path={self.dotted_path!r})"


__all__ = ["SchemaError", "ValidationError"]
