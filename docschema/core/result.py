"""Success / failure values returned by every keyword validator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from docschema.errors import ValidationError


@dataclass(frozen=True)
class Ok:
    valid = True
    error = None

    def unwrap(self) -> None:
        return None


@dataclass(frozen=True)
class Err:
    error: ValidationError
    valid = False

    def unwrap(self) -> None:
        raise self.error

    def prefixed(self, key: str) -> "Err":
        return Err(self.error.prefixed(key))


Result = Union[Ok, Err]

OK = Ok()


def check(condition: bool, message: str, data: object) -> Result:
    """Return ``OK`` when ``condition`` holds, otherwise an ``Err``."""
    if condition:
        return OK
    return Err(ValidationError(message, data))


__all__ = ["OK", "Err", "Ok", "Result", "check"]
