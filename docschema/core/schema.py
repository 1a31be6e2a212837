"""Immutable schema model for the JSON Schema / bsonType dialect."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError
from pydantic import field_validator

from docschema.errors import SchemaError

METADATA_FIELDS = frozenset({"title", "description"})

Number = Union[StrictInt, StrictFloat]
TypeNames = Union[StrictStr, Tuple[StrictStr, ...]]


class Schema(BaseModel):
    """One node of a schema tree.

    Every keyword is optional. Wire names (``allOf``, ``bsonType``...) are the
    aliases; snake_case field names are accepted too. Keys the dialect does
    not know are dropped on parse, and so is a known keyword whose value has
    the wrong shape: ``{"minLength": "2"}`` parses like ``{}``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # metadata
    title: Optional[StrictStr] = None
    description: Optional[StrictStr] = None

    # logical
    all_of: Optional[Tuple[Schema, ...]] = Field(default=None, alias="allOf")
    any_of: Optional[Tuple[Schema, ...]] = Field(default=None, alias="anyOf")
    one_of: Optional[Tuple[Schema, ...]] = Field(default=None, alias="oneOf")
    not_: Optional[Schema] = Field(default=None, alias="not")
    enum_: Optional[Tuple[Any, ...]] = Field(default=None, alias="enum")

    # type
    type_: Optional[TypeNames] = Field(default=None, alias="type")
    bson_type: Optional[TypeNames] = Field(default=None, alias="bsonType")

    # scalar
    min_length: Optional[StrictInt] = Field(default=None, alias="minLength")
    max_length: Optional[StrictInt] = Field(default=None, alias="maxLength")
    pattern: Optional[StrictStr] = None
    multiple_of: Optional[Number] = Field(default=None, alias="multipleOf")
    minimum: Optional[Number] = None
    exclusive_minimum: Optional[StrictBool] = Field(default=None, alias="exclusiveMinimum")
    maximum: Optional[Number] = None
    exclusive_maximum: Optional[StrictBool] = Field(default=None, alias="exclusiveMaximum")

    # array
    min_items: Optional[StrictInt] = Field(default=None, alias="minItems")
    max_items: Optional[StrictInt] = Field(default=None, alias="maxItems")
    unique_items: Optional[StrictBool] = Field(default=None, alias="uniqueItems")
    items: Optional[Union[Schema, Tuple[Schema, ...]]] = None
    additional_items: Optional[Union[StrictBool, Schema]] = Field(default=None, alias="additionalItems")

    # object
    min_properties: Optional[StrictInt] = Field(default=None, alias="minProperties")
    max_properties: Optional[StrictInt] = Field(default=None, alias="maxProperties")
    required: Optional[Tuple[StrictStr, ...]] = None
    properties: Optional[Dict[str, Schema]] = None
    pattern_properties: Optional[Dict[str, Schema]] = Field(default=None, alias="patternProperties")
    additional_properties: Optional[Union[StrictBool, Schema]] = Field(
        default=None, alias="additionalProperties"
    )
    dependencies: Optional[Dict[str, Union[Tuple[StrictStr, ...], Schema]]] = None

    @field_validator("*", mode="wrap")
    @classmethod
    def _drop_malformed(cls, value: Any, handler: Any) -> Any:
        # a wrongly shaped keyword behaves as if it were absent
        try:
            return handler(value)
        except PydanticValidationError:
            return None

    def has_validation_keywords(self) -> bool:
        """False for schemas carrying nothing but ``title``/``description``."""
        return any(
            getattr(self, name) is not None for name in self.model_fields_set - METADATA_FIELDS
        )

    def to_wire(self) -> Dict[str, Any]:
        return _as_lists(self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True))


Schema.model_rebuild()


def _as_lists(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _as_lists(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_as_lists(item) for item in value]
    return value


def parse_schema(raw: Schema | Mapping[str, Any]) -> Schema:
    """Build a Schema from its wire mapping.

    A MongoDB validator document ``{"$jsonSchema": {...}}`` is unwrapped.
    Only a root that is not a mapping raises ``SchemaError``; anything inside
    it that cannot be read is ignored.
    """
    if isinstance(raw, Schema):
        return raw
    if not isinstance(raw, Mapping):
        raise SchemaError(f"Schema must be a mapping, got {type(raw).__name__}")
    if "$jsonSchema" in raw:
        raw = raw["$jsonSchema"]
        if not isinstance(raw, Mapping):
            raise SchemaError("$jsonSchema must be a mapping")
    return Schema.model_validate(dict(raw))


__all__ = ["METADATA_FIELDS", "Schema", "parse_schema"]
