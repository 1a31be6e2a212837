"""Side-effect-free helpers for assembling schemas in code.

Every method returns a new builder, so partially built schemas can be shared
and extended without affecting each other::

    user = B.object({"name": B.string().min_length(1), "age": B.int().nullable()})
    schema = user.required(["name"]).build()
"""
from __future__ import annotations

import copy
import enum
from types import SimpleNamespace
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Union

from docschema.core.schema import Schema, parse_schema

SchemaInput = Union["SchemaBuilder", Schema, Mapping[str, Any]]


def _wire(value: SchemaInput) -> Dict[str, Any]:
    if isinstance(value, SchemaBuilder):
        return value.to_dict()
    if isinstance(value, Schema):
        return value.to_wire()
    return dict(value)


def _bool_or_wire(value: Union[bool, SchemaInput]) -> Union[bool, Dict[str, Any]]:
    return value if isinstance(value, bool) else _wire(value)


class SchemaBuilder:
    """Immutable accumulator of wire-format keywords."""

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any] | None = None) -> None:
        self._fields: Dict[str, Any] = dict(fields or {})

    def _set(self, keyword: str, value: Any) -> "SchemaBuilder":
        fields = dict(self._fields)
        fields[keyword] = value
        return SchemaBuilder(fields)

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._fields)

    def build(self) -> Schema:
        return parse_schema(self.to_dict())

    def __repr__(self) -> str:
        return f"SchemaBuilder({self._fields!r})"

    # metadata -----------------------------------------------------------
    def title(self, title: str) -> "SchemaBuilder":
        return self._set("title", title)

    def description(self, description: str) -> "SchemaBuilder":
        return self._set("description", description)

    # logical ------------------------------------------------------------
    def all_of(self, schemas: Iterable[SchemaInput]) -> "SchemaBuilder":
        return self._set("allOf", [_wire(schema) for schema in schemas])

    def any_of(self, schemas: Iterable[SchemaInput]) -> "SchemaBuilder":
        return self._set("anyOf", [_wire(schema) for schema in schemas])

    def one_of(self, schemas: Iterable[SchemaInput]) -> "SchemaBuilder":
        return self._set("oneOf", [_wire(schema) for schema in schemas])

    def not_(self, schema: SchemaInput) -> "SchemaBuilder":
        return self._set("not", _wire(schema))

    def enum(self, values: Union[Iterable[Any], Mapping[str, Any], type]) -> "SchemaBuilder":
        """Accepts values, a mapping (its values are used) or an ``enum.Enum`` class."""
        if isinstance(values, type) and issubclass(values, enum.Enum):
            members: List[Any] = [member.value for member in values]
        elif isinstance(values, Mapping):
            members = list(values.values())
        else:
            members = list(values)
        return self._set("enum", members)

    # type ---------------------------------------------------------------
    def type(self, type_name: Union[str, Sequence[str]]) -> "SchemaBuilder":
        return self._set("type", type_name if isinstance(type_name, str) else list(type_name))

    def bson_type(self, type_name: Union[str, Sequence[str]]) -> "SchemaBuilder":
        return self._set("bsonType", type_name if isinstance(type_name, str) else list(type_name))

    def nullable(self) -> "SchemaBuilder":
        """Also accept ``null`` on whichever type axis is already set."""
        keyword = "type" if "type" in self._fields else "bsonType" if "bsonType" in self._fields else None
        if keyword is None:
            raise ValueError("A type must be specified before calling nullable()")
        current = self._fields[keyword]
        names = [current] if isinstance(current, str) else list(current)
        if "null" not in names:
            names.append("null")
        return self._set(keyword, names)

    # scalar -------------------------------------------------------------
    def min_length(self, min_length: int = 0) -> "SchemaBuilder":
        return self._set("minLength", min_length)

    def max_length(self, max_length: int = 0) -> "SchemaBuilder":
        return self._set("maxLength", max_length)

    def pattern(self, pattern: str) -> "SchemaBuilder":
        return self._set("pattern", pattern)

    def multiple_of(self, multiple_of: Union[int, float]) -> "SchemaBuilder":
        return self._set("multipleOf", multiple_of)

    def minimum(self, minimum: Union[int, float] = 0, exclusive: bool = False) -> "SchemaBuilder":
        return self._set("minimum", minimum)._set("exclusiveMinimum", exclusive)

    def maximum(self, maximum: Union[int, float], exclusive: bool = False) -> "SchemaBuilder":
        return self._set("maximum", maximum)._set("exclusiveMaximum", exclusive)

    # array --------------------------------------------------------------
    def min_items(self, min_items: int = 0) -> "SchemaBuilder":
        return self._set("minItems", min_items)

    def max_items(self, max_items: int) -> "SchemaBuilder":
        return self._set("maxItems", max_items)

    def unique_items(self, unique_items: bool = True) -> "SchemaBuilder":
        return self._set("uniqueItems", unique_items)

    def items(self, items: Union[SchemaInput, Sequence[SchemaInput]]) -> "SchemaBuilder":
        if isinstance(items, (list, tuple)):
            return self._set("items", [_wire(item) for item in items])
        return self._set("items", _wire(items))

    def additional_items(self, additional: Union[bool, SchemaInput]) -> "SchemaBuilder":
        return self._set("additionalItems", _bool_or_wire(additional))

    # object -------------------------------------------------------------
    def min_properties(self, min_properties: int = 0) -> "SchemaBuilder":
        return self._set("minProperties", min_properties)

    def max_properties(self, max_properties: int) -> "SchemaBuilder":
        return self._set("maxProperties", max_properties)

    def required(self, required: Iterable[str] = ()) -> "SchemaBuilder":
        return self._set("required", list(required))

    def properties(self, properties: Mapping[str, SchemaInput]) -> "SchemaBuilder":
        return self._set("properties", {key: _wire(value) for key, value in properties.items()})

    def pattern_properties(self, pattern_properties: Mapping[str, SchemaInput]) -> "SchemaBuilder":
        return self._set(
            "patternProperties", {key: _wire(value) for key, value in pattern_properties.items()}
        )

    def additional_properties(self, additional: Union[bool, SchemaInput]) -> "SchemaBuilder":
        return self._set("additionalProperties", _bool_or_wire(additional))

    def dependencies(
        self, dependencies: Mapping[str, Union[SchemaInput, Sequence[str]]]
    ) -> "SchemaBuilder":
        wired: Dict[str, Any] = {}
        for key, value in dependencies.items():
            wired[key] = list(value) if isinstance(value, (list, tuple)) else _wire(value)
        return self._set("dependencies", wired)


def _array(items: Union[SchemaInput, Sequence[SchemaInput], None] = None) -> SchemaBuilder:
    builder = SchemaBuilder().type("array")
    return builder if items is None else builder.items(items)


def _object(properties: Mapping[str, SchemaInput] | None = None) -> SchemaBuilder:
    builder = SchemaBuilder().type("object")
    return builder if properties is None else builder.properties(properties)


B = SimpleNamespace(
    any=lambda: SchemaBuilder(),
    all_of=lambda schemas: SchemaBuilder().all_of(schemas),
    any_of=lambda schemas: SchemaBuilder().any_of(schemas),
    one_of=lambda schemas: SchemaBuilder().one_of(schemas),
    not_=lambda schema: SchemaBuilder().not_(schema),
    enum=lambda values: SchemaBuilder().enum(values),
    null=lambda: SchemaBuilder().type("null"),
    string=lambda: SchemaBuilder().type("string"),
    number=lambda: SchemaBuilder().type("number"),
    array=_array,
    object=_object,
    int=lambda: SchemaBuilder().bson_type("int"),
    long=lambda: SchemaBuilder().bson_type("long"),
    double=lambda: SchemaBuilder().bson_type("double"),
    decimal=lambda: SchemaBuilder().bson_type("decimal"),
    date=lambda: SchemaBuilder().bson_type("date"),
    timestamp=lambda: SchemaBuilder().bson_type("timestamp"),
    object_id=lambda: SchemaBuilder().bson_type("objectId"),
    bin_data=lambda: SchemaBuilder().bson_type("binData"),
)

__all__ = ["B", "SchemaBuilder"]
