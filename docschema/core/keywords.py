"""Keyword validators, grouped by the concern they apply to.

Every validator has the signature ``(value, data, schema) -> Result`` where
``value`` is the keyword's value, ``data`` the value under test and
``schema`` the enclosing schema node (read by ``minimum``/``maximum`` for
the exclusive flags and by the ``additional*`` keywords). Validators are
only called by the dispatcher, which guarantees that ``value`` is set and
that ``data`` has the runtime shape the group expects.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Sequence, Union

from docschema.errors import ValidationError

from .classifiers import classify
from .kinds import values_equal
from .partition import compile_pattern, partition_properties
from .result import OK, Err, Result, check
from .schema import Schema


class LogicalKeyword(str, Enum):
    ALL_OF = "allOf"
    ANY_OF = "anyOf"
    ONE_OF = "oneOf"
    NOT = "not"
    ENUM = "enum"


class TypeKeyword(str, Enum):
    TYPE = "type"
    BSON_TYPE = "bsonType"


class StringKeyword(str, Enum):
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    PATTERN = "pattern"


class NumberKeyword(str, Enum):
    MULTIPLE_OF = "multipleOf"
    MINIMUM = "minimum"
    MAXIMUM = "maximum"


class ArrayKeyword(str, Enum):
    MIN_ITEMS = "minItems"
    MAX_ITEMS = "maxItems"
    UNIQUE_ITEMS = "uniqueItems"
    ITEMS = "items"
    ADDITIONAL_ITEMS = "additionalItems"


class ObjectKeyword(str, Enum):
    MIN_PROPERTIES = "minProperties"
    MAX_PROPERTIES = "maxProperties"
    REQUIRED = "required"
    PROPERTIES = "properties"
    PATTERN_PROPERTIES = "patternProperties"
    ADDITIONAL_PROPERTIES = "additionalProperties"
    DEPENDENCIES = "dependencies"


Keyword = Union[LogicalKeyword, TypeKeyword, StringKeyword, NumberKeyword, ArrayKeyword, ObjectKeyword]
KeywordValidator = Callable[[Any, Any, Schema], Result]

_FIELD_BY_WIRE_NAME: Dict[str, str] = {
    (info.alias or name): name for name, info in Schema.model_fields.items()
}


def keyword_value(schema: Schema, keyword: Keyword) -> Any:
    return getattr(schema, _FIELD_BY_WIRE_NAME[keyword.value])


def _evaluate(schema: Schema, data: Any) -> Result:
    from .validate import evaluate

    return evaluate(schema, data)


# ---------------------------------------------------------------------------
# logical


def all_of(value: Sequence[Schema], data: Any, schema: Schema) -> Result:
    for branch in value:
        result = _evaluate(branch, data)
        if not result.valid:
            return result
    return OK


def any_of(value: Sequence[Schema], data: Any, schema: Schema) -> Result:
    matched = any(_evaluate(branch, data).valid for branch in value)
    return check(matched, "Value does not match any schema in anyOf.", data)


def one_of(value: Sequence[Schema], data: Any, schema: Schema) -> Result:
    matches = sum(1 for branch in value if _evaluate(branch, data).valid)
    return check(
        matches == 1,
        f"Value matches {matches} schemas in oneOf, expected exactly one.",
        data,
    )


def not_(value: Schema, data: Any, schema: Schema) -> Result:
    return check(not _evaluate(value, data).valid, "Value must not match the schema in not.", data)


def enum_(value: Sequence[Any], data: Any, schema: Schema) -> Result:
    found = any(values_equal(candidate, data) for candidate in value)
    return check(found, f"Value {data!r} is not defined in enum.", data)


# ---------------------------------------------------------------------------
# type


def _type_names(value: Union[str, Sequence[str]]) -> List[str]:
    return [value] if isinstance(value, str) else list(value)


def _matches_type(names: List[str], data: Any, extended: bool) -> bool:
    if not names:
        return True
    for name in names:
        # unknown names never constrain
        matched = classify(name, data, extended=extended)
        if matched is None or matched:
            return True
    return False


def type_(value: Union[str, Sequence[str]], data: Any, schema: Schema) -> Result:
    names = _type_names(value)
    return check(
        _matches_type(names, data, extended=False),
        f"Invalid type, expected {' or '.join(names)}.",
        data,
    )


def bson_type(value: Union[str, Sequence[str]], data: Any, schema: Schema) -> Result:
    names = _type_names(value)
    return check(
        _matches_type(names, data, extended=True),
        f"Invalid BSON type, expected {' or '.join(names)}.",
        data,
    )


# ---------------------------------------------------------------------------
# scalar


def min_length(value: int, data: str, schema: Schema) -> Result:
    if value < 0:
        return OK
    return check(
        len(data) >= value,
        f'String "{data}" is shorter than the minimum length of {value}.',
        data,
    )


def max_length(value: int, data: str, schema: Schema) -> Result:
    if value < 0:
        return OK
    return check(
        len(data) <= value,
        f'String "{data}" exceeds the maximum length of {value}.',
        data,
    )


def pattern(value: str, data: str, schema: Schema) -> Result:
    return check(
        compile_pattern(value).search(data) is not None,
        f'String "{data}" does not match the pattern {value}.',
        data,
    )


def multiple_of(value: Union[int, float], data: Union[int, float], schema: Schema) -> Result:
    if value <= 0:
        return OK
    return check(data % value == 0, f"Number {data} is not a multiple of {value}.", data)


def minimum(value: Union[int, float], data: Union[int, float], schema: Schema) -> Result:
    if schema.exclusive_minimum:
        return check(data > value, f"Number {data} must be greater than {value}.", data)
    return check(data >= value, f"Number {data} is less than the minimum value of {value}.", data)


def maximum(value: Union[int, float], data: Union[int, float], schema: Schema) -> Result:
    if schema.exclusive_maximum:
        return check(data < value, f"Number {data} must be less than {value}.", data)
    return check(data <= value, f"Number {data} exceeds the maximum value of {value}.", data)


# ---------------------------------------------------------------------------
# array


def min_items(value: int, data: Sequence[Any], schema: Schema) -> Result:
    if value < 0:
        return OK
    return check(
        len(data) >= value,
        f"Array item count {len(data)} is less than the minimum count of {value}.",
        data,
    )


def max_items(value: int, data: Sequence[Any], schema: Schema) -> Result:
    if value < 0:
        return OK
    return check(
        len(data) <= value,
        f"Array item count {len(data)} exceeds the maximum count of {value}.",
        data,
    )


def unique_items(value: bool, data: Sequence[Any], schema: Schema) -> Result:
    if not value:
        return OK
    for index, item in enumerate(data):
        for other in data[index + 1 :]:
            if values_equal(item, other):
                return Err(ValidationError("Array items are not unique.", data))
    return OK


def items(value: Union[Schema, Sequence[Schema]], data: Sequence[Any], schema: Schema) -> Result:
    if isinstance(value, Schema):
        pairs = ((value, item) for item in data)
    else:
        # tuple mode: elements past the tuple belong to additionalItems
        pairs = zip(value, data)
    for item_schema, item in pairs:
        result = _evaluate(item_schema, item)
        if not result.valid:
            return result
    return OK


def _owned_items(schema: Schema) -> int | None:
    if schema.items is None:
        return None
    if isinstance(schema.items, Schema):
        return 1
    return len(schema.items)


def additional_items(value: Union[bool, Schema], data: Sequence[Any], schema: Schema) -> Result:
    owned = _owned_items(schema)
    if owned is None:
        return OK
    surplus = data[owned:]
    if isinstance(value, bool):
        return check(value or not surplus, "Additional items are not allowed.", data)
    for item in surplus:
        result = _evaluate(value, item)
        if not result.valid:
            return result
    return OK


# ---------------------------------------------------------------------------
# object


def min_properties(value: int, data: Mapping[str, Any], schema: Schema) -> Result:
    if value < 0:
        return OK
    return check(
        len(data) >= value,
        f"Object property count {len(data)} is less than the minimum count of {value}.",
        data,
    )


def max_properties(value: int, data: Mapping[str, Any], schema: Schema) -> Result:
    if value < 0:
        return OK
    return check(
        len(data) <= value,
        f"Object property count {len(data)} exceeds the maximum count of {value}.",
        data,
    )


def required(value: Sequence[str], data: Mapping[str, Any], schema: Schema) -> Result:
    missing = [key for key in value if key not in data]
    return check(
        not missing,
        f"Object is missing required properties: {', '.join(missing)}.",
        data,
    )


def _property(key: str, data: Mapping[str, Any], property_schema: Schema) -> Result:
    result = _evaluate(property_schema, data[key])
    if isinstance(result, Err):
        return result.prefixed(key)
    return result


def properties(value: Mapping[str, Schema], data: Mapping[str, Any], schema: Schema) -> Result:
    for key, property_schema in value.items():
        if key not in data:
            continue
        result = _property(key, data, property_schema)
        if not result.valid:
            return result
    return OK


def pattern_properties(
    value: Mapping[str, Schema], data: Mapping[str, Any], schema: Schema
) -> Result:
    partition = partition_properties(data, schema.properties, value)
    for key, property_schema in partition.pattern_keys or ():
        result = _property(key, data, property_schema)
        if not result.valid:
            return result
    return OK


def additional_properties(
    value: Union[bool, Schema], data: Mapping[str, Any], schema: Schema
) -> Result:
    partition = partition_properties(data, schema.properties, schema.pattern_properties)
    if not partition.additional_keys:
        return OK
    if isinstance(value, bool):
        return check(
            value,
            f"Additional properties are not allowed: {', '.join(partition.additional_keys)}.",
            data,
        )
    for key in partition.additional_keys:
        result = _property(key, data, value)
        if not result.valid:
            return result
    return OK


def dependencies(
    value: Mapping[str, Union[Sequence[str], Schema]], data: Mapping[str, Any], schema: Schema
) -> Result:
    for key, dependency in value.items():
        if key not in data:
            continue
        if isinstance(dependency, Schema):
            result = _evaluate(dependency, data)
            if not result.valid:
                return result
            continue
        missing = [name for name in dependency if name not in data]
        if missing:
            return Err(
                ValidationError(
                    f"Property {key!r} requires properties: {', '.join(missing)}.", data
                )
            )
    return OK


VALIDATORS: Dict[Keyword, KeywordValidator] = {
    LogicalKeyword.ALL_OF: all_of,
    LogicalKeyword.ANY_OF: any_of,
    LogicalKeyword.ONE_OF: one_of,
    LogicalKeyword.NOT: not_,
    LogicalKeyword.ENUM: enum_,
    TypeKeyword.TYPE: type_,
    TypeKeyword.BSON_TYPE: bson_type,
    StringKeyword.MIN_LENGTH: min_length,
    StringKeyword.MAX_LENGTH: max_length,
    StringKeyword.PATTERN: pattern,
    NumberKeyword.MULTIPLE_OF: multiple_of,
    NumberKeyword.MINIMUM: minimum,
    NumberKeyword.MAXIMUM: maximum,
    ArrayKeyword.MIN_ITEMS: min_items,
    ArrayKeyword.MAX_ITEMS: max_items,
    ArrayKeyword.UNIQUE_ITEMS: unique_items,
    ArrayKeyword.ITEMS: items,
    ArrayKeyword.ADDITIONAL_ITEMS: additional_items,
    ObjectKeyword.MIN_PROPERTIES: min_properties,
    ObjectKeyword.MAX_PROPERTIES: max_properties,
    ObjectKeyword.REQUIRED: required,
    ObjectKeyword.PROPERTIES: properties,
    ObjectKeyword.PATTERN_PROPERTIES: pattern_properties,
    ObjectKeyword.ADDITIONAL_PROPERTIES: additional_properties,
    ObjectKeyword.DEPENDENCIES: dependencies,
}


__all__ = [
    "ArrayKeyword",
    "Keyword",
    "LogicalKeyword",
    "NumberKeyword",
    "ObjectKeyword",
    "StringKeyword",
    "TypeKeyword",
    "VALIDATORS",
    "keyword_value",
]
