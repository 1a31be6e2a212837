from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest
from bson import ObjectId

from docschema import (
    Err,
    Ok,
    Schema,
    SchemaError,
    ValidationError,
    evaluate,
    is_valid,
    parse_schema,
    safe_validate,
    validate,
)
from docschema.core.keywords import (
    VALIDATORS,
    ArrayKeyword,
    LogicalKeyword,
    NumberKeyword,
    ObjectKeyword,
    StringKeyword,
    TypeKeyword,
)


@pytest.mark.parametrize('data', [None, {}, [], 'x', 0, True, ObjectId()])
def test_metadata_only_schema_accepts_everything(data) -> None:
    validate({'title': 'Anything', 'description': 'no constraints'}, data)
    validate({}, data)


def test_unknown_keywords_are_ignored() -> None:
    schema = parse_schema({'format': 'email', '$ref': '#/definitions/x', 'x-extra': 1})
    assert not schema.has_validation_keywords()
    validate(schema, 42)


def test_type_string() -> None:
    validate({'type': 'string'}, '')
    validate({'type': 'string'}, 'hello')
    for data in (1, None, [], {}, True):
        with pytest.raises(ValidationError):
            validate({'type': 'string'}, data)


def test_type_list_matches_any_name() -> None:
    schema = {'type': ['string', 'null']}
    validate(schema, None)
    validate(schema, 'x')
    with pytest.raises(ValidationError) as excinfo:
        validate(schema, 1)
    assert excinfo.value.message == 'Invalid type, expected string or null.'


def test_type_list_with_unknown_name_never_fails() -> None:
    validate({'type': ['string', 'integer']}, 1)


def test_type_and_bson_type_are_both_checked() -> None:
    schema = {'type': 'number', 'bsonType': 'int'}
    validate(schema, 3)
    with pytest.raises(ValidationError, match='Invalid BSON type, expected int'):
        validate(schema, 3.5)
    with pytest.raises(ValidationError, match='Invalid type, expected number'):
        validate(schema, 'x')


def test_bson_int_and_double_are_complements_on_numbers() -> None:
    for data in (0, 7, -2, 7.0):
        validate({'bsonType': 'int'}, data)
        assert not is_valid({'bsonType': 'double'}, data)
    for data in (0.5, -2.25):
        validate({'bsonType': 'double'}, data)
        assert not is_valid({'bsonType': 'int'}, data)
    for data in ('7', None, [7]):
        assert not is_valid({'bsonType': 'int'}, data)
        assert not is_valid({'bsonType': 'double'}, data)


def test_minimum_inclusive_and_exclusive() -> None:
    validate({'minimum': 5}, 5)
    with pytest.raises(ValidationError):
        validate({'minimum': 5}, 4)
    with pytest.raises(ValidationError):
        validate({'minimum': 5, 'exclusiveMinimum': True}, 5)
    validate({'minimum': 5, 'exclusiveMinimum': True}, 6)


def test_maximum_inclusive_and_exclusive() -> None:
    validate({'maximum': 5}, 5)
    with pytest.raises(ValidationError):
        validate({'maximum': 5}, 6)
    with pytest.raises(ValidationError):
        validate({'maximum': 5, 'exclusiveMaximum': True}, 5)
    validate({'maximum': 5, 'exclusiveMaximum': True}, 4.99)


def test_required_checks_presence_not_truthiness() -> None:
    with pytest.raises(ValidationError, match='missing required properties: a'):
        validate({'required': ['a']}, {})
    validate({'required': ['a']}, {'a': None})
    validate({'required': ['a']}, {'a': 0})
    with pytest.raises(ValidationError):
        validate({'required': ['a']}, {'b': 1})


def test_required_is_case_sensitive() -> None:
    with pytest.raises(ValidationError):
        validate({'required': ['Name']}, {'name': 'x'})


def test_nested_property_failure_carries_path() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate({'properties': {'a': {'type': 'number'}}}, {'a': 'x'})
    error = excinfo.value
    assert error.dotted_path == 'a'
    assert error.path == ('a',)
    assert error.data == 'x'
    assert str(error) == 'a: Invalid type, expected number.'


def test_deep_property_path_is_dotted() -> None:
    schema = {
        'bsonType': 'object',
        'properties': {'foo': {'bsonType': 'object', 'properties': {'bar': {'bsonType': 'string'}}}},
    }
    with pytest.raises(ValidationError) as excinfo:
        validate(schema, {'foo': {'bar': 1}})
    assert excinfo.value.dotted_path == 'foo.bar'
    assert excinfo.value.key == 'foo'
    assert excinfo.value.data == 1


def test_one_of_requires_exactly_one_match() -> None:
    schema = {'oneOf': [{'type': 'string'}, {'minLength': 3}]}
    with pytest.raises(ValidationError, match='matches 2 schemas'):
        validate(schema, 'abcde')
    validate(schema, 'a')


def test_additional_properties_false() -> None:
    schema = {'properties': {'a': {}}, 'additionalProperties': False}
    with pytest.raises(ValidationError, match='not allowed: b'):
        validate(schema, {'a': 1, 'b': 2})
    validate(schema, {'a': 1})


def test_fail_fast_reports_first_keyword_in_order() -> None:
    # enum is evaluated before type, type before scalar keywords
    schema = {'enum': ['a'], 'type': 'number', 'minLength': 5}
    with pytest.raises(ValidationError, match='not defined in enum'):
        validate(schema, 'bb')
    schema = {'type': 'number', 'minLength': 5}
    with pytest.raises(ValidationError, match='Invalid type'):
        validate(schema, 'bb')


def test_scalar_keywords_ignore_other_shapes() -> None:
    schema = {'minLength': 3, 'minimum': 10, 'minItems': 2, 'minProperties': 2}
    validate(schema, 'abc')
    validate(schema, 10)
    validate(schema, [1, 2])
    validate(schema, {'a': 1, 'b': 2})
    validate(schema, None)
    validate(schema, True)


def test_safe_validate_returns_result_instead_of_raising() -> None:
    schema = {'properties': {'a': {'type': 'number'}}}
    ok = safe_validate(schema, {'a': 1})
    assert isinstance(ok, Ok)
    assert ok.valid is True
    assert ok.error is None

    failed = safe_validate(schema, {'a': 'x'})
    assert isinstance(failed, Err)
    assert failed.valid is False
    with pytest.raises(ValidationError) as excinfo:
        validate(schema, {'a': 'x'})
    raised = excinfo.value
    assert failed.error.message == raised.message
    assert failed.error.path == raised.path
    assert failed.error.data == raised.data


def test_evaluate_is_idempotent() -> None:
    schema = parse_schema({'type': 'object', 'required': ['a'], 'properties': {'a': {'minimum': 1}}})
    data = {'a': 0}
    results = [evaluate(schema, data) for _ in range(5)]
    assert all(not result.valid for result in results)
    assert {result.error.message for result in results} == {results[0].error.message}
    assert data == {'a': 0}


def test_schema_is_shareable_across_threads() -> None:
    schema = parse_schema({'type': 'object', 'properties': {'n': {'bsonType': 'int', 'maximum': 50}}})

    def run(n: int) -> bool:
        return is_valid(schema, {'n': n})

    with ThreadPoolExecutor(max_workers=8) as pool:
        outcomes = list(pool.map(run, range(100)))
    assert outcomes == [n <= 50 for n in range(100)]


def test_schema_is_immutable() -> None:
    schema = parse_schema({'minimum': 1})
    with pytest.raises(Exception):
        schema.minimum = 2  # type: ignore[misc]


def test_json_schema_wrapper_is_unwrapped() -> None:
    schema = parse_schema({'$jsonSchema': {'bsonType': 'object', 'required': ['a']}})
    assert schema.required == ('a',)


@pytest.mark.parametrize(
    'raw',
    [
        {'type': 5},
        {'bsonType': ['int', 7]},
        {'exclusiveMinimum': 5},
        {'required': 'a'},
        {'minLength': 2.5},
        {'uniqueItems': 'no'},
        {'items': [{'type': 'string'}, 3]},
        {'not': 'string'},
    ],
)
def test_wrongly_shaped_keywords_are_ignored(raw) -> None:
    schema = parse_schema(raw)
    assert not schema.has_validation_keywords()
    assert schema.to_wire() == {}
    assert safe_validate(raw, [1, 1]) == Ok()
    validate(raw, 'x')


def test_wrongly_shaped_keyword_leaves_siblings_in_force() -> None:
    schema = {'minimum': 3, 'exclusiveMinimum': 1}
    assert is_valid(schema, 3)
    assert not is_valid(schema, 2)

    nested = {'properties': {'a': {'type': 5, 'minLength': 2}}}
    assert is_valid(nested, {'a': 'xy'})
    result = safe_validate(nested, {'a': 'x'})
    assert isinstance(result, Err)
    assert result.error.path == ('a',)


def test_non_mapping_schema_raises_schema_error() -> None:
    with pytest.raises(SchemaError):
        parse_schema(['type', 'string'])  # type: ignore[arg-type]
    with pytest.raises(SchemaError):
        evaluate({'$jsonSchema': 'object'}, {})


def test_sequence_keywords_cannot_be_mutated() -> None:
    schema = parse_schema(
        {'required': ['a'], 'enum': [{'a': 1}], 'allOf': [{'type': 'object'}], 'items': [{}]}
    )
    assert isinstance(schema.required, tuple)
    assert isinstance(schema.enum_, tuple)
    assert isinstance(schema.all_of, tuple)
    assert isinstance(schema.items, tuple)
    with pytest.raises(AttributeError):
        schema.required.append('b')  # type: ignore[union-attr]
    assert schema.to_wire()['required'] == ['a']


def test_snake_case_names_are_accepted() -> None:
    schema = Schema(min_length=2, bson_type='string')
    assert schema.to_wire() == {'minLength': 2, 'bsonType': 'string'}
    assert not is_valid(schema, 'a')


def test_every_keyword_has_a_validator() -> None:
    groups = (LogicalKeyword, TypeKeyword, StringKeyword, NumberKeyword, ArrayKeyword, ObjectKeyword)
    for group in groups:
        for keyword in group:
            assert keyword in VALIDATORS
