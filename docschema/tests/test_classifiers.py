from __future__ import annotations

import datetime
import decimal

import pytest
from bson import Binary, Decimal128, Int64, ObjectId, Timestamp

from docschema.core import DataKind, classify, kind_of, values_equal


@pytest.mark.parametrize(
    'value, kind',
    [
        (None, DataKind.NULL),
        (True, DataKind.BOOLEAN),
        ('x', DataKind.STRING),
        (3, DataKind.NUMBER),
        (3.5, DataKind.NUMBER),
        (Int64(3), DataKind.LONG),
        (Decimal128('1.10'), DataKind.DECIMAL),
        (decimal.Decimal('1.10'), DataKind.DECIMAL),
        (datetime.datetime(2024, 1, 1), DataKind.DATE),
        (Timestamp(1, 1), DataKind.TIMESTAMP),
        (ObjectId(), DataKind.OBJECT_ID),
        (b'\x00', DataKind.BINARY),
        (Binary(b'\x00', 128), DataKind.BINARY),
        ([1], DataKind.ARRAY),
        ((1,), DataKind.ARRAY),
        ({'a': 1}, DataKind.OBJECT),
        (object(), DataKind.UNKNOWN),
    ],
)
def test_kind_of(value, kind) -> None:
    assert kind_of(value) is kind


def test_int_and_double_are_computed_from_the_value() -> None:
    assert classify('int', 4, extended=True) is True
    assert classify('int', 4.0, extended=True) is True
    assert classify('int', 4.5, extended=True) is False
    assert classify('double', 4.5, extended=True) is True
    assert classify('double', 4.0, extended=True) is False
    assert classify('double', float('nan'), extended=True) is True


def test_int_rejects_non_numbers() -> None:
    assert classify('int', '4', extended=True) is False
    assert classify('int', True, extended=True) is False
    assert classify('double', None, extended=True) is False


def test_long_is_distinct_from_number() -> None:
    assert classify('long', Int64(1), extended=True) is True
    assert classify('long', 1, extended=True) is False
    assert classify('number', Int64(1)) is False
    assert classify('int', Int64(1), extended=True) is False


def test_object_id_requires_native_identifier() -> None:
    oid = ObjectId()
    assert classify('objectId', oid, extended=True) is True
    assert classify('objectId', str(oid), extended=True) is False


def test_generic_and_extended_names_are_separate() -> None:
    assert classify('boolean', True) is True
    assert classify('bool', True, extended=True) is True
    # "bool" is not a generic name and "boolean" is not an extended one
    assert classify('bool', True) is None
    assert classify('boolean', True, extended=True) is None


def test_unknown_type_name_is_not_checked() -> None:
    assert classify('uuid', 'x', extended=True) is None
    assert classify('integer', 1) is None


def test_object_accepts_mappings_only() -> None:
    assert classify('object', {}) is True
    assert classify('object', []) is False
    assert classify('object', ObjectId(), extended=True) is False


def test_values_equal_keeps_booleans_apart_from_numbers() -> None:
    assert values_equal(1, 1.0)
    assert not values_equal(True, 1)
    assert not values_equal(0, False)
    assert values_equal({'a': [1, {'b': 2}]}, {'a': (1, {'b': 2})})
    assert not values_equal({'a': 1}, {'a': 1, 'b': 2})
    assert not values_equal([1, 2], [2, 1])
