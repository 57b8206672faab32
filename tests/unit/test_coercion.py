"""Tests for scalar coercion helpers."""

import enum

import pytest

from scalarconf.coercion import coerce_key, coerce_value, validate_key, validate_scalar
from scalarconf.exceptions import InvalidKeyError, InvalidValueError


class _Level(enum.IntEnum):
    HIGH = 3


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, True),
        (False, False),
        (0, 0),
        (123, 123),
        (-5, -5),
        (_Level.HIGH, 3),
        ("text", "text"),
        ("true", "true"),
        ("123", "123"),
        ("", ""),
        (1.5, "1.5"),
        (2.0, "2.0"),
        (None, ""),
        ([1, "a"], '[1,"a"]'),
        ({"k": False}, '{"k":false}'),
    ],
)
def test_coerce_value(value, expected):
    result = coerce_value(value)

    assert result == expected
    assert type(result) is type(expected)


def test_coerce_value_prefers_bool_over_int():
    assert coerce_value(True) is True
    assert type(coerce_value(1)) is int


@pytest.mark.parametrize(
    "key,expected",
    [("name", "name"), (1, "1"), (True, "true"), (False, "false"), (1.5, "1.5")],
)
def test_coerce_key(key, expected):
    assert coerce_key(key) == expected


@pytest.mark.parametrize("key", ["", None])
def test_coerce_key_rejects_empty(key):
    with pytest.raises(InvalidKeyError):
        coerce_key(key)


@pytest.mark.parametrize("value", [True, 0, "s"])
def test_validate_scalar_accepts_scalars(value):
    assert validate_scalar(value) == value
    assert type(validate_scalar(value)) is type(value)


@pytest.mark.parametrize("value", [1.0, None, object(), (1,)])
def test_validate_scalar_rejects_others(value):
    with pytest.raises(InvalidValueError) as exc_info:
        validate_scalar(value)

    assert isinstance(exc_info.value, TypeError)


def test_validate_key():
    assert validate_key("k") == "k"
    with pytest.raises(InvalidKeyError):
        validate_key(b"k")
