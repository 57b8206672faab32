"""Scalar value coercion.

Values read from JSON or YAML trees, or handed over in an arbitrary mapping,
are folded into one of three kinds before they are stored:

1. booleans stay booleans,
2. otherwise integers stay integers,
3. otherwise the value is rendered as text.

Interpretation is by the parsed kind of the value. A string holding the text
``"true"`` or ``"123"`` is kept as that string; nothing is re-parsed.

Note:
    The boolean-first priority applies to whatever the parser produced.
    PyYAML follows YAML 1.1, so unquoted ``yes``, ``on``, ``no`` and
    ``off`` load as booleans and are stored as such. Quote them in the
    source if text is intended.
"""

from __future__ import annotations

import json
from typing import Any, Union

from pydantic import StrictBool, StrictInt, StrictStr, TypeAdapter, ValidationError

from .exceptions import InvalidKeyError, InvalidValueError

ScalarValue = Union[bool, int, str]

_SCALAR_ADAPTER: TypeAdapter[ScalarValue] = TypeAdapter(
    Union[StrictBool, StrictInt, StrictStr]
)


def _render(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def coerce_key(key: Any) -> str:
    """Return the text form of a source key.

    Args:
        key: Any hashable key taken from a parsed tree or mapping.

    Returns:
        The key as a string. Booleans render lowercase so the YAML key
        ``true:`` and the JSON key ``"true"`` land on the same entry.

    Raises:
        InvalidKeyError: If the rendered key is empty.
    """
    text = key if isinstance(key, str) else _render(key)
    if not text:
        raise InvalidKeyError(f"Configuration keys must be non-empty, got {key!r}")
    return text


def coerce_value(value: Any) -> ScalarValue:
    """Fold an untyped value into a ScalarValue (bool, then int, then str)."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        return value
    return _render(value)


def validate_scalar(value: Any) -> ScalarValue:
    """Check that ``value`` already is a string, integer, or boolean.

    Raises:
        InvalidValueError: For floats, None, containers and anything else.
    """
    try:
        return _SCALAR_ADAPTER.validate_python(value)
    except ValidationError as e:
        raise InvalidValueError(
            f"Configuration values must be str, int or bool, got {type(value).__name__}"
        ) from e


def validate_key(key: Any) -> str:
    """Check that ``key`` is a non-empty string."""
    if not isinstance(key, str) or not key:
        raise InvalidKeyError(f"Configuration keys must be non-empty strings, got {key!r}")
    return key


__all__ = ["ScalarValue", "coerce_key", "coerce_value", "validate_scalar", "validate_key"]
