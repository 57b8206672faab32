"""Flat scalar configuration store with dynamic attribute access.

Example usage:
```python
from scalarconf import ScalarStore

config = ScalarStore()
config.verbose = True
config["retries"] = 3

config.verbose                  # True
getattr(config, "quiet?")       # None, the query form never raises
config.get("quiet")             # None
config.data                     # {"verbose": True, "retries": 3}

config = ScalarStore.load("settings.txt")   # JSON, or YAML after fallback
config.save("settings.yaml")                # written in config.format
```

Entries whose names collide with store methods or properties (``data``,
``format``, ``get``, ``keys`` and so on) are reachable through index access
only.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any, Dict, Optional, Union

from .coercion import ScalarValue, coerce_key, coerce_value, validate_key, validate_scalar
from .exceptions import KeyNotFoundError
from .formats import Format, FormatResolver, Source, Target


def _tagged(data: Mapping) -> Dict[Any, tuple]:
    # bool is an int subclass; compare kinds too so True != 1.
    return {key: (type(value), value) for key, value in data.items()}


class ScalarStore(MutableMapping):
    """Mapping from string keys to str, int, or bool values.

    Every store owns its backing dict and its format. Attribute reads, writes
    and queries, as well as index access, go through :meth:`dispatch`.
    """

    def __init__(
        self,
        source: Optional[Mapping] = None,
        format: Union[Format, str] = Format.JSON,
    ) -> None:
        """Initialize the store.

        Args:
            source: Optional mapping to coerce and load.
            format: Format used when the store is saved.
        """
        object.__setattr__(self, "_data", {})
        object.__setattr__(self, "_format", Format.parse(format))
        if source is not None:
            self.load_mapping(source)

    # Construction

    @classmethod
    def from_mapping(cls, source: Mapping) -> "ScalarStore":
        """Create a store from an arbitrary mapping, coercing keys and values."""
        return cls(source)

    @classmethod
    def load(
        cls,
        source: Source,
        format: Optional[Union[Format, str]] = None,
        resolver: Optional[FormatResolver] = None,
    ) -> "ScalarStore":
        """Create a store from a path, a readable stream, or a mapping.

        See :meth:`FormatResolver.load` for how the format is inferred.
        """
        return (resolver or FormatResolver()).load(source, cls(), format)

    # Primitive operations

    def fetch(self, key: str) -> ScalarValue:
        """Return the value for ``key``.

        Raises:
            KeyNotFoundError: If the key is absent.
        """
        try:
            return self._data[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def get(self, key: str, default: Any = None) -> Optional[ScalarValue]:
        """Return the value for ``key``, or ``default`` if it is absent."""
        return self._data.get(key, default)

    def set(self, key: str, value: ScalarValue) -> ScalarValue:
        """Insert or overwrite ``key``.

        Raises:
            InvalidKeyError: If ``key`` is not a non-empty string.
            InvalidValueError: If ``value`` is not a str, int, or bool.
        """
        self._data[validate_key(key)] = validate_scalar(value)
        return value

    def has(self, key: str) -> bool:
        return key in self._data

    def delete(self, key: str) -> None:
        """Remove ``key``; raises KeyNotFoundError if it is absent."""
        try:
            del self._data[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def load_mapping(self, source: Mapping) -> "ScalarStore":
        """Coerce every pair of ``source`` into the store.

        Keys become strings; values become bool, then int, then str, in that
        order of preference. Existing keys are overwritten. Nothing is stored
        if any key fails to coerce.
        """
        pending = {coerce_key(key): coerce_value(value) for key, value in source.items()}
        self._data.update(pending)
        return self

    @property
    def data(self) -> Dict[str, ScalarValue]:
        """The live backing dict; changes to it change the store."""
        return self._data

    @property
    def format(self) -> Format:
        return self._format

    @format.setter
    def format(self, value: Union[Format, str]) -> None:
        self._format = Format.parse(value)

    # Dynamic access

    def dispatch(self, name: str, *args: Any) -> Optional[ScalarValue]:
        """Route a dynamic access onto a primitive operation.

        ``name`` is either an index operator or an entry name with an optional
        trailing marker:

        - ``"[]"``, key: strict read
        - ``"[]?"``, key[, default]: query read, never raises
        - ``"[]="``, key, value: write
        - ``"name"``: strict read of ``name``
        - ``"name?"``: query read of ``name``
        - ``"name="``, value: write ``name``

        Raises:
            KeyNotFoundError: On a strict read of an absent key.
            TypeError: If the arguments do not fit the access form.
        """
        if name == "[]":
            self._expect_args(name, args, 1)
            return self.fetch(args[0])
        if name == "[]?":
            if len(args) not in (1, 2):
                raise TypeError(f"{name!r} takes a key and an optional default")
            return self.get(*args)
        if name == "[]=":
            self._expect_args(name, args, 2)
            return self.set(args[0], args[1])
        if name.endswith("="):
            self._expect_args(name, args, 1)
            return self.set(name[:-1], args[0])
        if name.endswith("?"):
            self._expect_args(name, args, 0)
            return self.get(name[:-1])
        self._expect_args(name, args, 0)
        return self.fetch(name)

    @staticmethod
    def _expect_args(name: str, args: tuple, count: int) -> None:
        if len(args) != count:
            raise TypeError(f"{name!r} takes {count} argument(s), got {len(args)}")

    def __getattr__(self, name: str) -> Optional[ScalarValue]:
        # Only reached when normal lookup fails. Operator and write forms are
        # not readable attributes.
        if name.startswith(("_", "[")) or name.endswith("="):
            raise AttributeError(name)
        return self.dispatch(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        attr = getattr(type(self), name, None)
        if isinstance(attr, property):
            object.__setattr__(self, name, value)
        elif attr is not None:
            raise AttributeError(
                f"{name!r} is a ScalarStore attribute; use store[{name!r}] = ... instead"
            )
        else:
            self.dispatch(f"{name}=", value)

    def __delattr__(self, name: str) -> None:
        if name.startswith("_") or hasattr(type(self), name):
            object.__delattr__(self, name)
        else:
            self.delete(name)

    def __dir__(self) -> list:
        names = set(super().__dir__())
        names.update(key for key in self._data if key.isidentifier())
        return sorted(names)

    # Mapping protocol

    def __getitem__(self, key: str) -> ScalarValue:
        return self.dispatch("[]", key)

    def __setitem__(self, key: str, value: ScalarValue) -> None:
        self.dispatch("[]=", key, value)

    def __delitem__(self, key: str) -> None:
        self.delete(key)

    def __contains__(self, key: object) -> bool:
        return self.has(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return _tagged(self._data) == _tagged(other)

    def __repr__(self) -> str:
        fmt = getattr(self._format, "value", self._format)
        return f"{type(self).__name__}({self._data!r}, format={fmt!r})"

    # Serialization

    def dumps(self, resolver: Optional[FormatResolver] = None) -> str:
        """Return the store serialized in its current format."""
        return (resolver or FormatResolver()).dumps(self)

    def save(self, target: Target, resolver: Optional[FormatResolver] = None) -> None:
        """Write the store to a path or stream, or merge it into a mapping."""
        (resolver or FormatResolver()).dump(self, target)


__all__ = ["ScalarStore"]
