"""Serialization formats and format inference.

A source is read with the hinted format first and, when that fails, rewound
and read with the other one. Only when every attempt fails does the caller
see an error. Saving always uses the format recorded on the store.
"""

from __future__ import annotations

import io
import json
import os
from collections.abc import Mapping, MutableMapping
from enum import Enum
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, Dict, Optional, Tuple, Union

import yaml

from .exceptions import (
    InvalidFormatError,
    UnknownFormatError,
    UnreadableConfigSourceError,
    UnseekableSourceError,
)
from .utils.logging import get_logger

if TYPE_CHECKING:
    from .store import ScalarStore

logger = get_logger(__name__)

JSON_INDENT = 2
YAML_SUFFIXES = (".yml", ".yaml")

PathLike = Union[str, "os.PathLike[str]"]
Source = Union[PathLike, IO[Any], Mapping]
Target = Union[PathLike, IO[Any], MutableMapping]


class Format(str, Enum):
    """Serialization format of a store."""

    JSON = "json"
    YAML = "yaml"

    @classmethod
    def parse(cls, token: Union["Format", str]) -> "Format":
        """Return the Format for ``token``.

        Args:
            token: A Format member or the exact text ``"json"`` or ``"yaml"``.

        Raises:
            InvalidFormatError: For any other token, including other casings.
        """
        if isinstance(token, cls):
            return token
        try:
            return cls(str(token))
        except ValueError:
            raise InvalidFormatError(
                f"Unknown serialization format: {token}; must be 'json' or 'yaml'"
            ) from None

    @classmethod
    def from_path(cls, path: PathLike) -> "Format":
        """Guess the format from a file extension (YAML for .yml/.yaml)."""
        if Path(path).suffix.lower() in YAML_SUFFIXES:
            return cls.YAML
        return cls.JSON

    @property
    def other(self) -> "Format":
        return Format.YAML if self is Format.JSON else Format.JSON


def _parse_json(stream: IO[Any]) -> Any:
    return json.load(stream)


def _parse_yaml(stream: IO[Any]) -> Any:
    return yaml.safe_load(stream)


_PARSERS = {
    Format.JSON: _parse_json,
    Format.YAML: _parse_yaml,
}


class FormatResolver:
    """Reads and writes stores in JSON or YAML.

    The resolver itself holds no per-source state; one instance can serve any
    number of stores.
    """

    def __init__(self, json_indent: Optional[int] = JSON_INDENT) -> None:
        """Initialize the resolver.

        Args:
            json_indent: Indentation passed to ``json.dumps``; None for compact output.
        """
        self.json_indent = json_indent

    def parse(
        self, stream: IO[Any], hint: Union[Format, str] = Format.JSON
    ) -> Tuple[Dict[Any, Any], Format]:
        """Parse ``stream`` into a top-level mapping.

        The hinted format is tried first, then the other one. Between attempts
        the stream is rewound to the position it had when this was called.

        Args:
            stream: Readable, seekable text or binary stream.
            hint: Format to try first.

        Returns:
            Tuple of the parsed mapping and the format that parsed it.

        Raises:
            UnseekableSourceError: If the stream cannot be rewound.
            UnreadableConfigSourceError: If no format yields a mapping.
        """
        first = Format.parse(hint)
        seekable = getattr(stream, "seekable", None)
        if not callable(seekable) or not seekable():
            raise UnseekableSourceError(
                f"Cannot infer format of non-seekable stream {stream!r}"
            )
        start = stream.tell()

        last_error: Optional[Exception] = None
        for attempt, fmt in enumerate((first, first.other)):
            if attempt:
                stream.seek(start)
            try:
                tree = _PARSERS[fmt](stream)
            except (ValueError, yaml.YAMLError) as e:
                logger.debug(f"Source is not valid {fmt.value}: {e}")
                last_error = e
                continue
            if not isinstance(tree, Mapping):
                logger.debug(
                    f"Source parsed as {fmt.value} but top level is {type(tree).__name__}"
                )
                last_error = UnreadableConfigSourceError(
                    f"Top level of {fmt.value} source is not a mapping"
                )
                continue
            logger.debug(f"Source resolved as {fmt.value}")
            return dict(tree), fmt

        raise UnreadableConfigSourceError(
            "Configuration source is neither valid JSON nor valid YAML"
        ) from last_error

    def load(
        self,
        source: Source,
        store: Optional["ScalarStore"] = None,
        format: Optional[Union[Format, str]] = None,
    ) -> "ScalarStore":
        """Load ``source`` into a store.

        Args:
            source: A file path, an open readable stream, or a mapping.
            store: Store to load into; a new one is created when omitted.
            format: Format to try first. Defaults to the file extension's
                format for paths and JSON for streams.

        Returns:
            The store, with its format set to the format that parsed.

        Raises:
            InvalidFormatError: If ``format`` is not a known format token.
            UnreadableConfigSourceError: If the source is neither JSON nor YAML.
            InvalidKeyError: If the source holds an empty key (``""`` or ``null``).
        """
        if store is None:
            from .store import ScalarStore

            store = ScalarStore()

        if isinstance(source, Mapping):
            fmt = Format.parse(format) if format is not None else None
            store.load_mapping(source)
            if fmt is not None:
                store.format = fmt
            return store

        if isinstance(source, (str, os.PathLike)):
            path = Path(source)
            hint = Format.parse(format) if format is not None else Format.from_path(path)
            logger.debug(f"Loading configuration from {path} (trying {hint.value} first)")
            with open(path, "r", encoding="utf-8-sig") as fh:
                tree, resolved = self.parse(fh, hint)
        else:
            hint = Format.parse(format) if format is not None else Format.JSON
            tree, resolved = self.parse(source, hint)

        store.load_mapping(tree)
        store.format = resolved
        return store

    def dumps(self, store: "ScalarStore") -> str:
        """Serialize ``store`` in its recorded format.

        Raises:
            UnknownFormatError: If the store's format is neither JSON nor YAML.
        """
        fmt = store.format
        if fmt == Format.JSON:
            return json.dumps(store.data, indent=self.json_indent)
        if fmt == Format.YAML:
            return yaml.safe_dump(
                dict(store.data), default_flow_style=False, sort_keys=False
            )
        raise UnknownFormatError(f"Unknown serialization format: {fmt}")

    def dump(self, store: "ScalarStore", target: Target) -> None:
        """Write ``store`` to a path, a stream, or merge it into a mapping.

        Paths are truncated and rewritten. Mappings are updated in place with
        the store's entries, whatever the store's format.
        """
        if isinstance(target, MutableMapping):
            target.update(store.data)
            return

        text = self.dumps(store)
        if isinstance(target, (str, os.PathLike)):
            path = Path(target)
            logger.debug(f"Writing {store.format.value} configuration to {path}")
            with open(path, "w", encoding="utf-8") as fh:
                fh.write(text)
        elif isinstance(target, (io.RawIOBase, io.BufferedIOBase)):
            target.write(text.encode("utf-8"))
        else:
            target.write(text)


__all__ = ["Format", "FormatResolver", "JSON_INDENT", "YAML_SUFFIXES"]
