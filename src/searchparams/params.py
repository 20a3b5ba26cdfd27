"""Mutable, ordered query string parameters.

``SearchParams`` follows ``URLSearchParams``: keys can repeat, lookups
return the first value, and iteration yields one ``(key, value)`` pair
per stored value in encounter order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeAlias

from searchparams.codec import decode_component, encode_component, stringify
from searchparams.config import DEFAULT_CONFIG, ParseConfig

_MISSING: Any = object()

_TRUTHY = frozenset({"true", "1", "yes", "on"})

ForEachCallback: TypeAlias = Callable[[str, str, Any], object]


def _parse(query: str, config: ParseConfig) -> dict[str, list[str]]:
    """Parse a raw query string into a key -> values dict.

    Raises ``DecodeError`` on a malformed escape; nothing is returned in
    that case, so callers never see a half-built dict.
    """
    data: dict[str, list[str]] = {}

    if query.startswith("?"):
        query = query[1:]
    if not query:
        return data

    for segment in query.split(config.separator):
        key, eq, value = segment.partition("=")
        if not eq:
            # "a" and "a=" both give ("a", ""), but only the latter is decoded
            if config.decode_bare_keys:
                key = decode_component(key)
            value = ""
        else:
            key = decode_component(key)
            value = decode_component(value)

        if key in data:
            data[key].append(value)
        else:
            data[key] = [value]

    return data


class SearchParams:
    """Ordered multi-map of query parameters.

    Attributes:
        _data: Key -> values, in insertion order. Every list is non-empty.
        _raw: The query string this store was built from.
        _config: Parse and serialize options.

    Usage::

        params = SearchParams("?tag=python&tag=rust&q=hello+world")
        params.get("q")           # "hello world"
        params.get_all("tag")     # ["python", "rust"]
        params.append("page", 2)
        str(params)               # "tag=python&tag=rust&q=hello%20world&page=2"
    """

    __slots__ = ("_config", "_data", "_raw")

    def __init__(self, query: str = "", *, config: ParseConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._raw = query
        self._data = _parse(query, self._config)

    @property
    def raw(self) -> str:
        """The original query string, as passed to the constructor."""
        return self._raw

    @property
    def config(self) -> ParseConfig:
        return self._config

    # -- Lookup --

    def get(self, key: str) -> str | None:
        """Return the first value for *key*, or ``None`` if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return None

    def get_all(self, key: str) -> list[str]:
        """Return a copy of all values for *key* (``[]`` if missing)."""
        return list(self._data.get(key, ()))

    def has(self, key: str) -> bool:
        return key in self._data

    def get_int(self, key: str, default: int | None = None) -> int | None:
        """Parse the first value of *key* as an int.

        Later values are ignored, so ``page=2&page=x`` gives ``2``.
        Returns *default* when the key is absent or the first value is not
        an integer literal (``""`` included).
        """
        first = self.get(key)
        if first is None:
            return default
        try:
            return int(first)
        except ValueError:
            return default

    def get_bool(self, key: str, default: bool | None = None) -> bool | None:
        """Read the first value of *key* as a flag.

        ``true``, ``1``, ``yes`` and ``on`` (any case) are True; any other
        value, including the ``""`` of a bare ``?debug``, is False.
        """
        first = self.get(key)
        if first is None:
            return default
        return first.lower() in _TRUTHY

    # -- Mutation --

    def set(self, key: str, value: object) -> None:
        """Replace every value for *key* with *value*.

        An existing key keeps its place in the key order; a new key is
        added at the end. *value* is converted with ``stringify``.
        """
        self._data[key] = [stringify(value)]

    def append(self, key: str, value: object) -> None:
        """Add *value* for *key* without removing existing values."""
        text = stringify(value)
        if key in self._data:
            self._data[key].append(text)
        else:
            self._data[key] = [text]

    def delete(self, key: str) -> bool:
        """Remove *key* and all of its values. Return whether it existed."""
        return self._data.pop(key, None) is not None

    def sort(self) -> None:
        """Order keys by code point. Values of one key keep their order."""
        self._data = {key: self._data[key] for key in sorted(self._data)}

    def copy(self) -> SearchParams:
        """Return an independent store with the same entries."""
        clone = object.__new__(SearchParams)
        clone._config = self._config
        clone._raw = self._raw
        clone._data = {key: list(values) for key, values in self._data.items()}
        return clone

    # -- Iteration --

    def entries(self) -> Iterator[tuple[str, str]]:
        """Yield ``(key, value)`` once per stored value.

        Keys come in the store's current order; repeated keys are yielded
        once per value, in the order the values were added.

        The store may be changed while iterating, e.g. from a ``for_each``
        callback: deleted keys are skipped once reached, and keys added
        during the loop are visited at the end.
        """
        seen: set[str] = set()
        pending = list(self._data)
        while pending:
            for key in pending:
                seen.add(key)
                values = self._data.get(key)
                if values is None:
                    continue
                for value in values:
                    yield key, value
            pending = [key for key in self._data if key not in seen]

    def keys(self) -> Iterator[str]:
        for key, _ in self.entries():
            yield key

    def values(self) -> Iterator[str]:
        for _, value in self.entries():
            yield value

    def for_each(self, callback: ForEachCallback, context: Any = _MISSING) -> None:
        """Call ``callback(value, key, context)`` for every entry.

        *context* defaults to this store. Exceptions raised by *callback*
        propagate and stop the iteration.
        """
        if context is _MISSING:
            context = self
        for key, value in self.entries():
            callback(value, key, context)

    # -- Serialization --

    def to_string(self) -> str:
        """Return the entries as a percent-encoded query string (no ``?``).

        Spaces are written as ``%20``. Raises ``EncodeError`` if a key or
        value is not encodable as UTF-8.
        """
        return self._config.separator.join(
            f"{encode_component(key)}={encode_component(value)}" for key, value in self.entries()
        )

    # -- Dunder protocol --

    def __str__(self) -> str:
        return self.to_string()

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return self.entries()

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return key in self._data

    def __len__(self) -> int:
        return sum(len(values) for values in self._data.values())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SearchParams):
            return list(self.entries()) == list(other.entries())
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SearchParams({list(self.entries())!r})"
