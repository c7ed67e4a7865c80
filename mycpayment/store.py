"""Typed collections kept in a shared key-value store."""

from __future__ import annotations

import copy
from collections.abc import Iterator, MutableMapping
from typing import Any, Generic, TypeVar

from mycpayment.errors import NotFoundError

K = TypeVar("K", str, int)
V = TypeVar("V")

_UINT64_MAX = (1 << 64) - 1


def _check_uint64(value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if not 0 <= value <= _UINT64_MAX:
        raise ValueError(f"value {value} does not fit in an unsigned 64-bit integer")
    return value


class Item(Generic[V]):
    """A single value stored under a prefix."""

    def __init__(self, store: MutableMapping[bytes, Any], prefix: bytes, name: str = "") -> None:
        self._store = store
        self.prefix = bytes(prefix)
        self.name = name

    def get(self) -> V:
        """Return the stored value, raising NotFoundError if none is set."""
        try:
            return copy.deepcopy(self._store[self.prefix])
        except KeyError:
            raise NotFoundError(self.name or self.prefix) from None

    def set(self, value: V) -> None:
        self._store[self.prefix] = copy.deepcopy(value)

    def has(self) -> bool:
        return self.prefix in self._store


class Sequence:
    """A monotonically increasing counter starting at zero."""

    def __init__(self, store: MutableMapping[bytes, Any], prefix: bytes, name: str = "") -> None:
        self._store = store
        self.prefix = bytes(prefix)
        self.name = name

    def next(self) -> int:
        """Return the current value and advance the counter."""
        current = self.peek()
        self._store[self.prefix] = _check_uint64(current + 1)
        return current

    def peek(self) -> int:
        """Return the current value without advancing."""
        return self._store.get(self.prefix, 0)

    def set(self, value: int) -> None:
        self._store[self.prefix] = _check_uint64(value)


class Map(Generic[K, V]):
    """Values keyed by strings or unsigned integers, kept in key order.

    String keys are stored as their UTF-8 bytes and integer keys as
    eight big-endian bytes, so iteration follows byte order.
    """

    def __init__(
        self,
        store: MutableMapping[bytes, Any],
        prefix: bytes,
        key_type: type,
        name: str = "",
    ) -> None:
        if key_type not in (str, int):
            raise TypeError("map keys must be str or int")
        self._store = store
        self.prefix = bytes(prefix)
        self.key_type = key_type
        self.name = name

    def encode_key(self, key: K) -> bytes:
        """Return the stored form of a key, without the map prefix."""
        if self.key_type is int:
            return _check_uint64(key).to_bytes(8, "big")
        if not isinstance(key, str):
            raise TypeError(f"expected a string key, got {type(key).__name__}")
        return key.encode()

    def decode_key(self, raw: bytes) -> K:
        """Turn the stored form of a key back into the key."""
        if self.key_type is int:
            if len(raw) != 8:
                raise ValueError(f"integer key must be 8 bytes, got {len(raw)}")
            return int.from_bytes(raw, "big")
        return raw.decode()

    def get(self, key: K) -> V:
        """Return the value for a key, raising NotFoundError if absent."""
        try:
            return copy.deepcopy(self._store[self.prefix + self.encode_key(key)])
        except KeyError:
            raise NotFoundError(key) from None

    def set(self, key: K, value: V) -> None:
        self._store[self.prefix + self.encode_key(key)] = copy.deepcopy(value)

    def has(self, key: K) -> bool:
        return self.prefix + self.encode_key(key) in self._store

    def remove(self, key: K) -> None:
        """Delete a key; removing an absent key does nothing."""
        self._store.pop(self.prefix + self.encode_key(key), None)

    def _raw_keys(self) -> list[bytes]:
        return sorted(
            raw[len(self.prefix) :] for raw in self._store if raw.startswith(self.prefix)
        )

    def walk(self) -> Iterator[tuple[K, V]]:
        """Yield every key and value in key order."""
        for raw in self._raw_keys():
            yield self.decode_key(raw), copy.deepcopy(self._store[self.prefix + raw])

    def items_from(self, start: bytes | None) -> Iterator[tuple[bytes, V]]:
        """Yield stored keys and values whose stored key is at least start."""
        for raw in self._raw_keys():
            if start is None or raw >= start:
                yield raw, copy.deepcopy(self._store[self.prefix + raw])