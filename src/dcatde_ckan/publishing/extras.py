"""Ordered, key-unique storage for CKAN package extras."""

from __future__ import annotations

from typing import Iterator


class ExtrasMap:
    """Ordered key/value map serialized as CKAN's ``[{"key": ..., "value": ...}]`` list.

    Keys keep the position of their first insertion; writing an existing key replaces
    its value in place.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def upsert(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Extra '{key}' must be a string, got {type(value).__name__}")
        self._entries[key] = value

    def get(self, key: str) -> str | None:
        return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def as_entries(self) -> list[dict[str, str]]:
        return [{"key": key, "value": value} for key, value in self._entries.items()]

    def __repr__(self) -> str:
        return f"ExtrasMap({self._entries!r})"
