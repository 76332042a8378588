"""Shared data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class GraphValue:
    """One object of a statement: literal text or a URI string."""

    text: str
    datatype: str | None = None
    is_literal: bool = True


@dataclass(slots=True)
class CkanResource:
    id: str | None
    access_url: str | None = None
    name: str | None = None
    checksum: str | None = None
    byte_size: int = 0
    format: str | None = None
    mime_type: str | None = None
