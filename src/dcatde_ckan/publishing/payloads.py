"""CKAN package and resource payloads built from DCAT-AP.de records."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from .extras import ExtrasMap


@dataclass(slots=True)
class PackagePayload:
    name: str
    title: str | None = None
    notes: str | None = None
    license_id: str | None = None
    owner_org: str | None = None
    groups: list[dict[str, str]] | None = None
    tags: list[dict[str, str]] | None = None
    extras: ExtrasMap = field(default_factory=ExtrasMap)

    def as_dict(self) -> dict[str, Any]:
        """Return the ``package_create`` body; unset fields are left out."""
        payload: dict[str, Any] = {"extras": self.extras.as_entries()}
        for item in fields(self):
            if item.name == "extras":
                continue
            value = getattr(self, item.name)
            if value is not None:
                payload[item.name] = value
        return payload


@dataclass(slots=True)
class ResourcePayload:
    package_id: str
    url: str | None = None
    access_url: str | None = None
    name: str | None = None
    description: str | None = None
    mimetype: str | None = None
    format: str | None = None
    license: str | None = None
    licenseAttributionByText: str | None = None
    hash: str | None = None
    hash_algorithm: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return the ``resource_create`` body; unset fields are left out."""
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }
