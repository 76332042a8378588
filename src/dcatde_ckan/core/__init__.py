"""Shared core utilities for the DCAT-AP.de to CKAN publisher."""

from .config import Settings, get_settings
from .exceptions import (
    CatalogLookupError,
    CkanApiError,
    CkanConnectionError,
    DcatCkanError,
    MissingPropertyError,
    NotACollectionError,
    PackageNotFoundError,
)
from .logging import configure_logging
from .models import CkanResource, GraphValue

__all__ = [
    "Settings",
    "CkanResource",
    "GraphValue",
    "DcatCkanError",
    "MissingPropertyError",
    "CkanApiError",
    "CkanConnectionError",
    "CatalogLookupError",
    "PackageNotFoundError",
    "NotACollectionError",
    "get_settings",
    "configure_logging",
]
