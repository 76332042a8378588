"""Helpers for deriving CKAN names from portal and vocabulary URIs."""

from __future__ import annotations

import uuid

from .constants import DATA_THEME_BASE_URI, DATASET_PATH, ORGANIZATION_PATH, PORTAL_BASE_URL


def substring_after(text: str, separator: str) -> str:
    """Return the text after the first ``separator``, or ``""`` when it does not occur."""
    _, found, tail = text.partition(separator)
    return tail if found else ""


def substring_after_last(text: str, separator: str) -> str:
    """Return the text after the last ``separator``, or ``""`` when it does not occur."""
    _, found, tail = text.rpartition(separator)
    return tail if found else ""


def build_dataset_uri(package_name: str, base_url: str = PORTAL_BASE_URL) -> str:
    """Return the portal URL of a package."""
    return f"{base_url}{DATASET_PATH}{package_name}"


def package_name_from_uri(dataset_uri: str | None, base_url: str = PORTAL_BASE_URL) -> str:
    """Return the CKAN package name for a dataset URI.

    Datasets already hosted on the portal keep their slug; everything else gets a fresh
    UUID so that the package can be created without clashing with existing names.
    """
    prefix = f"{base_url}{DATASET_PATH}"
    if dataset_uri and dataset_uri.startswith(prefix):
        return dataset_uri[len(prefix) :]
    return str(uuid.uuid4())


def organization_from_publisher(publisher_uri: str) -> str:
    return substring_after_last(publisher_uri, ORGANIZATION_PATH)


def theme_code(theme_uri: str) -> str:
    """``.../data-theme/TRAN`` -> ``tran``"""
    return substring_after(theme_uri, DATA_THEME_BASE_URI).lower()


def format_token(format_uri: str) -> str:
    """``.../file-type/CSV`` -> ``CSV``"""
    return substring_after_last(format_uri, "/")


def collection_name(collection_uri: str) -> str:
    return substring_after_last(collection_uri, "/")
