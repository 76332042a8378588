"""Custom exception hierarchy for the publisher."""

from __future__ import annotations

from typing import Any


class DcatCkanError(Exception):
    """Base error for the DCAT-AP.de to CKAN publisher."""


class MissingPropertyError(DcatCkanError):
    """Raised when a property the mapping cannot do without is absent."""

    def __init__(self, dataset: str, property_uri: str) -> None:
        super().__init__(f"Dataset '{dataset}' has no value for required property <{property_uri}>")
        self.dataset = dataset
        self.property_uri = property_uri


class CkanApiError(DcatCkanError):
    """Raised when the CKAN action API reports a failure."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class CkanConnectionError(CkanApiError):
    """Raised when the CKAN instance cannot be reached."""


class CatalogLookupError(DcatCkanError, ValueError):
    """Raised when an identifier handed to the catalog does not resolve as expected."""

    def __init__(self, identifier: str, message: str) -> None:
        super().__init__(message)
        self.identifier = identifier


class PackageNotFoundError(CatalogLookupError):
    """The identifier does not name an existing package."""

    def __init__(self, identifier: str) -> None:
        super().__init__(identifier, f"Package '{identifier}' does not exist")


class NotACollectionError(CatalogLookupError):
    """The identifier names a package that is not a collection."""

    def __init__(self, identifier: str, package_type: str | None = None) -> None:
        message = f"Package '{identifier}' is no collection"
        if package_type:
            message += f" (type={package_type})"
        super().__init__(identifier, message)
        self.package_type = package_type
