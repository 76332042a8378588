"""HTTP client for the CKAN action API of the open data portal."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Mapping

import httpx

from dcatde_ckan.core.config import Settings, get_settings
from dcatde_ckan.core.constants import COLLECTION_PACKAGE_TYPE, COLLECTION_RELATIONSHIP
from dcatde_ckan.core.exceptions import (
    CkanApiError,
    CkanConnectionError,
    NotACollectionError,
    PackageNotFoundError,
)
from dcatde_ckan.core.logging import get_logger
from dcatde_ckan.core.models import CkanResource
from dcatde_ckan.core.uris import substring_after_last

LOGGER = get_logger(__name__)

ACTION_PATH = "/api/3/action/"
NOT_FOUND_ERROR = "Not Found Error"


class CkanClient(AbstractContextManager["CkanClient"]):
    """Thin wrapper around the package, resource and relationship actions."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._client = http_client or httpx.Client(
            base_url=self._settings.ckan_base_url,
            timeout=self._settings.request_timeout,
            headers={"Accept": "application/json", **self._settings.authorization_header},
        )

    # Context manager API -----------------------------------------------------
    def __enter__(self) -> "CkanClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:  # type: ignore[override]
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    # Write operations --------------------------------------------------------
    def create_package(self, payload: Mapping[str, Any]) -> str:
        """Create a package and return the id CKAN assigned to it."""
        result = self._post_action("package_create", payload)
        return result["id"]

    def create_resource(self, payload: Mapping[str, Any]) -> str:
        result = self._post_action("resource_create", payload)
        return result["id"]

    def put_dataset_in_collection(self, package_id: str, collection_name: str) -> None:
        """Make ``package_id`` a member of the collection package ``collection_name``.

        Raises:
            PackageNotFoundError: either identifier does not resolve to a package.
            NotACollectionError: ``collection_name`` names an ordinary package.
        """
        dataset = self.read_dataset(package_id)
        if dataset is None:
            raise PackageNotFoundError(package_id)
        collection = self.read_dataset(collection_name)
        if collection is None:
            raise PackageNotFoundError(collection_name)
        package_type = collection.get("type")
        if package_type != COLLECTION_PACKAGE_TYPE:
            raise NotACollectionError(collection_name, package_type)

        self._post_action(
            "package_relationship_create",
            {
                "subject": dataset["id"],
                "object": collection["id"],
                "type": COLLECTION_RELATIONSHIP,
            },
        )

    # Read operations ---------------------------------------------------------
    def read_dataset(self, dataset_id: str) -> dict[str, Any] | None:
        """Return the ``package_show`` result, or ``None`` when CKAN does not know the package.

        Any other failure, such as an authorization error, raises ``CkanApiError``.
        """
        response = self._send("GET", f"{ACTION_PATH}package_show", params={"id": dataset_id})
        body = self._decode(response)
        if body.get("success"):
            return body.get("result")
        error = body.get("error")
        if isinstance(error, Mapping) and error.get("__type") == NOT_FOUND_ERROR:
            LOGGER.debug("ckan.package_not_found", id=dataset_id)
            return None
        raise CkanApiError(
            f"CKAN could not read package '{dataset_id}': {_error_message(body)}",
            response.status_code,
            body,
        )

    def get_collection(self, dataset_id: str) -> str | None:
        """Return the id of the collection ``dataset_id`` belongs to."""
        dataset = self.read_dataset(dataset_id)
        if dataset is None:
            return None
        for relationship in dataset.get("relationships_as_subject") or []:
            if isinstance(relationship, Mapping):
                return relationship.get("object_package_id")
        return None

    def get_organization(self, dataset_id: str) -> str | None:
        dataset = self.read_dataset(dataset_id)
        if dataset is None:
            return None
        return dataset.get("owner_org")

    def get_access_url(self, dataset_id: str) -> str | None:
        dataset = self.read_dataset(dataset_id)
        if dataset is None:
            return None
        resource = self.get_resource(dataset)
        return resource.access_url if resource else None

    @staticmethod
    def get_resource(dataset: Mapping[str, Any]) -> CkanResource | None:
        """Summarize the first resource of a ``package_show`` result."""
        resources = dataset.get("resources") or []
        if not resources:
            return None
        raw = resources[0]
        return CkanResource(
            id=raw.get("id"),
            access_url=raw.get("url"),
            name=raw.get("name"),
            checksum=raw.get("hash") or None,
            byte_size=_coerce_int(raw.get("size")),
            format=raw.get("format"),
            mime_type=raw.get("mimetype"),
        )

    def find_newest_dataset(self, collection_name: str) -> str | None:
        """Return the name of the current dataset of a collection.

        The portal answers ``/collection/<name>/aktuell`` with a redirect to the newest
        member; the redirect target is not followed.
        """
        response = self._send("GET", f"/collection/{collection_name}/aktuell", follow_redirects=False)
        location = response.headers.get("Location")
        if not location:
            LOGGER.warning("ckan.collection_without_current", collection=collection_name, status=response.status_code)
            return None
        return substring_after_last(location, "/") or None

    # Internals ---------------------------------------------------------------
    def _post_action(self, action: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        LOGGER.debug("ckan.action", action=action)
        response = self._send("POST", f"{ACTION_PATH}{action}", json=dict(payload))
        body = self._decode(response)
        if not body.get("success"):
            raise CkanApiError(
                f"CKAN action '{action}' failed: {_error_message(body)}",
                response.status_code,
                body,
            )
        return body.get("result") or {}

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            return self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise CkanConnectionError(f"Failed to reach CKAN at {self._settings.ckan_base_url}: {exc}") from exc

    @staticmethod
    def _decode(response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError as exc:
            raise CkanApiError(
                f"CKAN returned a non-JSON response (status {response.status_code})",
                response.status_code,
            ) from exc
        if not isinstance(body, dict):
            raise CkanApiError("Unexpected payload returned from CKAN", response.status_code)
        return body


def _error_message(body: Mapping[str, Any]) -> str:
    error = body.get("error")
    if not isinstance(error, Mapping):
        return "unknown error"
    message = error.get("message")
    if message:
        return str(message)
    details = [f"{key}: {value}" for key, value in error.items() if not key.startswith("__")]
    return "; ".join(details) or str(error.get("__type") or "unknown error")


def _coerce_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    try:
        return int(float(str(value).strip()))
    except ValueError:
        return 0
