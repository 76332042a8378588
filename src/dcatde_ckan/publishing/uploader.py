"""Map DCAT-AP.de datasets onto CKAN packages and push them to the portal."""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from dcatde_ckan.core.constants import GEOJSON_DATATYPE, PORTAL_BASE_URL
from dcatde_ckan.core.exceptions import MissingPropertyError
from dcatde_ckan.core.logging import get_logger
from dcatde_ckan.core.uris import (
    collection_name,
    format_token,
    organization_from_publisher,
    package_name_from_uri,
    theme_code,
)
from dcatde_ckan.core.vocab import DCAT, DCATDE, DCTERMS, LOCN, SCHEMA, SPDX
from dcatde_ckan.graph.accessor import GraphAccessor

from .payloads import PackagePayload, ResourcePayload

LOGGER = get_logger(__name__)

# (extras key, dataset property), upserted in this order when present.
SCALAR_EXTRAS = (
    ("modified", DCTERMS.modified),
    ("issued", DCTERMS.issued),
    ("licenseAttributionByText", DCATDE.licenseAttributionByText),
    ("frequency", DCTERMS.accrualPeriodicity),
    ("spatial_uri", DCATDE.politicalGeocodingURI),
    ("politicalGeocodingLevelURI", DCATDE.politicalGeocodingLevelURI),
)

# (resource field, distribution property), copied verbatim when present.
RESOURCE_FIELDS = (
    ("url", DCAT.downloadURL),
    ("access_url", DCAT.accessURL),
    ("name", DCTERMS.title),
    ("description", DCTERMS.description),
    ("mimetype", DCAT.mediaType),
    ("license", DCTERMS.license),
    ("licenseAttributionByText", DCATDE.licenseAttributionByText),
)


class CatalogClient(Protocol):
    def create_package(self, payload: Mapping[str, Any]) -> str: ...

    def create_resource(self, payload: Mapping[str, Any]) -> str: ...

    def put_dataset_in_collection(self, package_id: str, collection_name: str) -> None: ...


class DcatUploader:
    """Create a CKAN package, its resources and collection links for one dataset.

    Calls are issued strictly in sequence and never retried. When a later call fails the
    package stays in the portal with whatever resources were created before.
    """

    def __init__(self, client: CatalogClient, *, portal_base_url: str = PORTAL_BASE_URL) -> None:
        self._client = client
        self._portal_base_url = portal_base_url

    def upload(self, graph: GraphAccessor, dataset: Any) -> str:
        package = self.build_package(graph, dataset)
        package_id = self._client.create_package(package.as_dict())
        LOGGER.info("dcat_upload.package_created", name=package.name, package_id=package_id)

        for resource in self.build_resources(graph, dataset, package_id):
            resource_id = self._client.create_resource(resource.as_dict())
            LOGGER.debug("dcat_upload.resource_created", package_id=package_id, resource_id=resource_id)

        for name in self.collection_names(graph, dataset):
            self._client.put_dataset_in_collection(package_id, name)
            LOGGER.info("dcat_upload.collection_linked", package_id=package_id, collection=name)

        return package_id

    def build_package(self, graph: GraphAccessor, dataset: Any) -> PackagePayload:
        dataset_uri = graph.identifier(dataset)
        package = PackagePayload(
            name=package_name_from_uri(dataset_uri, self._portal_base_url),
            title=graph.value(dataset, DCTERMS.title),
            notes=graph.value(dataset, DCTERMS.description),
            license_id=graph.value(dataset, DCTERMS.license),
            owner_org=self._owner_org(graph, dataset, dataset_uri),
        )

        themes = graph.values(dataset, DCAT.theme)
        if themes:
            package.groups = [{"name": theme_code(theme.text)} for theme in themes]

        keywords = graph.values(dataset, DCAT.keyword)
        if keywords:
            package.tags = [{"name": keyword.text} for keyword in keywords]

        extras = package.extras
        temporal = graph.node(dataset, DCTERMS.temporal)
        if temporal is not None:
            start = graph.value(temporal, SCHEMA.startDate)
            if start is not None:
                extras.upsert("temporal_start", start)
            end = graph.value(temporal, SCHEMA.endDate)
            if end is not None:
                extras.upsert("temporal_end", end)

        for key, predicate in SCALAR_EXTRAS:
            value = graph.value(dataset, predicate)
            if value is not None:
                extras.upsert(key, value)

        location = graph.node(dataset, DCTERMS.spatial)
        if location is not None:
            for geometry in graph.values(location, LOCN.geometry):
                if geometry.is_literal and geometry.datatype == GEOJSON_DATATYPE:
                    extras.upsert("spatial", geometry.text)

        return package

    def build_resources(self, graph: GraphAccessor, dataset: Any, package_id: str) -> list[ResourcePayload]:
        resources: list[ResourcePayload] = []
        for distribution in graph.nodes(dataset, DCAT.distribution):
            resource = ResourcePayload(package_id=package_id)
            for field_name, predicate in RESOURCE_FIELDS:
                value = graph.value(distribution, predicate)
                if value is not None:
                    setattr(resource, field_name, value)

            file_format = graph.value(distribution, DCTERMS.format)
            if file_format is not None:
                resource.format = format_token(file_format)

            checksum = graph.node(distribution, SPDX.checksum)
            if checksum is not None:
                resource.hash = graph.value(checksum, SPDX.checksumValue)
                resource.hash_algorithm = graph.value(checksum, SPDX.algorithm)

            resources.append(resource)
        return resources

    def collection_names(self, graph: GraphAccessor, dataset: Any) -> list[str]:
        names: list[str] = []
        for target in graph.values(dataset, DCTERMS.isVersionOf):
            if target.is_literal or not target.text.startswith(self._portal_base_url):
                continue
            names.append(collection_name(target.text))
        return names

    @staticmethod
    def _owner_org(graph: GraphAccessor, dataset: Any, dataset_uri: str | None) -> str:
        publisher = graph.value(dataset, DCTERMS.publisher)
        if publisher is None:
            raise MissingPropertyError(dataset_uri or str(dataset), str(DCTERMS.publisher))
        return organization_from_publisher(publisher)
