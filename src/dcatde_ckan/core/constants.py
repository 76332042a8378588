"""Fixed vocabulary URIs referenced by the mapping logic."""

from __future__ import annotations

from typing import Final

PORTAL_BASE_URL: Final[str] = "https://opendata.schleswig-holstein.de"
DATASET_PATH: Final[str] = "/dataset/"
ORGANIZATION_PATH: Final[str] = "/organization/"

DATA_THEME_BASE_URI: Final[str] = "http://publications.europa.eu/resource/authority/data-theme/"

GEOJSON_DATATYPE: Final[str] = "https://www.iana.org/assignments/media-types/application/vnd.geo+json"
WKT_DATATYPE: Final[str] = "http://www.opengis.net/ont/geosparql#wktLiteral"

COLLECTION_PACKAGE_TYPE: Final[str] = "collection"
COLLECTION_RELATIONSHIP: Final[str] = "child_of"
