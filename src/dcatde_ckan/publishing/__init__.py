"""Publishing utilities for pushing DCAT-AP.de datasets into CKAN."""

from .extras import ExtrasMap
from .payloads import PackagePayload, ResourcePayload
from .uploader import CatalogClient, DcatUploader

__all__ = [
    "CatalogClient",
    "DcatUploader",
    "ExtrasMap",
    "PackagePayload",
    "ResourcePayload",
]
