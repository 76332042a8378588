"""Publish DCAT-AP.de dataset descriptions into a CKAN portal."""

from .ckan import CkanClient
from .graph import RdflibGraphAccessor
from .publishing import DcatUploader

__all__ = ["CkanClient", "DcatUploader", "RdflibGraphAccessor"]
