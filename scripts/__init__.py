"""Command line entry points for the DCAT-AP.de to CKAN publisher.

Import the individual modules (e.g., `scripts.upload_dcat`) to reuse their helpers.
"""

__all__ = ["upload_dcat"]
