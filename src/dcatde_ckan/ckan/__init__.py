"""CKAN portal access."""

from .client import CkanClient

__all__ = ["CkanClient"]
