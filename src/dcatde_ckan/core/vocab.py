"""Namespaces of the vocabularies used by DCAT-AP.de records."""

from __future__ import annotations

from rdflib import Namespace
from rdflib.namespace import DCAT, DCTERMS, RDF

DCATDE = Namespace("http://dcat-ap.de/def/dcatde/")
LOCN = Namespace("http://www.w3.org/ns/locn#")
SPDX = Namespace("http://spdx.org/rdf/terms#")
SCHEMA = Namespace("http://schema.org/")
GSP = Namespace("http://www.opengis.net/ont/geosparql#")

namespaces = {
    "dcat": DCAT,
    "dct": DCTERMS,
    "dcatde": DCATDE,
    "locn": LOCN,
    "spdx": SPDX,
    "schema": SCHEMA,
    "gsp": GSP,
    "rdf": RDF,
}

__all__ = [
    "DCAT",
    "DCATDE",
    "DCTERMS",
    "GSP",
    "LOCN",
    "RDF",
    "SCHEMA",
    "SPDX",
    "namespaces",
]
