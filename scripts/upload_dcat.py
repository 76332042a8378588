#!/usr/bin/env python
"""Upload DCAT-AP.de datasets from an RDF file into the CKAN portal."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from rdflib import URIRef

from dcatde_ckan.ckan import CkanClient
from dcatde_ckan.core.config import load_settings
from dcatde_ckan.core.logging import configure_logging, get_logger
from dcatde_ckan.graph import RdflibGraphAccessor, iter_dataset_nodes, load_graph
from dcatde_ckan.publishing import DcatUploader

LOGGER = get_logger(__name__)


class DryRunCatalogClient:
    """Print payloads instead of sending them."""

    def __init__(self) -> None:
        self._counter = 0

    def create_package(self, payload: dict[str, Any]) -> str:
        print(json.dumps({"package": payload}, ensure_ascii=False, indent=2))
        self._counter += 1
        return f"dry-run-{self._counter}"

    def create_resource(self, payload: dict[str, Any]) -> str:
        print(json.dumps({"resource": payload}, ensure_ascii=False, indent=2))
        return f"{payload['package_id']}-resource"

    def put_dataset_in_collection(self, package_id: str, collection_name: str) -> None:
        print(json.dumps({"collection": {"package_id": package_id, "collection": collection_name}}))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("source", type=Path, help="RDF file containing dcat:Dataset descriptions.")
    parser.add_argument("--format", dest="rdf_format", help="rdflib parser name (guessed from the file suffix by default).")
    parser.add_argument(
        "--dataset",
        action="append",
        default=[],
        help="Only upload the dataset with this URI. May be repeated; defaults to every dcat:Dataset.",
    )
    parser.add_argument("--commit", action="store_true", help="Actually create packages in CKAN (default: dry run).")
    parser.add_argument("--secrets", type=Path, default=Path(".secrets/secrets.toml"), help="Secrets file with the [ckan] section.")
    return parser.parse_args(argv)


def _select_datasets(graph, requested: list[str]) -> list[Any]:
    available = list(iter_dataset_nodes(graph))
    if not requested:
        return available
    selected = []
    known = {str(node) for node in available}
    for uri in requested:
        if uri not in known:
            raise SystemExit(f"Dataset not found in source: {uri}")
        selected.append(URIRef(uri))
    return selected


def main(argv: list[str] | None = None) -> list[str]:
    args = parse_args(argv)
    settings = load_settings(args.secrets)
    configure_logging(settings=settings)

    graph = load_graph(args.source, args.rdf_format)
    datasets = _select_datasets(graph, args.dataset)
    if not datasets:
        LOGGER.warning("upload_dcat.no_datasets", source=str(args.source))
        return []

    accessor = RdflibGraphAccessor(graph)
    package_ids: list[str] = []
    if not args.commit:
        uploader = DcatUploader(DryRunCatalogClient())
        for dataset in datasets:
            package_ids.append(uploader.upload(accessor, dataset))
        return package_ids

    with CkanClient(settings) as client:
        uploader = DcatUploader(client)
        for dataset in datasets:
            package_id = uploader.upload(accessor, dataset)
            LOGGER.info("upload_dcat.uploaded", dataset=str(dataset), package_id=package_id)
            package_ids.append(package_id)
    return package_ids


if __name__ == "__main__":
    main()
