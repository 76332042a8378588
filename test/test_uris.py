from __future__ import annotations

import uuid

from dcatde_ckan.core.uris import (
    build_dataset_uri,
    collection_name,
    format_token,
    organization_from_publisher,
    package_name_from_uri,
    substring_after,
    substring_after_last,
    theme_code,
)


def test_package_name_uses_portal_slug() -> None:
    uri = build_dataset_uri("kindertagesstatten1")
    assert uri == "https://opendata.schleswig-holstein.de/dataset/kindertagesstatten1"
    assert package_name_from_uri(uri) == "kindertagesstatten1"


def test_package_name_for_foreign_uri_is_uuid() -> None:
    name = package_name_from_uri("https://example.org/dataset/kindertagesstatten1")
    assert uuid.UUID(name).version == 4
    assert package_name_from_uri(None) != name


def test_theme_code_strips_authority_and_lowercases() -> None:
    assert theme_code("http://publications.europa.eu/resource/authority/data-theme/TRAN") == "tran"


def test_format_token_keeps_last_segment() -> None:
    assert format_token("http://publications.europa.eu/resource/authority/file-type/CSV") == "CSV"


def test_organization_from_publisher_uses_last_segment() -> None:
    publisher = "https://opendata.schleswig-holstein.de/organization/2a6d6241-fdfd-4d9a-9106-8c658be43a27"
    assert organization_from_publisher(publisher) == "2a6d6241-fdfd-4d9a-9106-8c658be43a27"
    assert organization_from_publisher("https://example.org/publisher/1") == ""


def test_collection_name_is_final_segment() -> None:
    assert collection_name("https://opendata.schleswig-holstein.de/dataset/mycollection") == "mycollection"


def test_substring_helpers_without_separator() -> None:
    assert substring_after("abc", "/") == ""
    assert substring_after("a/b/c", "/") == "b/c"
    assert substring_after_last("a/b/c", "/") == "c"
    assert substring_after_last("abc", "/") == ""
