from __future__ import annotations

import pytest

from dcatde_ckan.publishing import ExtrasMap, PackagePayload


def test_upsert_appends_new_keys_in_order() -> None:
    extras = ExtrasMap()
    extras.upsert("issued", "2020-10-13")
    extras.upsert("modified", "2020-10-14")

    assert extras.as_entries() == [
        {"key": "issued", "value": "2020-10-13"},
        {"key": "modified", "value": "2020-10-14"},
    ]


def test_repeated_identical_upsert_keeps_single_entry() -> None:
    extras = ExtrasMap()
    extras.upsert("frequency", "DAILY")
    extras.upsert("frequency", "DAILY")

    assert len(extras) == 1
    assert extras.get("frequency") == "DAILY"


def test_upsert_replaces_value_in_place() -> None:
    extras = ExtrasMap()
    extras.upsert("spatial", "first")
    extras.upsert("issued", "2020-10-13")
    extras.upsert("spatial", "second")

    assert len(extras) == 2
    assert list(extras) == ["spatial", "issued"]
    assert extras.as_entries()[0] == {"key": "spatial", "value": "second"}


def test_upsert_rejects_non_string_values() -> None:
    extras = ExtrasMap()
    with pytest.raises(TypeError):
        extras.upsert("byte_size", 500)  # type: ignore[arg-type]
    assert "byte_size" not in extras


def test_package_payload_always_emits_extras() -> None:
    payload = PackagePayload(name="demo", title="Demo")
    assert payload.as_dict() == {"name": "demo", "title": "Demo", "extras": []}
