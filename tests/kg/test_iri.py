from __future__ import annotations

import pytest

from dataPackage.kg.iri import (
    DEFAULT_RESOLVE_BASE,
    aggregation_iri,
    bare_identifier,
    is_resolved,
    resolve,
    resource_map_iri,
)


def test_default_resolve_base() -> None:
    assert DEFAULT_RESOLVE_BASE == "https://cn.dataone.org/cn/v1/resolve/"


@pytest.mark.parametrize("identifier", ["a", "doi:10.5063/F1", "urn:uuid:1234", ""])
def test_resolve_is_idempotent(identifier: str) -> None:
    once = resolve(identifier)
    assert resolve(once) == once


def test_resolve_prefixes_bare_identifiers(base: str) -> None:
    assert resolve("data.csv") == f"{base}data.csv"
    assert is_resolved(resolve("data.csv"))
    assert not is_resolved("data.csv")


def test_resolve_leaves_resolved_identifiers_alone(base: str) -> None:
    assert resolve(f"{base}x") == f"{base}x"


def test_custom_base() -> None:
    assert resolve("x", "https://example.org/r/") == "https://example.org/r/x"
    assert bare_identifier("https://example.org/r/x", "https://example.org/r/") == "x"


def test_map_and_aggregation_iris(base: str) -> None:
    assert resource_map_iri("rm1") == f"{base}rm1"
    assert aggregation_iri("rm1") == f"{base}rm1#aggregation"
    assert aggregation_iri(f"{base}rm1") == f"{base}rm1#aggregation"
    assert bare_identifier(f"{base}rm1") == "rm1"
