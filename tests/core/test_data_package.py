from __future__ import annotations

import rdflib

from dataPackage.config import PackageConfig
from dataPackage.core import DataObject, DataPackage
from dataPackage.core.data_package import DEFAULT_PREDICATE
from dataPackage.kg.namespaces import CITO, ORE
from dataPackage.kg.resource_map import MapState


def _package() -> DataPackage:
    meta = DataObject.from_bytes("meta.xml", b"<eml/>", "eml://ecoinformatics.org/eml-2.1.1")
    data = DataObject.from_bytes("data.csv", b"a,b\n1,2\n", "text/csv")
    extra = DataObject.from_bytes("notes.txt", b"notes", "text/plain")
    return DataPackage([meta, data, extra])


def test_members_keep_insertion_order() -> None:
    pkg = _package()
    assert pkg.get_identifiers() == ["meta.xml", "data.csv", "notes.txt"]
    assert len(pkg) == 3
    assert "data.csv" in pkg
    assert pkg.get_member("data.csv").format_id == "text/csv"


def test_insert_relation_defaults_to_cito_documents() -> None:
    pkg = _package().insert_relation("meta.xml", ["data.csv", "notes.txt"])
    relations = pkg.get_relationships()
    assert DEFAULT_PREDICATE == str(CITO.documents)
    assert [(r.subject, r.predicate, r.object) for r in relations] == [
        ("meta.xml", DEFAULT_PREDICATE, "data.csv"),
        ("meta.xml", DEFAULT_PREDICATE, "notes.txt"),
    ]


def test_summary_exposes_collaborator_fields() -> None:
    summary = _package().summary()
    assert set(summary[0]) == {"identifier", "sizeBytes", "checksum", "formatId"}
    assert summary[1]["sizeBytes"] == len(b"a,b\n1,2\n")


def test_build_resource_map(base: str) -> None:
    pkg = _package().insert_relation("meta.xml", "data.csv")
    with pkg.build_resource_map("rm1") as resource_map:
        assert resource_map.state is MapState.POPULATED
        graph = rdflib.Graph()
        graph.parse(data=resource_map.serialize("turtle"), format="turtle")
    assert (
        rdflib.URIRef(f"{base}meta.xml"),
        CITO.documents,
        rdflib.URIRef(f"{base}data.csv"),
    ) in graph
    # notes.txt appears in no relation but is still aggregated
    assert (rdflib.URIRef(f"{base}notes.txt"), ORE.isAggregatedBy, None) in graph
    assert len(graph) == 1 + 3 * 3 + 5


def test_build_resource_map_uses_config() -> None:
    cfg = PackageConfig(resolve_base="https://example.org/r/")
    with _package().build_resource_map(config=cfg) as resource_map:
        assert resource_map.id.startswith("resourceMap_")
        subjects = {st.subject for st in resource_map.triples}
    assert "https://example.org/r/data.csv" in subjects
