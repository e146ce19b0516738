"""Derived ORE/Dublin Core statements for a resource map's aggregation."""

from __future__ import annotations

from typing import Iterable, List

from .iri import (
    DEFAULT_RESOLVE_BASE,
    aggregation_iri,
    bare_identifier,
    resolve,
    resource_map_iri,
)
from .namespaces import DC, DCTERMS, ORE, RDF, XSD
from .triples import NodeKind, Statement

AGGREGATION_TITLE = "DataONE Aggregation"


class AggregationBuilder:
    """Build the structural statements that turn members into an ORE aggregation.

    The output order is fixed: per-member statements in member order, then the
    resource-map and aggregation self-description. An empty member list is a
    valid aggregation with no members.
    """

    def __init__(self, map_id: str, base: str = DEFAULT_RESOLVE_BASE) -> None:
        self.map_id = str(map_id)
        self.base = base
        self.resource_map_uri = resource_map_iri(self.map_id, base)
        self.aggregation_uri = aggregation_iri(self.map_id, base)

    def member_statements(self, member_id: str) -> List[Statement]:
        member_uri = resolve(member_id, self.base)
        return [
            Statement(
                member_uri,
                str(DCTERMS.identifier),
                bare_identifier(member_id, self.base),
                object_kind=NodeKind.LITERAL,
                datatype=str(XSD.string),
            ),
            Statement(member_uri, str(ORE.isAggregatedBy), self.aggregation_uri),
            Statement(self.aggregation_uri, str(ORE.aggregates), member_uri),
        ]

    def map_statements(self) -> List[Statement]:
        res_map = self.resource_map_uri
        agg = self.aggregation_uri
        return [
            Statement(res_map, str(RDF.type), str(ORE.ResourceMap)),
            Statement(
                res_map,
                str(DCTERMS.identifier),
                self.map_id,
                object_kind=NodeKind.LITERAL,
                datatype=str(XSD.string),
            ),
            Statement(agg, str(RDF.type), str(ORE.Aggregation)),
            Statement(agg, str(DC.title), AGGREGATION_TITLE, object_kind=NodeKind.LITERAL),
            Statement(res_map, str(ORE.describes), agg),
        ]

    def build(self, member_ids: Iterable[str]) -> List[Statement]:
        statements: List[Statement] = []
        for member_id in member_ids:
            statements.extend(self.member_statements(member_id))
        statements.extend(self.map_statements())
        return statements


def build_aggregation(
    map_id: str, member_ids: Iterable[str], base: str = DEFAULT_RESOLVE_BASE
) -> List[Statement]:
    return AggregationBuilder(map_id, base).build(member_ids)


__all__ = ["AGGREGATION_TITLE", "AggregationBuilder", "build_aggregation"]
