"""Resource-map graph construction and serialization."""

__all__ = [
    "resolve",
    "DEFAULT_RESOLVE_BASE",
    "DEFAULT_NAMESPACES",
    "merge_namespaces",
    "NodeKind",
    "Statement",
    "Relation",
    "TripleSet",
    "AggregationBuilder",
    "Serializer",
    "SYNTAXES",
]

from .iri import DEFAULT_RESOLVE_BASE, resolve
from .namespaces import DEFAULT_NAMESPACES, merge_namespaces
from .triples import NodeKind, Relation, Statement, TripleSet
from .aggregation import AggregationBuilder
from .serializer import SYNTAXES, Serializer
