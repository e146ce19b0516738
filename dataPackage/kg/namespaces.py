from __future__ import annotations

"""Vocabulary constants and the namespace-prefix table for resource maps.

This module is the single source of truth for namespace strings used by
resource-map generation and serialization. The tables are read-only: callers
receive fresh copies from :func:`merge_namespaces`.
"""

from types import MappingProxyType
from typing import Mapping

from rdflib import Namespace
from rdflib.namespace import is_ncname

from dataPackage.errors import NamespaceConflictError

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
XSD_NS = "http://www.w3.org/2001/XMLSchema#"
RDFS_NS = "http://www.w3.org/2000/01/rdf-schema#"
PROV_NS = "http://www.w3.org/ns/prov#"
PROVONE_NS = "http://purl.org/provone/2015/15/ontology#"
DC_NS = "http://purl.org/dc/elements/1.1/"
DCTERMS_NS = "http://purl.org/dc/terms/"
FOAF_NS = "http://xmlns.com/foaf/0.1/"
ORE_NS = "http://www.openarchives.org/ore/terms/"
CITO_NS = "http://purl.org/spar/cito/"

# rdflib Namespace helpers.
RDF = Namespace(RDF_NS)
XSD = Namespace(XSD_NS)
RDFS = Namespace(RDFS_NS)
PROV = Namespace(PROV_NS)
PROVONE = Namespace(PROVONE_NS)
DC = Namespace(DC_NS)
DCTERMS = Namespace(DCTERMS_NS)
FOAF = Namespace(FOAF_NS)
ORE = Namespace(ORE_NS)
CITO = Namespace(CITO_NS)

# Namespace URI -> prefix, in declaration order.
DEFAULT_NAMESPACES: Mapping[str, str] = MappingProxyType(
    {
        RDF_NS: "rdf",
        XSD_NS: "xsd",
        RDFS_NS: "rdfs",
        PROV_NS: "prov",
        PROVONE_NS: "provone",
        DC_NS: "dc",
        DCTERMS_NS: "dcterms",
        FOAF_NS: "foaf",
        ORE_NS: "ore",
        CITO_NS: "cito",
    }
)


def merge_namespaces(extra: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the default table merged with ``extra`` (namespace URI -> prefix).

    New namespaces are appended after the defaults. Re-declaring a default
    binding verbatim is accepted; rebinding a default prefix to another URI,
    or a default URI to another prefix, raises :class:`NamespaceConflictError`,
    as does a prefix that cannot be written as an XML namespace prefix.
    """

    merged = dict(DEFAULT_NAMESPACES)
    if not extra:
        return merged
    default_uris = {prefix: uri for uri, prefix in DEFAULT_NAMESPACES.items()}
    for namespace, prefix in extra.items():
        namespace = str(namespace).strip()
        prefix = str(prefix).strip()
        if not namespace:
            raise NamespaceConflictError(f"empty namespace URI for prefix {prefix!r}")
        if not is_ncname(prefix) or prefix.lower().startswith("xml"):
            raise NamespaceConflictError(f"prefix {prefix!r} is not a valid XML name prefix")
        if prefix in default_uris and default_uris[prefix] != namespace:
            raise NamespaceConflictError(
                f"prefix {prefix!r} is reserved for {default_uris[prefix]}, not {namespace}"
            )
        if namespace in DEFAULT_NAMESPACES and DEFAULT_NAMESPACES[namespace] != prefix:
            raise NamespaceConflictError(
                f"namespace {namespace} is already bound to prefix {DEFAULT_NAMESPACES[namespace]!r}"
            )
        taken = next((ns for ns, p in merged.items() if p == prefix and ns != namespace), None)
        if taken is not None:
            raise NamespaceConflictError(f"prefix {prefix!r} is already bound to {taken}")
        merged[namespace] = prefix
    return merged


def parse_namespace_option(value: str) -> tuple[str, str]:
    """Split a ``prefix=uri`` option into ``(uri, prefix)``."""

    prefix, sep, uri = value.partition("=")
    if not sep or not prefix.strip() or not uri.strip():
        raise NamespaceConflictError(f"expected prefix=uri, got {value!r}")
    return uri.strip(), prefix.strip()


__all__ = [
    "RDF_NS",
    "XSD_NS",
    "RDFS_NS",
    "PROV_NS",
    "PROVONE_NS",
    "DC_NS",
    "DCTERMS_NS",
    "FOAF_NS",
    "ORE_NS",
    "CITO_NS",
    "RDF",
    "XSD",
    "RDFS",
    "PROV",
    "PROVONE",
    "DC",
    "DCTERMS",
    "FOAF",
    "ORE",
    "CITO",
    "DEFAULT_NAMESPACES",
    "merge_namespaces",
    "parse_namespace_option",
]
