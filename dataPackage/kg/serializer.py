"""Encode a triple set into a concrete RDF syntax."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Dict, List, Mapping, Union
from xml.sax.saxutils import escape, quoteattr

from rdflib import BNode, Graph, Literal, Namespace, URIRef
from rdflib.term import Node

from dataPackage.errors import SerializationError
from dataPackage.utils.log_json import JsonLogger

from .namespaces import merge_namespaces
from .triples import Statement, TripleSet

_LOGGER = logging.getLogger("datapackage.serializer")

Destination = Union[str, Path, BinaryIO]


@dataclass(frozen=True, slots=True)
class Syntax:
    name: str
    rdflib_format: str
    mime_type: str
    extension: str


SYNTAXES: Dict[str, Syntax] = {
    s.name: s
    for s in (
        Syntax("rdfxml", "xml", "application/rdf+xml", "rdf"),
        Syntax("rdfxml-abbrev", "pretty-xml", "application/rdf+xml", "rdf"),
        Syntax("turtle", "turtle", "text/turtle", "ttl"),
        Syntax("ntriples", "nt", "application/n-triples", "nt"),
        Syntax("n3", "n3", "text/n3", "n3"),
        Syntax("jsonld", "json-ld", "application/ld+json", "jsonld"),
        Syntax("trig", "trig", "application/trig", "trig"),
    )
}

DEFAULT_SYNTAX = "rdfxml"


def get_syntax(name: str) -> Syntax:
    try:
        return SYNTAXES[str(name).strip().lower()]
    except KeyError:
        supported = ", ".join(sorted(SYNTAXES))
        raise SerializationError(
            syntax=str(name), message=f"unsupported syntax (expected one of: {supported})"
        ) from None


def _nt_escape(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def _nt_term(term: Node) -> str:
    # Literal.n3() switches to triple quotes for multi-line values, which
    # N-Triples does not allow; IRIs and blank nodes go through n3().
    if isinstance(term, Literal):
        text = f'"{_nt_escape(str(term))}"'
        if term.datatype is not None:
            return f"{text}^^{term.datatype.n3()}"
        if term.language:
            return f"{text}@{term.language}"
        return text
    return term.n3()


def _iri(term: Node) -> str:
    """Return the text of an IRI after rdflib has checked it is writable."""

    return term.n3()[1:-1]


# Turtle lines are also valid N3, and a Turtle document is a TriG default graph.
_LINE_SYNTAXES = frozenset({"turtle", "n3", "trig"})

# XML parsers fold a literal carriage return into a newline.
_XML_TEXT_ENTITIES = {"\r": "&#13;"}


class Serializer:
    """Write statements in insertion order using a merged namespace table.

    Distinct statements are written once, at their first position. The input
    triple set is only read. ``rdfxml-abbrev`` and ``jsonld`` are produced by
    rdflib and are grouped by subject.
    """

    def __init__(
        self,
        namespaces: Mapping[str, str] | None = None,
        *,
        json_logger: JsonLogger | None = None,
    ) -> None:
        self.namespaces = merge_namespaces(namespaces)
        self._log = json_logger or JsonLogger("serializer")

    def to_graph(self, triples: TripleSet) -> Graph:
        graph = self._scratch()
        for statement in triples.unique():
            s, p, o = statement.to_rdflib()
            # rdflib plugins outside the n3 family write IRIs unchecked
            for term in (s, p, o.datatype if isinstance(o, Literal) else o):
                if isinstance(term, URIRef):
                    _iri(term)
            graph.add((s, p, o))
        return graph

    def serialize(self, triples: TripleSet, syntax: str = DEFAULT_SYNTAX) -> bytes:
        chosen = get_syntax(syntax)
        try:
            if chosen.name == "ntriples":
                return self._write_ntriples(triples)
            if chosen.name == "rdfxml":
                return self._write_rdfxml(triples)
            if chosen.name in _LINE_SYNTAXES:
                return self._write_lines(triples)
            graph = self.to_graph(triples)
            try:
                return graph.serialize(format=chosen.rdflib_format, encoding="utf-8")
            finally:
                graph.close()
        except SerializationError:
            raise
        except Exception as exc:
            # rdflib refuses unwritable terms with a bare Exception
            self._log.error("serializer.failed", syntax=chosen.name, details={"error": str(exc)})
            raise SerializationError(syntax=chosen.name, message=str(exc)) from exc

    def write(self, triples: TripleSet, syntax: str, destination: Destination) -> int:
        """Serialize ``triples`` to ``destination`` and return the byte count.

        ``destination`` is a path or an open binary stream; streams are left
        open for the caller.
        """

        data = self.serialize(triples, syntax)
        if hasattr(destination, "write"):
            try:
                destination.write(data)  # type: ignore[union-attr]
            except (OSError, ValueError) as exc:
                raise SerializationError(
                    syntax=syntax, message=str(exc), destination=repr(destination)
                ) from exc
            return len(data)
        path = Path(destination)
        try:
            with path.open("wb") as fh:
                fh.write(data)
        except OSError as exc:
            self._log.error(
                "serializer.failed", syntax=syntax, details={"destination": str(path), "error": str(exc)}
            )
            raise SerializationError(syntax=syntax, message=str(exc), destination=str(path)) from exc
        _LOGGER.debug("wrote %d bytes of %s to %s", len(data), syntax, path)
        return len(data)

    def _scratch(self) -> Graph:
        scratch = Graph(bind_namespaces="none")
        for namespace, prefix in self.namespaces.items():
            scratch.bind(prefix, Namespace(namespace), override=True, replace=True)
        return scratch

    def _declared(self, scratch: Graph) -> Dict[str, str]:
        declared = dict(self.namespaces)
        for prefix, namespace in scratch.namespace_manager.namespaces():
            if prefix != "xml":
                declared.setdefault(str(namespace), prefix)
        return declared

    def _write_ntriples(self, triples: TripleSet) -> bytes:
        lines: List[str] = []
        for statement in triples.unique():
            s, p, o = statement.to_rdflib()
            lines.append(f"{_nt_term(s)} {_nt_term(p)} {_nt_term(o)} .\n")
        return "".join(lines).encode("utf-8")

    def _write_lines(self, triples: TripleSet) -> bytes:
        scratch = self._scratch()
        nm = scratch.namespace_manager
        try:
            lines: List[str] = []
            for statement in triples.unique():
                s, p, o = statement.to_rdflib()
                lines.append(f"{s.n3(nm)} {p.n3(nm)} {o.n3(nm)} .\n")
            out = [f"@prefix {prefix}: <{ns}> .\n" for ns, prefix in self._declared(scratch).items()]
        finally:
            scratch.close()
        out.append("\n")
        out.extend(lines)
        return "".join(out).encode("utf-8")

    def _write_rdfxml(self, triples: TripleSet) -> bytes:
        # rdflib's xml plugin groups statements by subject, which loses the
        # insertion order; a Description is opened whenever the subject changes.
        scratch = self._scratch()
        nm = scratch.namespace_manager
        try:
            rows: List[tuple[Statement, str]] = []
            for statement in triples.unique():
                prefix, _, local = nm.compute_qname_strict(URIRef(statement.predicate))
                rows.append((statement, f"{prefix}:{local}"))
            declared = self._declared(scratch)
        finally:
            scratch.close()

        out: List[str] = ['<?xml version="1.0" encoding="utf-8"?>\n', "<rdf:RDF\n"]
        for namespace, prefix in declared.items():
            out.append(f"   xmlns:{prefix}={quoteattr(namespace)}\n")
        out.append(">\n")

        current: tuple[str, str] | None = None
        for statement, qname in rows:
            s, _, o = statement.to_rdflib()
            key = (type(s).__name__, str(s))
            if key != current:
                if current is not None:
                    out.append("  </rdf:Description>\n")
                if isinstance(s, BNode):
                    out.append(f"  <rdf:Description rdf:nodeID={quoteattr(str(s))}>\n")
                else:
                    out.append(f"  <rdf:Description rdf:about={quoteattr(_iri(s))}>\n")
                current = key
            if isinstance(o, Literal):
                attrs = f" rdf:datatype={quoteattr(_iri(o.datatype))}" if o.datatype else ""
                if o.language:
                    attrs += f" xml:lang={quoteattr(o.language)}"
                out.append(f"    <{qname}{attrs}>{escape(str(o), _XML_TEXT_ENTITIES)}</{qname}>\n")
            elif isinstance(o, BNode):
                out.append(f"    <{qname} rdf:nodeID={quoteattr(str(o))}/>\n")
            else:
                out.append(f"    <{qname} rdf:resource={quoteattr(_iri(o))}/>\n")
        if current is not None:
            out.append("  </rdf:Description>\n")
        out.append("</rdf:RDF>\n")
        return "".join(out).encode("utf-8")


__all__ = [
    "Syntax",
    "SYNTAXES",
    "DEFAULT_SYNTAX",
    "get_syntax",
    "Serializer",
]
