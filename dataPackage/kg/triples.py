"""Statements, caller relation rows, and the ordered triple set."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, List, Mapping, Sequence

from rdflib import BNode, Literal, URIRef
from rdflib.term import Node

from dataPackage.errors import InvalidRelationError


class NodeKind(str, Enum):
    RESOURCE = "resource"
    LITERAL = "literal"
    BLANK = "blank"

    @classmethod
    def parse(cls, value: "NodeKind | str | None", default: "NodeKind") -> "NodeKind":
        if value is None or (isinstance(value, str) and not value.strip()):
            return default
        if isinstance(value, NodeKind):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise InvalidRelationError(f"unknown node kind {value!r}") from exc


def _missing(value: object | None) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass(frozen=True, slots=True)
class Statement:
    subject: str
    predicate: str
    object: str
    subject_kind: NodeKind = NodeKind.RESOURCE
    object_kind: NodeKind = NodeKind.RESOURCE
    datatype: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "subject_kind", NodeKind.parse(self.subject_kind, NodeKind.RESOURCE)
        )
        object.__setattr__(
            self, "object_kind", NodeKind.parse(self.object_kind, NodeKind.RESOURCE)
        )
        if _missing(self.subject) or _missing(self.predicate) or self.object is None:
            raise InvalidRelationError(
                f"statement requires subject, predicate and object: {self!r}"
            )
        if self.subject_kind is NodeKind.LITERAL:
            raise InvalidRelationError(f"subject cannot be a literal: {self.subject!r}")
        if self.datatype is not None and self.object_kind is not NodeKind.LITERAL:
            raise InvalidRelationError(
                f"datatype {self.datatype!r} is only valid on literal objects"
            )

    def to_rdflib(self) -> tuple[Node, URIRef, Node]:
        if self.subject_kind is NodeKind.BLANK:
            subject: Node = BNode(self.subject)
        else:
            subject = URIRef(self.subject)
        if self.object_kind is NodeKind.LITERAL:
            datatype = URIRef(self.datatype) if self.datatype else None
            obj: Node = Literal(self.object, datatype=datatype)
        elif self.object_kind is NodeKind.BLANK:
            obj = BNode(self.object)
        else:
            obj = URIRef(self.object)
        return subject, URIRef(self.predicate), obj


_COLUMN_ALIASES = {
    "subject_type": ("subject_type", "subjectType"),
    "object_type": ("object_type", "objectType"),
    "datatype_uri": ("datatype_uri", "dataTypeURI", "datatype"),
}


def _pick(row: Mapping[str, Any], field: str) -> Any:
    for key in _COLUMN_ALIASES.get(field, (field,)):
        if key in row:
            value = row[key]
            # tables round-tripped through R or pandas carry NA markers
            if isinstance(value, str) and value.strip() in {"", "NA"}:
                return None
            if isinstance(value, float) and value != value:
                return None
            return value
    return None


@dataclass(frozen=True, slots=True)
class Relation:
    """One caller-supplied relation row, before identifier resolution."""

    subject: str
    predicate: str
    object: str
    subject_type: NodeKind = NodeKind.RESOURCE
    object_type: NodeKind = NodeKind.RESOURCE
    datatype_uri: str | None = None

    def __post_init__(self) -> None:
        for name in ("subject", "predicate", "object"):
            if _missing(getattr(self, name)):
                raise InvalidRelationError(f"relation is missing its {name}: {self!r}")
        object.__setattr__(self, "subject", str(self.subject))
        object.__setattr__(self, "predicate", str(self.predicate))
        object.__setattr__(self, "object", str(self.object))
        object.__setattr__(
            self, "subject_type", NodeKind.parse(self.subject_type, NodeKind.RESOURCE)
        )
        object.__setattr__(
            self, "object_type", NodeKind.parse(self.object_type, NodeKind.RESOURCE)
        )
        if _missing(self.datatype_uri):
            object.__setattr__(self, "datatype_uri", None)

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "Relation":
        return cls(
            subject=_pick(row, "subject"),
            predicate=_pick(row, "predicate"),
            object=_pick(row, "object"),
            subject_type=_pick(row, "subject_type"),
            object_type=_pick(row, "object_type"),
            datatype_uri=_pick(row, "datatype_uri"),
        )

    @classmethod
    def coerce(cls, row: "Relation | Mapping[str, Any] | Sequence[Any]") -> "Relation":
        """Accept a Relation, a mapping with named columns, or a positional row."""

        if isinstance(row, Relation):
            return row
        if isinstance(row, Mapping):
            return cls.from_mapping(row)
        values = list(row)
        if len(values) < 3 or len(values) > 6:
            raise InvalidRelationError(f"relation rows need 3 to 6 columns, got {values!r}")
        return cls(*values)

    def to_statement(self, subject: str, obj: str) -> Statement:
        return Statement(
            subject=subject,
            predicate=self.predicate,
            object=obj,
            subject_kind=self.subject_type,
            object_kind=self.object_type,
            datatype=self.datatype_uri if self.object_type is NodeKind.LITERAL else None,
        )


class TripleSet:
    """Ordered, append-only collection of statements.

    Duplicates are kept; :meth:`unique` gives the union view used when the
    statements are written out.
    """

    def __init__(self, statements: Iterable[Statement] = ()) -> None:
        self._statements: List[Statement] = []
        self.extend(statements)

    def append(self, statement: Statement) -> None:
        if not isinstance(statement, Statement):
            raise TypeError(f"expected Statement, got {type(statement).__name__}")
        self._statements.append(statement)

    def extend(self, statements: Iterable[Statement]) -> None:
        for statement in statements:
            self.append(statement)

    def iterate(self) -> Iterator[Statement]:
        return iter(tuple(self._statements))

    def unique(self) -> Iterator[Statement]:
        seen: set[Statement] = set()
        for statement in self.iterate():
            if statement in seen:
                continue
            seen.add(statement)
            yield statement

    def __iter__(self) -> Iterator[Statement]:
        return self.iterate()

    def __len__(self) -> int:
        return len(self._statements)

    def __contains__(self, statement: object) -> bool:
        return statement in self._statements


__all__ = ["NodeKind", "Statement", "Relation", "TripleSet"]
