"""OAI-ORE resource map: owns the working graph for one data package."""

from __future__ import annotations

import logging
import uuid
from enum import Enum
from typing import Any, Iterable, List, Mapping, Sequence, Union

from rdflib import Graph

from dataPackage.config import PackageConfig
from dataPackage.errors import ResourceReleasedError
from dataPackage.utils.log_json import JsonLogger

from .aggregation import AggregationBuilder
from .iri import is_resolved, resolve
from .serializer import Destination, Serializer
from .triples import NodeKind, Relation, Statement, TripleSet

_LOGGER = logging.getLogger("datapackage.resource_map")

RESOURCE_MAP_PREFIX = "resourceMap_"

RelationRow = Union[Relation, Mapping[str, Any], Sequence[Any]]


class MapState(str, Enum):
    EMPTY = "empty"
    POPULATED = "populated"
    SERIALIZED = "serialized"
    RELEASED = "released"


def generate_map_id() -> str:
    return f"{RESOURCE_MAP_PREFIX}{uuid.uuid4()}"


class ResourceMap:
    """Build and serialize the ORE description of a data package.

    Use :meth:`create` or :meth:`from_identifier` rather than calling the
    constructor with an optional id. The instance owns an in-memory rdflib
    graph; call :meth:`release` (or use it as a context manager) when done.
    """

    def __init__(self, map_id: str, *, config: PackageConfig | None = None) -> None:
        if not str(map_id).strip():
            raise ValueError("resource map id must be non-empty")
        self.id = str(map_id)
        self.config = config or PackageConfig()
        self.members: List[str] = []
        self.triples = TripleSet()
        self.state = MapState.EMPTY
        self._graph: Graph | None = Graph(bind_namespaces="none")
        self._log = JsonLogger(
            "resource_map",
            enabled=self.config.logging_enabled,
            max_details_bytes=self.config.max_details_bytes,
        )
        self._log.info("resource_map.created", map_id=self.id)

    @classmethod
    def create(cls, map_id: str | None = None, *, config: PackageConfig | None = None) -> "ResourceMap":
        return cls(map_id or generate_map_id(), config=config)

    @classmethod
    def from_identifier(cls, map_id: str, *, config: PackageConfig | None = None) -> "ResourceMap":
        return cls(map_id, config=config)

    def __enter__(self) -> "ResourceMap":
        self._require_live()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"ResourceMap(id={self.id!r}, state={self.state.value}, statements={len(self.triples)})"

    @property
    def base(self) -> str:
        return self.config.resolve_base

    @property
    def released(self) -> bool:
        return self.state is MapState.RELEASED

    @property
    def graph(self) -> Graph:
        """Return a copy of the working graph for inspection."""

        graph = self._require_live()
        copy = Graph(bind_namespaces="none")
        for triple in graph:
            copy.add(triple)
        return copy

    def _require_live(self) -> Graph:
        if self._graph is None:
            raise ResourceReleasedError(f"resource map {self.id} has been released")
        return self._graph

    def _resolve_endpoint(self, value: str, kind: NodeKind, members: set[str]) -> str:
        if value in members and not is_resolved(value, self.base):
            return resolve(value, self.base)
        if kind is NodeKind.RESOURCE and value not in members and not is_resolved(value, self.base):
            _LOGGER.debug("relation endpoint %s is not a package member; left as-is", value)
        return value

    def relation_statements(
        self, relations: Iterable[RelationRow], member_ids: Sequence[str]
    ) -> List[Statement]:
        members = set(member_ids)
        statements: List[Statement] = []
        for row in relations:
            relation = Relation.coerce(row)
            subject = self._resolve_endpoint(relation.subject, relation.subject_type, members)
            obj = self._resolve_endpoint(relation.object, relation.object_type, members)
            statements.append(relation.to_statement(subject, obj))
        return statements

    def add_relations(self, relations: Iterable[RelationRow], member_ids: Sequence[str]) -> "ResourceMap":
        """Insert relation triples followed by the derived aggregation triples.

        Every row is validated before anything is appended, so a malformed row
        leaves the map unchanged.
        """

        graph = self._require_live()
        member_ids = [str(m) for m in member_ids]
        batch = self.relation_statements(relations, member_ids)
        relation_count = len(batch)
        batch.extend(AggregationBuilder(self.id, self.base).build(member_ids))

        self.triples.extend(batch)
        for statement in batch:
            graph.add(statement.to_rdflib())
        for member in member_ids:
            if member not in self.members:
                self.members.append(member)
        if self.state is MapState.EMPTY:
            self.state = MapState.POPULATED
        self._log.info(
            "resource_map.populated",
            map_id=self.id,
            details={
                "members": len(member_ids),
                "relations": relation_count,
                "statements": len(self.triples),
            },
        )
        return self

    def serializer(self, namespaces: Mapping[str, str] | None = None) -> Serializer:
        merged = dict(self.config.namespaces)
        merged.update(namespaces or {})
        return Serializer(merged, json_logger=self._log)

    def serialize(self, syntax: str | None = None, namespaces: Mapping[str, str] | None = None) -> bytes:
        self._require_live()
        syntax = syntax or self.config.default_syntax
        data = self.serializer(namespaces).serialize(self.triples, syntax)
        self._mark_serialized(syntax, len(data))
        return data

    def serialize_to_file(
        self,
        destination: Destination,
        syntax: str | None = None,
        namespaces: Mapping[str, str] | None = None,
    ) -> int:
        self._require_live()
        syntax = syntax or self.config.default_syntax
        written = self.serializer(namespaces).write(self.triples, syntax, destination)
        self._mark_serialized(syntax, written)
        return written

    def _mark_serialized(self, syntax: str, size: int) -> None:
        if self.state is not MapState.EMPTY:
            self.state = MapState.SERIALIZED
        self._log.info("resource_map.serialized", map_id=self.id, syntax=syntax, details={"bytes": size})

    def release(self) -> None:
        if self._graph is None:
            return
        try:
            self._graph.close()
        finally:
            self._graph = None
            self.state = MapState.RELEASED
            self._log.info("resource_map.released", map_id=self.id)


__all__ = ["MapState", "ResourceMap", "RESOURCE_MAP_PREFIX", "generate_map_id"]
