"""Assemble data objects and their relationships into a resource map."""

from __future__ import annotations

from typing import Dict, Iterable, List

from dataPackage.config import PackageConfig
from dataPackage.kg.namespaces import CITO
from dataPackage.kg.resource_map import ResourceMap
from dataPackage.kg.triples import NodeKind, Relation

from .data_object import DataObject

DEFAULT_PREDICATE = str(CITO.documents)


class DataPackage:
    """Ordered set of data objects plus the relations between them."""

    def __init__(self, objects: Iterable[DataObject] = ()) -> None:
        self._members: Dict[str, DataObject] = {}
        self._relations: List[Relation] = []
        for obj in objects:
            self.add_member(obj)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._members

    def add_member(self, obj: DataObject) -> "DataPackage":
        """Add ``obj``; re-adding an identifier replaces the earlier object in place."""

        self._members[obj.identifier] = obj
        return self

    def get_member(self, identifier: str) -> DataObject:
        return self._members[identifier]

    def get_identifiers(self) -> List[str]:
        return list(self._members)

    def get_relationships(self) -> List[Relation]:
        return list(self._relations)

    def insert_relation(
        self,
        subject: str,
        objects: str | Iterable[str],
        predicate: str = DEFAULT_PREDICATE,
        *,
        object_type: NodeKind = NodeKind.RESOURCE,
        datatype_uri: str | None = None,
    ) -> "DataPackage":
        if isinstance(objects, str):
            objects = [objects]
        for obj in objects:
            self._relations.append(
                Relation(
                    subject=subject,
                    predicate=predicate,
                    object=obj,
                    object_type=object_type,
                    datatype_uri=datatype_uri,
                )
            )
        return self

    def summary(self) -> List[Dict[str, object]]:
        """Return the per-member fields a resource map consumer needs."""

        return [
            {
                "identifier": obj.identifier,
                "sizeBytes": obj.sysmeta.size,
                "checksum": obj.sysmeta.checksum,
                "formatId": obj.format_id,
            }
            for obj in self._members.values()
        ]

    def build_resource_map(
        self, map_id: str | None = None, *, config: PackageConfig | None = None
    ) -> ResourceMap:
        resource_map = ResourceMap.create(map_id, config=config)
        try:
            resource_map.add_relations(self._relations, self.get_identifiers())
        except Exception:
            resource_map.release()
            raise
        return resource_map


__all__ = ["DEFAULT_PREDICATE", "DataPackage"]
