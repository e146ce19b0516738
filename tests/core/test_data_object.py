from __future__ import annotations

import hashlib
from pathlib import Path

import pytest

from dataPackage.core import DataObject, SystemMetadata
from dataPackage.errors import DataObjectError

DATA = b"1,2,3\n4,5,6\n"
USER = "uid=jones,DC=example,DC=com"


def test_from_bytes_builds_system_metadata() -> None:
    obj = DataObject.from_bytes("id1", DATA, "text/csv", USER, "urn:node:KNB")
    assert obj.identifier == "id1"
    assert obj.format_id == "text/csv"
    assert obj.sysmeta.size == len(DATA)
    assert obj.sysmeta.checksum == hashlib.sha1(DATA).hexdigest()
    assert obj.sysmeta.checksum_algorithm == "SHA-1"
    assert obj.sysmeta.rights_holder == USER
    assert obj.sysmeta.authoritative_member_node == "urn:node:KNB"
    assert obj.get_data() == DATA


def test_from_file_streams_checksum(tmp_path: Path) -> None:
    path = tmp_path / "data.csv"
    path.write_bytes(DATA)
    obj = DataObject.from_file("id1", path, "text/csv", USER, "urn:node:KNB")
    assert obj.filename == path
    assert obj.data is None
    assert obj.sysmeta.checksum == hashlib.sha1(DATA).hexdigest()
    assert obj.get_data() == DATA


def test_from_file_rejects_empty_or_missing(tmp_path: Path) -> None:
    empty = tmp_path / "empty.csv"
    empty.write_bytes(b"")
    with pytest.raises(DataObjectError):
        DataObject.from_file("id1", empty, "text/csv")
    with pytest.raises(DataObjectError):
        DataObject.from_file("id1", tmp_path / "absent.csv", "text/csv")


def test_from_sysmeta_requires_exactly_one_source(tmp_path: Path) -> None:
    sysmeta = SystemMetadata(identifier="id1", format_id="text/csv", size=len(DATA))
    assert DataObject.from_sysmeta(sysmeta, data=DATA).identifier == "id1"
    with pytest.raises(DataObjectError):
        DataObject.from_sysmeta(sysmeta)
    with pytest.raises(DataObjectError):
        DataObject.from_sysmeta(sysmeta, data=DATA, filename=tmp_path / "x")
    with pytest.raises(DataObjectError):
        DataObject.from_bytes("id1", "not bytes", "text/csv")  # type: ignore[arg-type]


def test_access_rules() -> None:
    obj = DataObject.from_bytes("id1", DATA, "text/csv", USER)
    assert not obj.can_read("uid=anybody,DC=example,DC=com")
    obj.sysmeta.add_access_rule("uid=anybody,DC=example,DC=com", "read")
    assert obj.can_read("uid=anybody,DC=example,DC=com")
    assert not obj.can_read("uid=other,DC=example,DC=com")
    obj.set_public_access().set_public_access()
    assert obj.can_read("uid=other,DC=example,DC=com")
    assert obj.can_read("public")
    assert len(obj.sysmeta.access_policy) == 2
    with pytest.raises(ValueError):
        obj.sysmeta.add_access_rule("public", "admin")


def test_sysmeta_to_dict() -> None:
    obj = DataObject.from_bytes("id1", DATA, "text/csv").set_public_access()
    record = obj.sysmeta.to_dict()
    assert record["identifier"] == "id1"
    assert record["formatId"] == "text/csv"
    assert record["accessPolicy"] == [{"subject": "public", "permission": "read"}]
