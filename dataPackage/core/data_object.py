"""A data object: raw bytes (in memory or on disk) plus system metadata."""

from __future__ import annotations

import hashlib
from pathlib import Path

from dataPackage.errors import DataObjectError

from .sysmeta import PUBLIC_SUBJECT, READ, SystemMetadata

_CHUNK = 1024 * 1024


def _sha1_file(path: Path) -> str:
    digest = hashlib.sha1()
    with path.open("rb") as fh:
        for chunk in iter(lambda: fh.read(_CHUNK), b""):
            digest.update(chunk)
    return digest.hexdigest()


class DataObject:
    """Wrap data with the system metadata describing it.

    Build instances through one of the explicit constructors:
    :meth:`from_bytes`, :meth:`from_file` or :meth:`from_sysmeta`. File-backed
    objects keep only the path; the file must not change while the object is
    in use.
    """

    def __init__(
        self,
        sysmeta: SystemMetadata,
        *,
        data: bytes | None = None,
        filename: Path | None = None,
    ) -> None:
        if (data is None) == (filename is None):
            raise DataObjectError("exactly one of data or filename must be provided")
        if data is not None and not isinstance(data, (bytes, bytearray)):
            raise DataObjectError(f"data must be bytes, not {type(data).__name__}")
        self.sysmeta = sysmeta
        self.data = bytes(data) if data is not None else None
        self.filename = Path(filename) if filename is not None else None

    @classmethod
    def from_bytes(
        cls,
        identifier: str,
        data: bytes,
        format_id: str,
        user: str | None = None,
        member_node: str | None = None,
    ) -> "DataObject":
        if not isinstance(data, (bytes, bytearray)):
            raise DataObjectError(f"data must be bytes, not {type(data).__name__}")
        sysmeta = SystemMetadata(
            identifier=identifier,
            format_id=format_id,
            size=len(data),
            checksum=hashlib.sha1(bytes(data)).hexdigest(),
            submitter=user,
            rights_holder=user,
            origin_member_node=member_node,
            authoritative_member_node=member_node,
        )
        return cls(sysmeta, data=bytes(data))

    @classmethod
    def from_file(
        cls,
        identifier: str,
        path: Path,
        format_id: str,
        user: str | None = None,
        member_node: str | None = None,
    ) -> "DataObject":
        path = Path(path)
        if not path.is_file():
            raise DataObjectError(f"data file not found: {path}")
        size = path.stat().st_size
        if size == 0:
            raise DataObjectError(f"data file is empty: {path}")
        sysmeta = SystemMetadata(
            identifier=identifier,
            format_id=format_id,
            size=size,
            checksum=_sha1_file(path),
            submitter=user,
            rights_holder=user,
            origin_member_node=member_node,
            authoritative_member_node=member_node,
        )
        return cls(sysmeta, filename=path)

    @classmethod
    def from_sysmeta(
        cls,
        sysmeta: SystemMetadata,
        *,
        data: bytes | None = None,
        filename: Path | None = None,
    ) -> "DataObject":
        return cls(sysmeta, data=data, filename=filename)

    @property
    def identifier(self) -> str:
        return self.sysmeta.identifier

    @property
    def format_id(self) -> str | None:
        return self.sysmeta.format_id

    def get_data(self) -> bytes:
        if self.data is not None:
            return self.data
        assert self.filename is not None
        return self.filename.read_bytes()

    def set_public_access(self) -> "DataObject":
        self.sysmeta.add_access_rule(PUBLIC_SUBJECT, READ)
        return self

    def can_read(self, subject: str) -> bool:
        # Only the access policy is consulted, not the rights holder.
        return self.sysmeta.has_access_rule(PUBLIC_SUBJECT, READ) or self.sysmeta.has_access_rule(
            subject, READ
        )

    def __repr__(self) -> str:
        where = f"file={self.filename}" if self.filename else f"bytes={len(self.data or b'')}"
        return f"DataObject(id={self.identifier!r}, format={self.format_id!r}, {where})"


__all__ = ["DataObject"]
