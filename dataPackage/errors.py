"""Exception hierarchy shared by the resource-map engine and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


class DataPackageError(Exception):
    """Base class for all package errors."""


class InvalidRelationError(DataPackageError, ValueError):
    """Raised when a relation row or statement is malformed."""


class NamespaceConflictError(DataPackageError, ValueError):
    """Raised when caller namespaces would shadow a default binding."""


class ResourceReleasedError(DataPackageError, RuntimeError):
    """Raised when a released resource map is used again."""


class DataObjectError(DataPackageError, ValueError):
    """Raised when a data object cannot be constructed."""


@dataclass
class SerializationError(DataPackageError):
    syntax: str
    message: str
    destination: str | None = None

    def __str__(self) -> str:
        where = f" to {self.destination}" if self.destination else ""
        return f"cannot serialize as {self.syntax!r}{where}: {self.message}"

    def as_dict(self) -> Dict[str, object]:
        return {
            "syntax": self.syntax,
            "destination": self.destination,
            "message": self.message,
        }


__all__ = [
    "DataPackageError",
    "InvalidRelationError",
    "NamespaceConflictError",
    "ResourceReleasedError",
    "DataObjectError",
    "SerializationError",
]
