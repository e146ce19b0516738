from __future__ import annotations

"""Repository system metadata for a single data object."""

from dataclasses import dataclass, field
from typing import Dict, List

PUBLIC_SUBJECT = "public"
READ = "read"
WRITE = "write"
CHANGE_PERMISSION = "changePermission"
PERMISSIONS = (READ, WRITE, CHANGE_PERMISSION)


@dataclass(frozen=True, slots=True)
class AccessRule:
    subject: str
    permission: str

    def to_dict(self) -> dict[str, str]:
        return {"subject": self.subject, "permission": self.permission}


@dataclass
class SystemMetadata:
    """Identifier, checksum, size, format, ownership, and access rules.

    Science-level metadata is out of scope here; this record only carries what
    a repository needs to manage the object.
    """

    identifier: str
    format_id: str | None = None
    size: int = 0
    checksum: str | None = None
    checksum_algorithm: str = "SHA-1"
    submitter: str | None = None
    rights_holder: str | None = None
    origin_member_node: str | None = None
    authoritative_member_node: str | None = None
    access_policy: List[AccessRule] = field(default_factory=list)

    def has_access_rule(self, subject: str, permission: str) -> bool:
        return AccessRule(subject, permission) in self.access_policy

    def add_access_rule(self, subject: str, permission: str) -> "SystemMetadata":
        if permission not in PERMISSIONS:
            raise ValueError(f"unknown permission {permission!r}")
        if not self.has_access_rule(subject, permission):
            self.access_policy.append(AccessRule(subject, permission))
        return self

    def to_dict(self) -> Dict[str, object]:
        return {
            "identifier": self.identifier,
            "formatId": self.format_id,
            "size": self.size,
            "checksum": self.checksum,
            "checksumAlgorithm": self.checksum_algorithm,
            "submitter": self.submitter,
            "rightsHolder": self.rights_holder,
            "originMemberNode": self.origin_member_node,
            "authoritativeMemberNode": self.authoritative_member_node,
            "accessPolicy": [rule.to_dict() for rule in self.access_policy],
        }


__all__ = [
    "PUBLIC_SUBJECT",
    "READ",
    "WRITE",
    "CHANGE_PERMISSION",
    "AccessRule",
    "SystemMetadata",
]
