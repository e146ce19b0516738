from __future__ import annotations

"""Identifier resolution against a network resolve endpoint.

These helpers are deterministic, idempotent, and safe to apply to identifiers
that were already resolved.
"""

DEFAULT_RESOLVE_BASE = "https://cn.dataone.org/cn/v1/resolve/"


def is_resolved(value: str, base: str = DEFAULT_RESOLVE_BASE) -> bool:
    return str(value).startswith(base)


def resolve(identifier: str, base: str = DEFAULT_RESOLVE_BASE) -> str:
    """Return the resolvable URI for ``identifier``.

    Idempotent: passing an already-resolved URI returns it unchanged.
    """

    value = str(identifier)
    if is_resolved(value, base):
        return value
    return f"{base}{value}"


def bare_identifier(value: str, base: str = DEFAULT_RESOLVE_BASE) -> str:
    value = str(value)
    if is_resolved(value, base):
        return value[len(base) :]
    return value


def resource_map_iri(map_id: str, base: str = DEFAULT_RESOLVE_BASE) -> str:
    return resolve(map_id, base)


def aggregation_iri(map_id: str, base: str = DEFAULT_RESOLVE_BASE) -> str:
    return f"{resource_map_iri(map_id, base)}#aggregation"


__all__ = [
    "DEFAULT_RESOLVE_BASE",
    "is_resolved",
    "resolve",
    "bare_identifier",
    "resource_map_iri",
    "aggregation_iri",
]
