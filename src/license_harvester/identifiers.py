from __future__ import annotations

from typing import Iterable

from license_harvester.errors import InvalidIdentifier

# Identifiers are appended to the catalog URL; path and scheme delimiters
# would let a crafted catalog point requests elsewhere.
_FORBIDDEN_CHARS = frozenset("/:")


def validate_identifier(identifier: str) -> str:
    if not identifier or not identifier.strip():
        raise InvalidIdentifier(identifier)
    if any(ch in _FORBIDDEN_CHARS for ch in identifier):
        raise InvalidIdentifier(identifier)
    return identifier


def sort_identifiers(identifiers: Iterable[str]) -> list[str]:
    """Return identifiers in case-insensitive order.

    Identifiers that differ only by case keep a stable relative order.
    """

    return sorted(identifiers, key=lambda ident: (ident.casefold(), ident))


__all__ = ["sort_identifiers", "validate_identifier"]
