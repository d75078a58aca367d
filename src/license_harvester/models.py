from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from rdflib import Graph
from rdflib.term import Node, URIRef

from license_harvester.local_constants import (
    DEFAULT_THROTTLE_SECONDS,
    DEFAULT_TIMEOUT_S,
    DEFAULT_USER_AGENT,
    LICENSE_LIST_URL,
)


@dataclass
class HarvestSettings:
    list_url: str = LICENSE_LIST_URL
    throttle_seconds: float = DEFAULT_THROTTLE_SECONDS
    http_timeout: float = DEFAULT_TIMEOUT_S
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> HarvestSettings:
        return cls(
            list_url=str(options.get("list_url") or cls.list_url),
            throttle_seconds=float(
                options.get("throttle_seconds", cls.throttle_seconds)
            ),
            http_timeout=float(options.get("http_timeout", cls.http_timeout)),
            user_agent=str(options.get("user_agent") or cls.user_agent),
        )


@dataclass
class FactSet:
    """Facts extracted from one page.

    ``subjects`` lists IRI subjects by first mention in the page markup.
    """

    graph: Graph
    subjects: list[URIRef] = field(default_factory=list)


@dataclass
class LicenseRecord:
    identifier: str
    url: str
    subject: Node
    facts: Graph


@dataclass(frozen=True)
class CatalogIndex:
    url: str
    version: str
    identifiers: frozenset[str]


def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


__all__ = [
    "CatalogIndex",
    "FactSet",
    "HarvestSettings",
    "LicenseRecord",
    "ensure_parent",
]
