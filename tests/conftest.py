from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest
from rdflib import BNode, Graph, Literal, URIRef

import license_harvester.catalog as catalog_mod
from license_harvester.local_constants import (
    LICENSE_ID,
    LICENSE_LIST_URL,
    LICENSE_LIST_VERSION,
    SPDX_TERMS,
)
from license_harvester.models import FactSet


@dataclass
class FakeResponse:
    url: str
    status_code: int = 200
    text: str = ""


def index_facts(version: str | None, identifiers: list[str]) -> FactSet:
    graph = Graph()
    root = URIRef(LICENSE_LIST_URL)
    if version is not None:
        graph.add((root, LICENSE_LIST_VERSION, Literal(version)))
    subjects = [root]
    for ident in identifiers:
        subject = URIRef(LICENSE_LIST_URL + ident)
        graph.add((subject, LICENSE_ID, Literal(ident)))
        subjects.append(subject)
    return FactSet(graph=graph, subjects=subjects)


def license_facts(ident: str) -> FactSet:
    graph = Graph()
    subject = URIRef(LICENSE_LIST_URL + ident)
    cross_ref = BNode()
    graph.add((subject, LICENSE_ID, Literal(ident)))
    graph.add((subject, SPDX_TERMS.name, Literal(f"{ident} License")))
    graph.add((subject, SPDX_TERMS.crossRef, cross_ref))
    graph.add((cross_ref, SPDX_TERMS.url, Literal(f"https://example.org/{ident}")))
    return FactSet(graph=graph, subjects=[subject])


@dataclass
class FakeCatalogSite:
    """Serves canned pages through ``_http_get`` and a fake extractor.

    The response body is the requested URL, so the extractor can look the
    facts up by it.
    """

    pages: dict[str, FactSet] = field(default_factory=dict)
    statuses: dict[str, int | None] = field(default_factory=dict)
    events: list[str] = field(default_factory=list)
    requests: list[dict[str, Any]] = field(default_factory=list)

    def get(self, url: str, **kwargs: Any) -> FakeResponse | None:
        self.events.append(f"get {url}")
        self.requests.append({"url": url, **kwargs})
        status = self.statuses.get(url, 200)
        if status is None:
            return None
        return FakeResponse(url=url, status_code=status, text=url)

    def extract(self, html: str, base_url: str) -> FactSet:
        assert html == base_url
        return self.pages.get(html, FactSet(graph=Graph()))

    def sleep(self, seconds: float) -> None:
        self.events.append(f"sleep {seconds}")

    def publish(self, version: str | None, ids: list[str]) -> None:
        self.pages[LICENSE_LIST_URL] = index_facts(version, ids)
        for ident in ids:
            self.pages[LICENSE_LIST_URL + ident] = license_facts(ident)

    def detail_urls(self) -> list[str]:
        return [
            req["url"] for req in self.requests if req["url"] != LICENSE_LIST_URL
        ]


@pytest.fixture
def site(monkeypatch: pytest.MonkeyPatch) -> FakeCatalogSite:
    fake = FakeCatalogSite()
    monkeypatch.setattr(catalog_mod, "_http_get", fake.get)
    return fake
