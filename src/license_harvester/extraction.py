from __future__ import annotations

import json
from urllib.parse import urljoin

import extruct
import lxml.html
from rdflib import Graph, URIRef

from license_harvester.models import FactSet

# RDFa attributes that can name a subject, checked per element in this order.
_SUBJECT_ATTRIBUTES = ("about", "resource", "href", "src")


def _document_iris(html: str, base_url: str) -> list[str]:
    if not html.strip():
        return []
    parser = lxml.html.HTMLParser(encoding="utf-8")
    root = lxml.html.document_fromstring(html.encode("utf-8"), parser=parser)
    iris: list[str] = []
    for element in root.iter():
        if not isinstance(element.tag, str):
            continue
        for attr in _SUBJECT_ATTRIBUTES:
            value = element.get(attr)
            if value is None or value.startswith("["):
                continue
            iris.append(urljoin(base_url, value.strip()))
    return iris


def _subject_order(graph: Graph, html: str, base_url: str) -> list[URIRef]:
    """Order the graph's IRI subjects by first mention in the markup.

    Subjects never named by an attribute follow in lexical order.
    """

    subjects = {s for s in graph.subjects() if isinstance(s, URIRef)}
    ordered: list[URIRef] = []
    for iri in _document_iris(html, base_url):
        subject = URIRef(iri)
        if subject in subjects and subject not in ordered:
            ordered.append(subject)
    ordered.extend(sorted(subjects.difference(ordered), key=str))
    return ordered


def extract_facts(html: str, base_url: str) -> FactSet:
    """Extract the RDFa statements embedded in ``html``.

    extruct yields expanded JSON-LD node objects, which are loaded into an
    rdflib graph.
    """

    data = extruct.extract(
        html,
        base_url=base_url,
        syntaxes=["rdfa"],
        uniform=False,
    )
    items = [item for item in data.get("rdfa", []) if isinstance(item, dict)]

    graph = Graph()
    if not items:
        return FactSet(graph=graph)
    graph.parse(data=json.dumps(items), format="json-ld", publicID=base_url)
    return FactSet(graph=graph, subjects=_subject_order(graph, html, base_url))


__all__ = ["extract_facts"]
