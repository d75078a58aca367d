from __future__ import annotations

from typing import Callable

import httpx
from rdflib.term import Node

from license_harvester.errors import MissingVersion, RetrievalError
from license_harvester.extraction import extract_facts
from license_harvester.identifiers import validate_identifier
from license_harvester.local_constants import (
    LICENSE_ID,
    LICENSE_LIST_VERSION,
)
from license_harvester.models import (
    CatalogIndex,
    FactSet,
    HarvestSettings,
    LicenseRecord,
)

_http_get: Callable[..., httpx.Response | None] = httpx.get

Extractor = Callable[[str, str], FactSet]


class LicenseCatalog:
    """Reads the license list index and its per-license detail pages."""

    def __init__(
        self,
        settings: HarvestSettings | None = None,
        extractor: Extractor = extract_facts,
    ) -> None:
        self.settings = settings or HarvestSettings()
        self.extractor = extractor

    def _fetch(self, url: str) -> str:
        try:
            resp = _http_get(
                url,
                headers={"User-Agent": self.settings.user_agent},
                timeout=self.settings.http_timeout,
                follow_redirects=True,
            )
        except httpx.HTTPError as exc:
            raise RetrievalError(url, reason=str(exc)) from exc
        if resp is None:
            raise RetrievalError(url)
        status = int(resp.status_code)
        if status != 200:
            raise RetrievalError(url, status=status)
        return resp.text

    def read_index(self, url: str | None = None) -> CatalogIndex:
        url = url or self.settings.list_url
        facts = self.extractor(self._fetch(url), url)

        versions = sorted(
            {
                str(node)
                for node in facts.graph.objects(None, LICENSE_LIST_VERSION)
            }
        )
        if not versions:
            raise MissingVersion(url)

        identifiers = frozenset(
            str(node) for node in facts.graph.objects(None, LICENSE_ID)
        )
        return CatalogIndex(url=url, version=versions[0], identifiers=identifiers)

    def license_url(self, identifier: str) -> str:
        return self.settings.list_url + validate_identifier(identifier)

    def retrieve(self, identifier: str) -> LicenseRecord:
        url = self.license_url(identifier)
        facts = self.extractor(self._fetch(url), url)

        subject = _primary_subject(facts)
        if subject is None:
            raise RetrievalError(url, status=200, reason="no structured facts")

        return LicenseRecord(
            identifier=identifier,
            url=url,
            subject=subject,
            facts=facts.graph.cbd(subject),
        )


def _primary_subject(facts: FactSet) -> Node | None:
    # A detail page describes one license; the first subject carrying a
    # license id wins, otherwise the first subject on the page.
    for subject in facts.subjects:
        if (subject, LICENSE_ID, None) in facts.graph:
            return subject
    if facts.subjects:
        return facts.subjects[0]
    return None


__all__ = ["LicenseCatalog"]
