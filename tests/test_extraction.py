from __future__ import annotations

from rdflib import URIRef

from license_harvester.extraction import extract_facts
from license_harvester.local_constants import (
    LICENSE_ID,
    LICENSE_LIST_URL,
    SPDX_TERMS,
)

DETAIL_HTML = """<!DOCTYPE html>
<html prefix="spdx: http://spdx.org/rdf/terms#">
  <head><title>MIT License</title></head>
  <body>
    <div about="https://spdx.org/licenses/MIT" typeof="spdx:License">
      <code property="spdx:licenseId">MIT</code>
      <h1 property="spdx:name">MIT License</h1>
    </div>
  </body>
</html>
"""


def test_extract_facts_reads_rdfa_statements() -> None:
    url = LICENSE_LIST_URL + "MIT"
    facts = extract_facts(DETAIL_HTML, url)

    subject = URIRef("https://spdx.org/licenses/MIT")
    assert facts.subjects[0] == subject
    assert str(facts.graph.value(subject, LICENSE_ID)) == "MIT"
    assert str(facts.graph.value(subject, SPDX_TERMS.name)) == "MIT License"


def test_extract_facts_without_markup_is_empty() -> None:
    facts = extract_facts("<html><body><p>plain</p></body></html>", LICENSE_LIST_URL)

    assert len(facts.graph) == 0
    assert facts.subjects == []


ORDERED_HTML = """<!DOCTYPE html>
<html prefix="spdx: http://spdx.org/rdf/terms#">
  <body>
    <div about="https://spdx.org/licenses/MIT.html">
      <span property="spdx:name">Page about MIT</span>
    </div>
    <div about="https://spdx.org/licenses/ZZZ">
      <code property="spdx:licenseId">ZZZ</code>
    </div>
    <div about="https://spdx.org/licenses/AAA">
      <span property="spdx:name">AAA License</span>
    </div>
  </body>
</html>
"""


def test_subjects_follow_document_order() -> None:
    facts = extract_facts(ORDERED_HTML, LICENSE_LIST_URL + "MIT")

    assert facts.subjects[:3] == [
        URIRef("https://spdx.org/licenses/MIT.html"),
        URIRef("https://spdx.org/licenses/ZZZ"),
        URIRef("https://spdx.org/licenses/AAA"),
    ]
