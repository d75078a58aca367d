from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from rdflib import Graph, Literal, URIRef

from license_harvester.catalog import LicenseCatalog
from license_harvester.identifiers import sort_identifiers
from license_harvester.local_constants import (
    LICENSE,
    LICENSE_LIST_VERSION,
    SPDX_PROVIDER_ID,
    SPDX_TERMS,
)
from license_harvester.log_utils import license_log_record, write_jsonl
from license_harvester.models import CatalogIndex, HarvestSettings
from license_harvester.snapshot import (
    ensure_destination_available,
    write_snapshot,
)
from license_harvester.throttle import Throttle


@dataclass
class Aggregate:
    graph: Graph
    index: CatalogIndex
    order: list[str] = field(default_factory=list)
    log_records: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class HarvestResult:
    path: Path
    version: str
    identifiers: list[str]
    sha256: str
    graph: Graph


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def build_aggregate(
    catalog: LicenseCatalog,
    throttle: Throttle,
    *,
    echo: Callable[[str], None] = print,
) -> Aggregate:
    """Read the index and fold every listed license into one graph.

    Licenses are fetched one at a time in case-insensitive identifier order,
    pausing before each request. The first failure propagates and the
    partially built graph is dropped with it.
    """

    index = catalog.read_index()

    graph = Graph()
    graph.bind("spdx", SPDX_TERMS)
    root = URIRef(catalog.settings.list_url)
    graph.add((root, LICENSE_LIST_VERSION, Literal(index.version)))

    aggregate = Aggregate(graph=graph, index=index)
    for identifier in sort_identifiers(index.identifiers):
        echo(f"[{SPDX_PROVIDER_ID}] Downloading license {identifier}")
        throttle.wait()
        record = catalog.retrieve(identifier)
        graph += record.facts
        graph.add((root, LICENSE, record.subject))
        aggregate.order.append(identifier)
        aggregate.log_records.append(license_log_record(record, _now()))
    return aggregate


def harvest(
    output_path: Path,
    options: dict[str, Any] | None = None,
    *,
    catalog: LicenseCatalog | None = None,
    throttle: Throttle | None = None,
    log_path: Path | None = None,
    echo: Callable[[str], None] = print,
) -> HarvestResult:
    ensure_destination_available(output_path)

    settings = HarvestSettings.from_options(options or {})
    catalog = catalog or LicenseCatalog(settings)
    throttle = throttle or Throttle(catalog.settings.throttle_seconds)

    aggregate = build_aggregate(catalog, throttle, echo=echo)
    sha256 = write_snapshot(aggregate.graph, output_path)

    if log_path is not None:
        summary = {
            "kind": "snapshot",
            "provider": SPDX_PROVIDER_ID,
            "index_url": aggregate.index.url,
            "version": aggregate.index.version,
            "licenses": len(aggregate.order),
            "path": str(output_path),
            "sha256": sha256,
            "written_at": _now(),
        }
        try:
            write_jsonl(log_path, [*aggregate.log_records, summary])
        except OSError as exc:
            echo(f"[{SPDX_PROVIDER_ID}] Run log not written to {log_path}: {exc}")

    return HarvestResult(
        path=output_path,
        version=aggregate.index.version,
        identifiers=aggregate.order,
        sha256=sha256,
        graph=aggregate.graph,
    )


__all__ = ["Aggregate", "HarvestResult", "build_aggregate", "harvest"]
