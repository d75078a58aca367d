from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping

from license_harvester.models import LicenseRecord, ensure_parent


def license_log_record(record: LicenseRecord, fetched_at: str) -> dict[str, Any]:
    return {
        "kind": "license",
        "identifier": record.identifier,
        "url": record.url,
        "subject": str(record.subject),
        "facts": len(record.facts),
        "fetched_at": fetched_at,
    }


def write_jsonl(path: Path, records: Iterable[Mapping[str, object]]) -> None:
    ensure_parent(path)
    with path.open("w", encoding="utf-8") as handle:
        for record in records:
            handle.write(json.dumps(record, ensure_ascii=False, sort_keys=True))
            handle.write("\n")


__all__ = ["license_log_record", "write_jsonl"]
