"""Binary snapshot encoding and the write-once destination file.

A snapshot is the graph serialized as N-Triples with canonical blank-node
labels, one statement per line in sorted order, inside a gzip container with
a zeroed timestamp. The same graph always encodes to the same bytes.
"""

from __future__ import annotations

import gzip
import hashlib
from pathlib import Path

from rdflib import Graph
from rdflib.compare import to_canonical_graph

from license_harvester.errors import DestinationExists, UsageError
from license_harvester.local_constants import SPDX_TERMS
from license_harvester.models import ensure_parent

SNAPSHOT_FORMAT = "nt"


def ensure_destination_available(path: Path) -> None:
    if not path.name:
        raise UsageError("Destination file required")
    if path.exists():
        raise DestinationExists(path)


def encode_graph(graph: Graph) -> bytes:
    canonical = Graph()
    for triple in to_canonical_graph(graph).triples((None, None, None)):
        canonical.add(triple)
    text = canonical.serialize(format=SNAPSHOT_FORMAT)
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    lines = sorted(line for line in text.splitlines() if line.strip())
    payload = "".join(line + "\n" for line in lines).encode("utf-8")
    return gzip.compress(payload, mtime=0)


def decode_graph(data: bytes) -> Graph:
    graph = Graph()
    graph.bind("spdx", SPDX_TERMS)
    text = gzip.decompress(data).decode("utf-8")
    if text.strip():
        graph.parse(data=text, format=SNAPSHOT_FORMAT)
    return graph


def sha256_bytes(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def write_snapshot(graph: Graph, path: Path) -> str:
    """Encode ``graph`` and write it to ``path``, which must not exist yet.

    Returns the sha256 of the bytes written.
    """

    payload = encode_graph(graph)
    ensure_parent(path)
    try:
        with path.open("xb") as handle:
            handle.write(payload)
    except FileExistsError as exc:
        raise DestinationExists(path) from exc
    except OSError:
        path.unlink(missing_ok=True)
        raise
    return sha256_bytes(payload)


__all__ = [
    "decode_graph",
    "encode_graph",
    "ensure_destination_available",
    "sha256_bytes",
    "write_snapshot",
]
