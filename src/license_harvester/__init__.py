"""License Harvester primary package."""

from . import (
    aggregator,
    catalog,
    errors,
    extraction,
    identifiers,
    log_utils,
    models,
    snapshot,
    throttle,
)

__all__ = [
    "aggregator",
    "catalog",
    "errors",
    "extraction",
    "identifiers",
    "log_utils",
    "models",
    "snapshot",
    "throttle",
]
