from __future__ import annotations

from pathlib import Path


class LicenseHarvesterError(Exception):
    """Base class for errors that abort a harvest run."""


class UsageError(LicenseHarvesterError):
    pass


class DestinationExists(LicenseHarvesterError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File already exists: {path}")


class RetrievalError(LicenseHarvesterError):
    def __init__(
        self,
        url: str,
        status: int | None = None,
        reason: str | None = None,
    ) -> None:
        self.url = url
        self.status = status
        self.reason = reason
        detail = f"status {status}" if status is not None else "no response"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(f"Error accessing {url} ({detail})")


class MissingVersion(LicenseHarvesterError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"No license list version found at {url}")


class InvalidIdentifier(LicenseHarvesterError):
    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Invalid license identifier: {identifier!r}")


__all__ = [
    "DestinationExists",
    "InvalidIdentifier",
    "LicenseHarvesterError",
    "MissingVersion",
    "RetrievalError",
    "UsageError",
]
