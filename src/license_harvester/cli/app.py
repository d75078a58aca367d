from __future__ import annotations

from pathlib import Path

import typer

from license_harvester.aggregator import harvest
from license_harvester.errors import LicenseHarvesterError, UsageError
from license_harvester.local_constants import (
    DEFAULT_THROTTLE_SECONDS,
    DEFAULT_TIMEOUT_S,
    DEFAULT_USER_AGENT,
)

app = typer.Typer(
    help="Download the SPDX license list into a single snapshot file",
)


@app.command()
def snapshot(
    destination: Path = typer.Argument(
        ...,
        help="Destination file (must not exist yet)",
    ),
    throttle_seconds: float = typer.Option(
        DEFAULT_THROTTLE_SECONDS,
        help="Delay before each license page request",
    ),
    timeout: float = typer.Option(
        DEFAULT_TIMEOUT_S,
        help="Per-request HTTP timeout (seconds)",
    ),
    user_agent: str = typer.Option(
        DEFAULT_USER_AGENT,
        help="User-Agent for HTTP requests",
    ),
    log_path: Path | None = typer.Option(
        None,
        help="Optional JSONL run log (one record per license plus a summary)",
    ),
) -> None:
    """Fetch the license list and every listed license, then write the snapshot."""

    try:
        result = harvest(
            destination,
            {
                "throttle_seconds": throttle_seconds,
                "http_timeout": timeout,
                "user_agent": user_agent,
            },
            log_path=log_path,
        )
    except UsageError as exc:
        raise typer.BadParameter(str(exc), param_hint="DESTINATION") from exc
    except LicenseHarvesterError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise SystemExit(1) from exc

    typer.echo(
        f"Wrote {len(result.identifiers)} licenses "
        f"(license list {result.version}) to {result.path}"
    )
    typer.echo(f"sha256: {result.sha256}")


def run() -> None:
    app()


__all__ = ["app", "run", "snapshot"]


if __name__ == "__main__":
    run()
