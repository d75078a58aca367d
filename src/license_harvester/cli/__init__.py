"""CLI entry points for License Harvester."""

import importlib
from typing import Any, cast

_cli_mod = importlib.import_module("license_harvester.cli.app")
app = cast(Any, _cli_mod).app
run = cast(Any, _cli_mod).run
snapshot = cast(Any, _cli_mod).snapshot

__all__ = ["app", "run", "snapshot"]
