from __future__ import annotations

import time
from typing import Callable

from license_harvester.local_constants import DEFAULT_THROTTLE_SECONDS


class Throttle:
    """Fixed pause before each detail-page request.

    Pacing is best effort: a sleep that fails or is interrupted lets the
    caller proceed immediately.
    """

    def __init__(
        self,
        seconds: float = DEFAULT_THROTTLE_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.seconds = max(0.0, float(seconds))
        self._sleep = sleep

    def wait(self) -> None:
        if self.seconds <= 0:
            return
        try:
            self._sleep(self.seconds)
        except (OSError, ValueError, OverflowError):
            pass


__all__ = ["Throttle"]
