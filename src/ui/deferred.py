"""Cancellable single-slot timer for deferred actions.

Used by the passcode prompt to reset the session a short while after a
confirmation mismatch. At most one action is pending at a time: arming again
replaces the pending action.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

log = logging.getLogger(__name__)


class TimerHandle(Protocol):
    """Anything with stop(), such as textual.timer.Timer."""

    def stop(self) -> Any: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]


class DeferredReset:
    """Runs one callback after ``delay`` seconds unless cancelled first.

    Args:
        schedule: Function that schedules a callback, e.g. ``widget.set_timer``
        delay: Seconds to wait before running the callback
    """

    def __init__(self, schedule: Scheduler, delay: float) -> None:
        self._schedule = schedule
        self.delay = delay
        self._handle: TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def arm(self, callback: Callable[[], None]) -> None:
        """Schedule callback, replacing any pending one."""
        self.cancel()

        def fire() -> None:
            self._handle = None
            callback()

        self._handle = self._schedule(self.delay, fire)
        log.debug(f"Deferred reset armed ({self.delay}s)")

    def cancel(self) -> None:
        """Stop the pending callback, if any."""
        if self._handle is not None:
            self._handle.stop()
            self._handle = None
            log.debug("Deferred reset cancelled")
