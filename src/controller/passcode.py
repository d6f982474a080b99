"""Passcode entry state machine.

The controller owns a PasscodeSession and is driven by the host:

    add_digit / delete_digit  -> user key presses
    evaluate_completion       -> called once the entry reaches required_length
    reset / cancel            -> auto-reset after a mismatch, user abort

Observers registered with subscribe() are called as ``callback(controller, event)``
after every state change (``event`` is None) and for every emitted event.
Once a terminal event (Succeeded or Cancelled) has been emitted the session is
finished and all further operations are no-ops.
"""

from __future__ import annotations

import logging
from typing import Callable

from model import (
    DEFAULT_PASSCODE_LENGTH,
    Cancelled,
    ConfirmationFailed,
    PasscodeEvent,
    PasscodeMode,
    PasscodePhase,
    PasscodeSession,
    Succeeded,
)
from model.prompts import MISMATCH_MESSAGE, subtitle_for, title_for

log = logging.getLogger(__name__)

Observer = Callable[["PasscodeController", "PasscodeEvent | None"], None]


class PasscodeController:
    """Drives one passcode session from construction to Succeeded/Cancelled."""

    def __init__(
        self,
        mode: PasscodeMode,
        required_length: int = DEFAULT_PASSCODE_LENGTH,
        auto_evaluate: bool = False,
    ) -> None:
        self.session = PasscodeSession(mode=mode, required_length=required_length)
        self.auto_evaluate = auto_evaluate
        self._observers: list[Observer] = []
        log.debug(f"Passcode session started: mode={mode.value} length={required_length}")

    # =========================================================================
    # Observable state
    # =========================================================================

    @property
    def mode(self) -> PasscodeMode:
        return self.session.mode

    @property
    def phase(self) -> PasscodePhase:
        return self.session.phase

    @property
    def required_length(self) -> int:
        return self.session.required_length

    @property
    def entered_digits(self) -> str:
        return self.session.entered_digits

    @property
    def entered_count(self) -> int:
        return self.session.entered_count

    @property
    def confirmation_digits(self) -> str | None:
        return self.session.confirmation_digits

    @property
    def error_active(self) -> bool:
        return self.session.error_active

    @property
    def error_message(self) -> str:
        return self.session.error_message

    @property
    def is_complete(self) -> bool:
        return self.session.is_complete

    @property
    def is_finished(self) -> bool:
        return self.session.finished

    @property
    def title_text(self) -> str:
        return title_for(self.session.mode, self.session.phase)

    @property
    def subtitle_text(self) -> str | None:
        return subtitle_for(self.session.mode, self.session.phase, self.session.required_length)

    # =========================================================================
    # Observers
    # =========================================================================

    def subscribe(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self, event: PasscodeEvent | None = None) -> None:
        for observer in list(self._observers):
            observer(self, event)

    # =========================================================================
    # Operations
    # =========================================================================

    def add_digit(self, digit: int) -> bool:
        """Append a digit if there is room and dismiss any shown error.

        The error is cleared even when the entry is already full.

        Returns:
            True if the entry is now complete and evaluate_completion() is due.
        """
        session = self.session
        if session.finished:
            return False
        if len(session.entered_digits) < session.required_length:
            session.entered_digits += str(digit)
        session.clear_error()
        self._notify()

        if session.is_complete and self.auto_evaluate:
            self.evaluate_completion()
            return False
        return session.is_complete

    def delete_digit(self) -> None:
        """Remove the last entered digit, if any."""
        session = self.session
        if session.finished or not session.entered_digits:
            return
        session.entered_digits = session.entered_digits[:-1]
        self._notify()

    def evaluate_completion(self) -> PasscodeEvent | None:
        """Act on a completed entry according to (mode, phase).

        Returns:
            The emitted event, or None if the session only advanced to the
            confirmation phase (or the entry was not complete).
        """
        session = self.session
        if session.finished or not session.is_complete:
            return None

        if not session.mode.needs_confirmation:
            return self._succeed(session.entered_digits)

        if session.phase is PasscodePhase.ENTRY:
            session.confirmation_digits = session.entered_digits
            session.entered_digits = ""
            session.phase = PasscodePhase.CONFIRM
            log.debug(f"Passcode session moved to confirmation: mode={session.mode.value}")
            self._notify()
            return None

        if session.entered_digits == session.confirmation_digits:
            return self._succeed(session.entered_digits)

        session.error_active = True
        session.error_message = MISMATCH_MESSAGE
        log.info(f"Passcode confirmation mismatch: mode={session.mode.value}")
        event = ConfirmationFailed(MISMATCH_MESSAGE)
        self._notify()
        self._notify(event)
        return event

    def reset(self) -> None:
        """Return the session to its initial state. Idempotent.

        A finished session stays finished; only its digits and error are cleared.
        """
        self.session.reset()
        self._notify()

    def cancel(self) -> Cancelled | None:
        """Abort the session. Emits Cancelled once; later calls do nothing."""
        if self.session.finished:
            return None
        self.session.finished = True
        log.info(f"Passcode session cancelled: mode={self.session.mode.value}")
        event = Cancelled()
        self._notify(event)
        return event

    def _succeed(self, code: str) -> Succeeded:
        self.session.finished = True
        log.info(f"Passcode session succeeded: mode={self.session.mode.value}")
        event = Succeeded(code)
        self._notify(event)
        return event
