"""Passcode prompt modal: the host that drives a PasscodeController."""

from __future__ import annotations

import logging

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.screen import ModalScreen
from textual.widgets import Button, Label

from biometrics import BiometricAuthenticator, BiometricResult, NoBiometrics
from controller import PasscodeController
from model import (
    DEFAULT_PASSCODE_LENGTH,
    Cancelled,
    ConfirmationFailed,
    PasscodeEvent,
    PasscodeMode,
    Succeeded,
)
from model.prompts import BIOMETRIC_FAILED_MESSAGE, BIOMETRIC_REASON, CANCEL_LABEL
from settings import DEFAULT_RESET_DELAY
from ui.deferred import DeferredReset
from ui.ids import css
from ui.widgets import Keypad, PasscodeDots
import ui.ids as ids

log = logging.getLogger(__name__)


class PasscodeModal(ModalScreen[str | None]):
    """Modal that collects a passcode.

    Dismisses with the passcode on success (an empty string for a biometric
    unlock) or None when cancelled.
    """

    BINDINGS = [
        *[Binding(str(d), f"digit({d})", show=False) for d in range(10)],
        Binding("backspace", "delete_digit", "Delete", show=False),
        Binding("escape", "cancel", "Cancel"),
        Binding("b", "biometric", "Biometric unlock", show=False),
    ]

    def __init__(
        self,
        mode: PasscodeMode,
        length: int = DEFAULT_PASSCODE_LENGTH,
        cancellable: bool = True,
        authenticator: BiometricAuthenticator | None = None,
        reset_delay: float = DEFAULT_RESET_DELAY,
    ) -> None:
        super().__init__()
        self.controller = PasscodeController(mode, length)
        self.cancellable = cancellable
        self.authenticator = authenticator or NoBiometrics()
        self.biometrics_available = self.authenticator.is_available()
        self.deferred_reset = DeferredReset(self.set_timer, reset_delay)
        self._host_error = ""
        self._closed = False
        self.controller.subscribe(self._on_controller_event)

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.PASSCODE_MODAL):
            with Vertical(id=ids.PASSCODE_HEADER):
                yield Label(self.controller.title_text, id=ids.PASSCODE_TITLE)
                yield Label(self.controller.subtitle_text or "", id=ids.PASSCODE_SUBTITLE)
            yield PasscodeDots(self.controller.required_length)
            yield Label("", id=ids.PASSCODE_ERROR)
            yield Label(BIOMETRIC_REASON, id=ids.PASSCODE_STATUS)
            yield Keypad(self._press_digit, self._press_delete)
            with Horizontal(id=ids.PASSCODE_FOOTER):
                if self.biometrics_available:
                    yield Button(
                        f"Unlock with {self.authenticator.label}",
                        id=ids.BIOMETRIC_BTN,
                        variant="primary",
                    )
                if self.cancellable:
                    yield Button(CANCEL_LABEL, id=ids.CANCEL_BTN, variant="default")

    def on_mount(self) -> None:
        self._set_status(False)
        self._refresh_view()

    def on_unmount(self) -> None:
        self.deferred_reset.cancel()
        self.controller.unsubscribe(self._on_controller_event)

    # =========================================================================
    # Controller wiring
    # =========================================================================

    def _press_digit(self, digit: int) -> None:
        if self._closed:
            return
        self._host_error = ""
        if self.controller.add_digit(digit):
            self.controller.evaluate_completion()

    def _press_delete(self) -> None:
        if self._closed:
            return
        self.controller.delete_digit()

    def _on_controller_event(self, controller: PasscodeController, event: PasscodeEvent | None) -> None:
        if isinstance(event, ConfirmationFailed):
            self.deferred_reset.arm(controller.reset)
        elif isinstance(event, Succeeded):
            self._close(event.code)
            return
        elif isinstance(event, Cancelled):
            self._close(None)
            return
        self._refresh_view()

    def _refresh_view(self) -> None:
        """Render the controller state."""
        controller = self.controller
        error = self._host_error or (controller.error_message if controller.error_active else "")
        try:
            self.query_one(css(ids.PASSCODE_TITLE), Label).update(controller.title_text)
            subtitle = self.query_one(css(ids.PASSCODE_SUBTITLE), Label)
            subtitle.update(controller.subtitle_text or "")
            subtitle.display = controller.subtitle_text is not None
            self.query_one(css(ids.PASSCODE_DOTS), PasscodeDots).set_progress(
                controller.entered_count, error=bool(error)
            )
            error_label = self.query_one(css(ids.PASSCODE_ERROR), Label)
            error_label.update(error)
            error_label.display = bool(error)
        except NoMatches:
            log.debug("Passcode widgets not mounted yet")

    # =========================================================================
    # Actions
    # =========================================================================

    def action_digit(self, digit: int) -> None:
        self._press_digit(digit)

    def action_delete_digit(self) -> None:
        self._press_delete()

    def action_cancel(self) -> None:
        if self.cancellable and not self._closed:
            self.controller.cancel()

    def action_biometric(self) -> None:
        if self.biometrics_available and not self._closed:
            self.run_worker(self._authenticate(), group="biometric", exclusive=True)

    @on(Button.Pressed, css(ids.CANCEL_BTN))
    def on_cancel_pressed(self, event: Button.Pressed) -> None:
        self.action_cancel()

    @on(Button.Pressed, css(ids.BIOMETRIC_BTN))
    def on_biometric_pressed(self, event: Button.Pressed) -> None:
        self.action_biometric()

    async def _authenticate(self) -> None:
        self._set_status(True)
        try:
            result = await self.authenticator.authenticate()
        finally:
            self._set_status(False)
        if self._closed:
            return
        if result is BiometricResult.SUCCESS:
            log.info("Passcode prompt unlocked biometrically")
            # Biometric unlock bypasses digit entry
            self._close("")
        elif result is BiometricResult.FAILURE:
            self._host_error = BIOMETRIC_FAILED_MESSAGE
            self._refresh_view()

    def _close(self, result: str | None) -> None:
        self._closed = True
        self.deferred_reset.cancel()
        self.dismiss(result)

    def _set_status(self, authenticating: bool) -> None:
        """Show the biometric reason while verification runs."""
        try:
            self.query_one(css(ids.PASSCODE_STATUS), Label).display = authenticating
        except NoMatches:
            log.debug("Passcode status not mounted")
