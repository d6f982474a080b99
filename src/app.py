"""Main TUI application for pinpad."""

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.widgets import Static

from biometrics import BiometricAuthenticator
from model import DEFAULT_PASSCODE_LENGTH, PasscodeMode
from settings import DEFAULT_RESET_DELAY
from ui import PasscodeModal

log = logging.getLogger(__name__)

APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


class PasscodeApp(App[str | None]):
    """Shows a single passcode prompt and exits with its result.

    ``return_value`` is the passcode, "" for a biometric unlock, or None when
    the prompt was cancelled.
    """

    TITLE = "pinpad"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    def __init__(
        self,
        mode: PasscodeMode,
        length: int = DEFAULT_PASSCODE_LENGTH,
        cancellable: bool = True,
        authenticator: BiometricAuthenticator | None = None,
        reset_delay: float = DEFAULT_RESET_DELAY,
    ) -> None:
        super().__init__()
        self.mode = mode
        self.length = length
        self.cancellable = cancellable
        self.authenticator = authenticator
        self.reset_delay = reset_delay
        self.completed = False

    def compose(self) -> ComposeResult:
        yield Static("", id="backdrop")

    def on_mount(self) -> None:
        log.info(f"Prompting for passcode: mode={self.mode.value} length={self.length}")
        self.push_screen(
            PasscodeModal(
                self.mode,
                self.length,
                cancellable=self.cancellable,
                authenticator=self.authenticator,
                reset_delay=self.reset_delay,
            ),
            callback=self._on_prompt_closed,
        )

    def _on_prompt_closed(self, result: str | None) -> None:
        self.completed = result is not None
        log.info("Passcode prompt completed" if self.completed else "Passcode prompt cancelled")
        self.exit(result)
