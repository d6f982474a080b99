"""Events emitted by the passcode controller."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Succeeded:
    """Terminal: the session produced a passcode."""

    code: str

    def __repr__(self) -> str:
        # Keep the code out of logs and tracebacks
        return f"Succeeded(code=<{len(self.code)} digits>)"


@dataclass(frozen=True)
class Cancelled:
    """Terminal: the user aborted the prompt."""


@dataclass(frozen=True)
class ConfirmationFailed:
    """Confirmation entry did not match the first entry.

    Not terminal. The host shows ``message`` and later calls ``reset()``.
    """

    message: str


PasscodeEvent = Succeeded | Cancelled | ConfirmationFailed
