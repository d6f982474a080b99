"""Model classes for pinpad."""

from model.passcode_session import (
    DEFAULT_PASSCODE_LENGTH,
    PasscodeMode,
    PasscodePhase,
    PasscodeSession,
)
from model.events import Cancelled, ConfirmationFailed, PasscodeEvent, Succeeded
from model import prompts

__all__ = [
    "DEFAULT_PASSCODE_LENGTH",
    "PasscodeMode",
    "PasscodePhase",
    "PasscodeSession",
    "Cancelled",
    "ConfirmationFailed",
    "PasscodeEvent",
    "Succeeded",
    "prompts",
]
