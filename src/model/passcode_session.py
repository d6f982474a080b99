"""Passcode session state: the single source of truth for one prompt."""

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_PASSCODE_LENGTH = 4


class PasscodeMode(Enum):
    """What the prompt is collecting the passcode for."""

    CREATE = "create"  # New passcode, then confirmation
    VERIFY = "verify"  # Single entry, no confirmation
    CHANGE = "change"  # Same flow as CREATE, replacing an existing passcode

    @property
    def needs_confirmation(self) -> bool:
        return self is not PasscodeMode.VERIFY


class PasscodePhase(Enum):
    """Which entry the user is currently typing."""

    ENTRY = "entry"
    CONFIRM = "confirm"


@dataclass
class PasscodeSession:
    """State owned by a PasscodeController.

    ``mode`` and ``required_length`` are fixed for the lifetime of the session.
    Digits are kept as a string of decimal characters.
    """

    mode: PasscodeMode
    required_length: int = DEFAULT_PASSCODE_LENGTH
    entered_digits: str = ""
    confirmation_digits: str | None = None
    phase: PasscodePhase = PasscodePhase.ENTRY
    error_active: bool = False
    error_message: str = ""
    finished: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        if self.required_length < 1:
            raise ValueError(f"Passcode length must be at least 1, got {self.required_length}")

    @property
    def entered_count(self) -> int:
        return len(self.entered_digits)

    @property
    def is_complete(self) -> bool:
        return len(self.entered_digits) == self.required_length

    def clear_error(self) -> None:
        self.error_active = False
        self.error_message = ""

    def reset(self) -> None:
        """Return to the initial state (Entry phase, no digits, no error)."""
        self.entered_digits = ""
        self.confirmation_digits = None
        self.phase = PasscodePhase.ENTRY
        self.clear_error()
