"""Controller layer: the passcode state machine and input validation.

This package contains:
- passcode: PasscodeController, the entry/confirmation state machine
- validators: checks for CLI and environment settings
"""

from controller.passcode import Observer, PasscodeController
from controller.validators import (
    MAX_PASSCODE_LENGTH,
    parse_bool,
    validate_passcode_length,
    validate_reset_delay,
)

__all__ = [
    "Observer",
    "PasscodeController",
    "MAX_PASSCODE_LENGTH",
    "parse_bool",
    "validate_passcode_length",
    "validate_reset_delay",
]
