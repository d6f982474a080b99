"""Prompt text shown for each (mode, phase) pair."""

from model.passcode_session import PasscodeMode, PasscodePhase

MISMATCH_MESSAGE = "Passcodes do not match"
BIOMETRIC_FAILED_MESSAGE = "Biometric authentication failed"
BIOMETRIC_REASON = "Authentication is required to unlock"
CANCEL_LABEL = "Cancel"

TITLES: dict[tuple[PasscodeMode, PasscodePhase], str] = {
    (PasscodeMode.CREATE, PasscodePhase.ENTRY): "Create passcode",
    (PasscodeMode.CREATE, PasscodePhase.CONFIRM): "Confirm passcode",
    (PasscodeMode.VERIFY, PasscodePhase.ENTRY): "Enter passcode",
    (PasscodeMode.CHANGE, PasscodePhase.ENTRY): "Create new passcode",
    (PasscodeMode.CHANGE, PasscodePhase.CONFIRM): "Confirm new passcode",
}

# {length} is substituted with the required passcode length
SUBTITLES: dict[tuple[PasscodeMode, PasscodePhase], str] = {
    (PasscodeMode.CREATE, PasscodePhase.ENTRY): "Enter a {length}-digit passcode",
    (PasscodeMode.CREATE, PasscodePhase.CONFIRM): "Please re-enter the passcode",
    (PasscodeMode.CHANGE, PasscodePhase.ENTRY): "Enter new passcode",
    (PasscodeMode.CHANGE, PasscodePhase.CONFIRM): "Please re-enter the new passcode",
}


def title_for(mode: PasscodeMode, phase: PasscodePhase) -> str:
    return TITLES[(mode, phase)]


def subtitle_for(mode: PasscodeMode, phase: PasscodePhase, length: int) -> str | None:
    """Subtitle for the prompt, or None when the mode shows no subtitle (VERIFY)."""
    template = SUBTITLES.get((mode, phase))
    if template is None:
        return None
    return template.format(length=length)
