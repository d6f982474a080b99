"""Validation functions for user-supplied prompt settings."""

MAX_PASSCODE_LENGTH = 12


def validate_passcode_length(value: str) -> int | None:
    """Validate passcode length is numeric and in range (1-12).

    Args:
        value: String value from the command line or environment

    Returns:
        Validated integer or None if invalid
    """
    stripped = value.strip()
    if not stripped.isdigit():
        return None
    num = int(stripped)
    return num if 1 <= num <= MAX_PASSCODE_LENGTH else None


def validate_reset_delay(value: str) -> float | None:
    """Validate the mismatch auto-reset delay in seconds.

    Valid: non-negative numbers such as "0", "0.6", "2".

    Returns:
        Delay as float or None if invalid
    """
    try:
        delay = float(value.strip())
    except ValueError:
        return None
    # Rejects nan and inf as well as negatives
    return delay if 0 <= delay < float("inf") else None


def parse_bool(value: str) -> bool | None:
    """Parse an on/off style flag from the environment.

    Returns:
        True/False, or None if the value is not recognised
    """
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    return None
