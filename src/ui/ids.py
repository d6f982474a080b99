"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, PASSCODE_DOTS
        self.query_one(css(PASSCODE_DOTS), PasscodeDots)
    """
    return f"#{widget_id}"

# Modal containers
PASSCODE_MODAL = "passcode-modal"
PASSCODE_HEADER = "passcode-header"
PASSCODE_FOOTER = "passcode-footer"

# Prompt text
PASSCODE_TITLE = "passcode-title"
PASSCODE_SUBTITLE = "passcode-subtitle"
PASSCODE_ERROR = "passcode-error"
PASSCODE_STATUS = "passcode-status"

# Entry widgets
PASSCODE_DOTS = "passcode-dots"
KEYPAD = "keypad"
DELETE_KEY = "key-delete"

# Footer buttons
BIOMETRIC_BTN = "biometric-btn"
CANCEL_BTN = "cancel-btn"


def digit_key(digit: int) -> str:
    """ID of the keypad button for a digit."""
    return f"key-{digit}"
