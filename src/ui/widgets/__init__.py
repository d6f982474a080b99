"""Custom Textual widgets for pinpad."""

from ui.widgets.dots import PasscodeDots
from ui.widgets.keypad import Keypad

__all__ = [
    "Keypad",
    "PasscodeDots",
]
