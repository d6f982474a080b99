"""UI module: the passcode prompt modal, its widgets and the reset timer."""

from ui.deferred import DeferredReset
from ui.modals import PasscodeModal
from ui.widgets import Keypad, PasscodeDots
from ui import ids

__all__ = [
    "DeferredReset",
    "Keypad",
    "PasscodeDots",
    "PasscodeModal",
    "ids",
]
