"""Number keypad widget: Keypad."""

from typing import Callable

from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Grid
from textual.widgets import Button, Static

import ui.ids as ids


class Keypad(Container):
    """A 3x4 keypad: 1-9, then a blank cell, 0 and delete.

    Key presses are forwarded to the callbacks; the keypad keeps no state.
    """

    LAYOUT = [1, 2, 3, 4, 5, 6, 7, 8, 9, None, 0, "delete"]
    DELETE_LABEL = "⌫"

    def __init__(self, on_digit: Callable[[int], None], on_delete: Callable[[], None]) -> None:
        super().__init__(id=ids.KEYPAD)
        self._on_digit = on_digit
        self._on_delete = on_delete

    def compose(self) -> ComposeResult:
        with Grid(classes="keypad-grid"):
            for key in self.LAYOUT:
                if key is None:
                    yield Static("", classes="keypad-blank")
                elif key == "delete":
                    yield Button(self.DELETE_LABEL, id=ids.DELETE_KEY, classes="keypad-delete")
                else:
                    yield Button(str(key), id=ids.digit_key(key), name=str(key), classes="keypad-digit")

    @on(Button.Pressed, ".keypad-digit")
    def on_digit_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._on_digit(int(event.button.name))

    @on(Button.Pressed, ".keypad-delete")
    def on_delete_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._on_delete()
