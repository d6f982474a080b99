"""Passcode progress widget: PasscodeDots."""

from textual.widgets import Static

import ui.ids as ids


class PasscodeDots(Static):
    """One dot per passcode position, filled for entered digits."""

    FILLED = "●"
    EMPTY = "○"

    def __init__(self, total: int) -> None:
        super().__init__(self.render_dots(0, total), id=ids.PASSCODE_DOTS)
        self.entered = 0
        self.total = total

    @classmethod
    def render_dots(cls, entered: int, total: int) -> str:
        return " ".join(cls.FILLED if i < entered else cls.EMPTY for i in range(total))

    def set_progress(self, entered: int, error: bool = False) -> None:
        """Update progress and error styling."""
        self.entered = entered
        self.update(self.render_dots(entered, self.total))
        self.set_class(error, "error")
