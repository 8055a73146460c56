"""Transient panel showing the rendered navigation history."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import ScrollableContainer, Vertical
from textual.timer import Timer
from textual.widgets import Static


class HistoryPanel(Vertical):
    """Read-only panel that hides itself after a fixed delay."""

    DEFAULT_CSS = """
    HistoryPanel {
        dock: bottom;
        width: 100%;
        height: auto;
        max-height: 60%;
        display: none;
        background: $surface;
        border: round $accent;
    }

    HistoryPanel > #history-header {
        color: $accent;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    HistoryPanel > ScrollableContainer {
        height: auto;
        max-height: 100%;
    }

    HistoryPanel #history-body {
        width: auto;
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._hide_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        yield Static("HISTORY", id="history-header")
        with ScrollableContainer(id="history-scroll"):
            yield Static(id="history-body")

    def show_history(self, diagram: Text, title: str, seconds: float) -> None:
        """Show ``diagram`` for ``seconds``, restarting any running countdown."""
        if self._hide_timer is not None:
            self._hide_timer.stop()
            self._hide_timer = None

        self.query_one("#history-header", Static).update(f"HISTORY - {title}")
        self.query_one("#history-body", Static).update(diagram)
        self.display = True
        self._hide_timer = self.set_timer(seconds, self.hide_history)

    def hide_history(self) -> None:
        """Hide the panel."""
        if self._hide_timer is not None:
            self._hide_timer.stop()
            self._hide_timer = None
        self.display = False

    @property
    def is_showing(self) -> bool:
        """Check if the panel is currently visible."""
        return self.display
