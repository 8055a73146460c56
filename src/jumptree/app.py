"""Main Textual application for jumptree."""

import logging
import subprocess
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer
from textual.worker import Worker

from .actions import NavigationActionsMixin
from .config import Config
from .navigation import Location, LocationStack
from .recorder import EventRecorder, NavigationHooks, connect
from .renderer import TreeRenderer
from .store import TreeStore
from .symbols import SymbolIndex
from .watcher import FileWatcher
from .widgets import HistoryPanel, SourceView, SymbolList, invalidate_file_cache
from .workspace import resolve_workspace

logger = logging.getLogger(__name__)


class JumpTreeApp(NavigationActionsMixin, App):
    """jumptree - definition browser with a navigation history tree."""

    TITLE = "jumptree"
    SUB_TITLE = "Navigation History Tree"

    CSS = """
    #main-container {
        width: 100%;
        height: 1fr;
    }

    #symbol-list {
        width: 35%;
        height: 100%;
        border: solid $warning;
    }

    #symbol-list:focus-within {
        border: solid yellow;
    }

    #source-view {
        width: 65%;
        height: 100%;
        border: solid $success;
    }

    #source-view:focus-within {
        border: solid green;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("h", "show_history", "History"),
        Binding("s", "search", "Search"),
        Binding("f", "file_symbols", "File"),
        Binding("a", "all_symbols", "All"),
        Binding("e", "edit", "Edit"),
        Binding("u", "update", "Update"),
        Binding("tab", "focus_next", "Next Panel", show=False),
        Binding("shift+tab", "focus_previous", "Prev Panel", show=False),
        Binding("?", "help", "Help"),
        Binding("escape", "go_back", "Back"),
    ]

    FOCUS_ORDER = [
        "symbol-list-view",
        "source-view",
    ]

    def __init__(self, config: Config, directory: Path) -> None:
        super().__init__()
        self.config = config
        self.directory = directory.expanduser().resolve()
        self.index = SymbolIndex(config.index.extensions)

        # History tracking lives as long as the app
        self.store = TreeStore()
        self.recorder = EventRecorder(
            self.store,
            TreeRenderer(config.tree.empty_width, config.tree.marker),
        )
        self.hooks = NavigationHooks()
        connect(self.hooks, self.recorder, self.current_workspace_id)

        self._locations = LocationStack()
        self._current_location: Location | None = None
        self._watcher: FileWatcher | None = None

    def resolve_workspace(self, path: Path) -> str:
        """Resolve a path to its workspace id using the configured markers."""
        return resolve_workspace(path, self.config.workspace.markers)

    def compose(self) -> ComposeResult:
        with Horizontal(id="main-container"):
            yield SymbolList(self.index, root=self.directory, id="symbol-list")
            yield SourceView(id="source-view")
        yield HistoryPanel(id="history-panel")
        yield Footer()

    async def on_mount(self) -> None:
        """Start the initial scan and the file watcher."""
        self.query_one("#symbol-list", SymbolList).list_view.focus()

        self._watcher = FileWatcher(self.directory, self.index, self._on_file_change)
        self._watcher.start()

        self.notify("Scanning files...")
        self.run_worker(self._background_scan, exclusive=True, thread=True)

    async def on_unmount(self) -> None:
        """Stop the watcher and drop the session's history."""
        if self._watcher:
            self._watcher.stop()
        self.store.clear()

    def _background_scan(self) -> int:
        """Run directory scan in background thread."""
        return self.index.scan_directory(self.directory)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Handle background scan completion."""
        if event.worker.name != "_background_scan":
            return

        if event.state.name == "ERROR":
            self.notify(f"Scan failed: {event.worker.error}", severity="error")
            return

        if event.state.name == "SUCCESS":
            self.notify(f"Indexed {event.worker.result} definitions")
            self._refresh_symbols()

    def _refresh_symbols(self) -> None:
        """Reload the symbol list unless the user is searching."""
        symbol_list = self.query_one("#symbol-list", SymbolList)
        if not symbol_list.is_search_mode():
            symbol_list.update_symbols(self.index.all_symbols())

    def _on_file_change(self) -> None:
        """Handle file system changes (called from watcher thread)."""
        self.call_from_thread(self._handle_file_change)

    def _handle_file_change(self) -> None:
        """Handle file changes on the main thread."""
        self._refresh_symbols()
        location = self._current_location
        if location is not None:
            invalidate_file_cache(location.path)
            self.query_one("#source-view", SourceView).show_location(location.path, location.line)

    async def action_edit(self) -> None:
        """Open the shown file in the configured editor at the shown line."""
        location = self._current_location
        if location is None:
            self.notify("No file shown", severity="warning")
            return

        editor = self.config.editor
        with self.suspend():
            try:
                subprocess.run([editor, f"+{location.line}", str(location.path)], check=False)
            except FileNotFoundError:
                self.notify(f"Editor '{editor}' not found", severity="error")
            except OSError as e:
                self.notify(f"Error opening editor: {e}", severity="error")

    def action_update(self) -> None:
        """Manually rescan the directory."""
        self.notify("Updating...")
        self.run_worker(self._background_scan, exclusive=True, thread=True)


def run_app(config: Config, directory: Path) -> None:
    """Run the jumptree application."""
    app = JumpTreeApp(config, directory)
    app.run()
