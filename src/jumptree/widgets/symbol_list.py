"""Symbol list widget for choosing a definition to jump to."""

from pathlib import Path

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.events import Key
from textual.message import Message
from textual.widgets import Input, Label, ListItem, ListView, Static

from ..symbols import Definition, SymbolIndex

# Maximum symbols to display before showing "Show more" item
MAX_DISPLAY_SYMBOLS = 500


class SymbolItem(ListItem):
    """A list item representing one definition."""

    def __init__(self, definition: Definition, root: Path | None = None) -> None:
        super().__init__()
        self.definition = definition
        self.root = root

    def compose(self) -> ComposeResult:
        path = self.definition.path
        if self.root is not None and path.is_relative_to(self.root):
            path = path.relative_to(self.root)
        yield Label(
            Text.assemble(self.definition.name, "  ", (f"{path}:{self.definition.line}", "dim"))
        )


class ShowMoreSymbolsItem(ListItem):
    """A list item that triggers loading the full symbol collection."""

    DEFAULT_CSS = """
    ShowMoreSymbolsItem {
        color: $text-muted;
        text-style: italic;
    }
    """

    def __init__(self, total_count: int, displayed_count: int) -> None:
        super().__init__()
        self.total_count = total_count
        self.remaining = total_count - displayed_count

    def compose(self) -> ComposeResult:
        yield Label(f"... show {self.remaining} more ({self.total_count} total)")


class SymbolList(Vertical):
    """Widget listing definitions, with an incremental search mode."""

    DEFAULT_CSS = """
    SymbolList {
        width: 1fr;
        height: 1fr;
    }

    SymbolList > #symbol-header {
        background: $primary-background;
        color: $accent;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    SymbolList > #search-input {
        height: 1;
        border: none;
        padding: 0 1;
        display: none;
    }

    SymbolList > #search-input.visible {
        display: block;
    }

    SymbolList > #symbol-list-view {
        height: 1fr;
    }

    SymbolList ListItem {
        padding: 0 1;
    }

    SymbolList ListItem:hover {
        background: $boost;
    }

    SymbolList ListItem.--highlight {
        background: $accent;
    }
    """

    class SymbolSelected(Message):
        """Message emitted when a definition is chosen as a jump target."""

        def __init__(self, definition: Definition) -> None:
            super().__init__()
            self.definition = definition

    class SearchModeExited(Message):
        """Message emitted when search mode is exited."""

        pass

    def __init__(self, index: SymbolIndex, root: Path | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.index = index
        self.root = root
        self._definitions: list[Definition] = []
        self._all_definitions: list[Definition] = []
        self._search_mode: bool = False

    def compose(self) -> ComposeResult:
        yield Static("SYMBOLS", id="symbol-header")
        yield Input(placeholder="Search symbols...", id="search-input")
        yield ListView(id="symbol-list-view")

    @property
    def list_view(self) -> ListView:
        return self.query_one("#symbol-list-view", ListView)

    @property
    def search_input(self) -> Input:
        return self.query_one("#search-input", Input)

    def _fill(self, definitions: list[Definition], show_all: bool = False) -> None:
        self._all_definitions = definitions
        if len(definitions) > MAX_DISPLAY_SYMBOLS and not show_all:
            display = definitions[:MAX_DISPLAY_SYMBOLS]
        else:
            display = definitions
        self._definitions = display

        list_view = self.list_view
        list_view.clear()
        for definition in display:
            list_view.append(SymbolItem(definition, self.root))
        if len(definitions) > len(display):
            list_view.append(ShowMoreSymbolsItem(len(definitions), len(display)))
        if display:
            list_view.index = 0

    def update_symbols(self, definitions: list[Definition], title: str | None = None) -> None:
        """Replace the listed definitions.

        Args:
            definitions: Definitions to display
            title: Header suffix, e.g. the file the definitions come from
        """
        self._search_mode = False
        search_input = self.search_input
        search_input.remove_class("visible")
        search_input.value = ""

        header = self.query_one("#symbol-header", Static)
        header.update(f"SYMBOLS ({title})" if title else "SYMBOLS")

        self._fill(definitions)

    def get_selected_definition(self) -> Definition | None:
        """Get the currently highlighted definition."""
        item = self.list_view.highlighted_child
        if isinstance(item, SymbolItem):
            return item.definition
        return None

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Handle Enter or click on an item."""
        if isinstance(event.item, ShowMoreSymbolsItem):
            self._fill(self._all_definitions, show_all=True)
            return
        if isinstance(event.item, SymbolItem):
            self.post_message(self.SymbolSelected(event.item.definition))

    def is_search_mode(self) -> bool:
        """Check if currently in search mode."""
        return self._search_mode

    def enter_search_mode(self) -> None:
        """Enter search mode - show input and focus it."""
        self._search_mode = True
        search_input = self.search_input
        search_input.add_class("visible")
        search_input.value = ""
        search_input.focus()

        self.query_one("#symbol-header", Static).update("SEARCH")
        self._definitions = []
        self.list_view.clear()

    def exit_search_mode(self) -> None:
        """Exit search mode - hide input and notify the app."""
        self._search_mode = False
        search_input = self.search_input
        search_input.remove_class("visible")
        search_input.value = ""

        self._definitions = []
        self.list_view.clear()
        self.query_one("#symbol-header", Static).update("SYMBOLS")

        self.post_message(self.SearchModeExited())

    def on_input_changed(self, event: Input.Changed) -> None:
        """Update results as the search query changes."""
        if not (self._search_mode and event.input.id == "search-input"):
            return
        header = self.query_one("#symbol-header", Static)
        if event.value.strip():
            results = self.index.search(event.value)
            self._fill(results)
            header.update(f"SEARCH ({len(results)} results)")
        else:
            self._definitions = []
            self.list_view.clear()
            header.update("SEARCH")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter in the search input - move focus to results."""
        if self._search_mode and event.input.id == "search-input":
            if self._definitions:
                self.list_view.focus()

    def on_key(self, event: Key) -> None:
        """Escape leaves search mode."""
        if self._search_mode and event.key == "escape":
            self.exit_search_mode()
            event.stop()
