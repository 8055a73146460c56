"""Navigation action handlers for JumpTreeApp."""

from __future__ import annotations

import logging
from pathlib import Path

from ..navigation import Location
from ..renderer import to_rich_text
from ..symbols import Definition
from ..widgets import HistoryPanel, SourceView, SymbolList
from ..workspace import WorkspaceUnresolved

logger = logging.getLogger(__name__)


class NavigationActionsMixin:
    """Mixin providing navigation actions (jump, back, history, search, focus)."""

    def _get_focus_widget(self, widget_id: str):
        """Get a focusable widget by ID."""
        if widget_id == "symbol-list-view":
            return self.query_one("#symbol-list", SymbolList).list_view
        elif widget_id == "source-view":
            return self.query_one("#source-view", SourceView).scroll_view
        return None

    def _get_current_focus_index(self) -> int:
        """Get the index of the currently focused widget in FOCUS_ORDER."""
        focused = self.focused
        if focused is None:
            return -1

        symbol_list = self.query_one("#symbol-list", SymbolList)
        source_view = self.query_one("#source-view", SourceView)
        focus_map = {
            id(symbol_list.list_view): 0,
            id(symbol_list.search_input): 0,
            id(source_view.scroll_view): 1,
        }
        return focus_map.get(id(focused), -1)

    def action_focus_next(self) -> None:
        """Focus the next panel."""
        current = self._get_current_focus_index()
        next_index = (current + 1) % len(self.FOCUS_ORDER)
        widget = self._get_focus_widget(self.FOCUS_ORDER[next_index])
        if widget:
            widget.focus()

    def action_focus_previous(self) -> None:
        """Focus the previous panel."""
        current = self._get_current_focus_index()
        prev_index = (current - 1) % len(self.FOCUS_ORDER)
        widget = self._get_focus_widget(self.FOCUS_ORDER[prev_index])
        if widget:
            widget.focus()

    def current_workspace_id(self) -> str:
        """Identify the workspace of the file being shown.

        Before the first jump the launch directory stands in for the file.

        Raises:
            WorkspaceUnresolved: If the path is not inside any workspace
        """
        location = self._current_location
        path = location.path if location is not None else self.directory
        return self.resolve_workspace(path)

    def _show_location(self, location: Location | None) -> None:
        self._current_location = location
        source_view = self.query_one("#source-view", SourceView)
        if location is None:
            source_view.show_location(None)
        else:
            source_view.show_location(location.path, location.line)

    def jump_to(self, definition: Definition) -> None:
        """Jump to a definition, recording it in the history tree."""
        try:
            self.hooks.fire_forward(definition.name)
        except WorkspaceUnresolved as e:
            logger.warning("Jump to %s not recorded: %s", definition.name, e)
            self.notify(f"Not in a workspace, history not recorded: {e.path}", severity="warning")

        if self._current_location is not None:
            self._locations.push(self._current_location)
        self._show_location(Location(definition.path, definition.line, definition.name))

    def on_symbol_list_symbol_selected(self, event: SymbolList.SymbolSelected) -> None:
        """Handle a symbol chosen in the list."""
        self.jump_to(event.definition)

    def action_go_back(self) -> None:
        """Jump back to where the last jump started.

        Closes the history panel or exits search mode first if either is open.
        """
        panel = self.query_one("#history-panel", HistoryPanel)
        if panel.is_showing:
            panel.hide_history()
            return

        symbol_list = self.query_one("#symbol-list", SymbolList)
        if symbol_list.is_search_mode():
            symbol_list.exit_search_mode()
            return

        if self._locations.is_empty():
            self.notify("No earlier location", severity="warning")
            return

        try:
            self.hooks.fire_backward()
        except WorkspaceUnresolved as e:
            logger.warning("Jump back not recorded: %s", e)
            self.notify(f"Not in a workspace, history not recorded: {e.path}", severity="warning")

        self._show_location(self._locations.pop())

    def action_show_history(self) -> None:
        """Show the navigation history of the current workspace."""
        try:
            workspace_id = self.current_workspace_id()
        except WorkspaceUnresolved as e:
            self.notify(f"Not in a workspace: {e.path}", severity="warning")
            return

        rendering = self.recorder.render_history(workspace_id)
        diagram = to_rich_text(rendering, self.config.tree.highlight_style)
        panel = self.query_one("#history-panel", HistoryPanel)
        panel.show_history(diagram, Path(workspace_id).name, self.config.tree.display_seconds)

    def action_file_symbols(self) -> None:
        """List only the definitions in the file being shown."""
        location = self._current_location
        if location is None:
            self.notify("No file shown", severity="warning")
            return
        symbol_list = self.query_one("#symbol-list", SymbolList)
        symbol_list.update_symbols(self.index.definitions_in(location.path), title=location.path.name)
        symbol_list.list_view.focus()

    def action_all_symbols(self) -> None:
        """List every definition in the index."""
        symbol_list = self.query_one("#symbol-list", SymbolList)
        symbol_list.update_symbols(self.index.all_symbols())
        symbol_list.list_view.focus()

    def action_search(self) -> None:
        """Enter search mode."""
        symbol_list = self.query_one("#symbol-list", SymbolList)
        if not symbol_list.is_search_mode():
            symbol_list.enter_search_mode()

    def on_symbol_list_search_mode_exited(self, event: SymbolList.SearchModeExited) -> None:
        """Restore the full listing after search."""
        self.action_all_symbols()

    def action_help(self) -> None:
        """Show help information."""
        self.notify(
            "Enter=Jump, Esc=Back, h=History, s=Search, f=File symbols, a=All symbols, e=Edit, u=Update, q=Quit",
            timeout=5,
        )
