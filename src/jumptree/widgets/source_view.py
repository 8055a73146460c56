"""Source view widget showing a file around a definition."""

from collections import OrderedDict
from pathlib import Path

from rich.syntax import Syntax
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Static

# Lines kept visible above the highlighted line
CONTEXT_LINES = 5


class FileCache:
    """LRU cache for file contents with mtime-based invalidation."""

    def __init__(self, max_size: int = 10) -> None:
        self._cache: OrderedDict[str, tuple[float, str]] = OrderedDict()
        self._max_size = max_size

    def get(self, path: Path) -> str | None:
        """Get cached content if valid, or None if not cached/stale."""
        key = str(path)
        if key not in self._cache:
            return None

        cached_mtime, content = self._cache[key]

        try:
            if path.stat().st_mtime != cached_mtime:
                del self._cache[key]
                return None
        except OSError:
            del self._cache[key]
            return None

        self._cache.move_to_end(key)
        return content

    def put(self, path: Path, mtime: float, content: str) -> None:
        """Cache file content."""
        key = str(path)

        if len(self._cache) >= self._max_size and key not in self._cache:
            self._cache.popitem(last=False)

        self._cache[key] = (mtime, content)
        self._cache.move_to_end(key)

    def invalidate(self, path: Path) -> None:
        """Invalidate cache entry for a specific file."""
        self._cache.pop(str(path), None)


_file_cache = FileCache(max_size=10)


def invalidate_file_cache(path: Path) -> None:
    """Invalidate cache for a file (call when file changes)."""
    _file_cache.invalidate(path)


def load_source(file_path: Path) -> tuple[str | None, str | None]:
    """Load file content for display.

    Returns:
        Tuple of (content, error_message); exactly one of them is None.
    """
    content = _file_cache.get(file_path)
    if content is not None:
        return (content, None)

    try:
        mtime = file_path.stat().st_mtime
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return (None, f"Error reading file: {e}")
    _file_cache.put(file_path, mtime, content)
    return (content, None)


class SourceView(Vertical):
    """Widget displaying a source file with one line highlighted."""

    DEFAULT_CSS = """
    SourceView {
        width: 1fr;
        height: 1fr;
    }

    SourceView > #source-header {
        background: $primary-background;
        color: $success;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    SourceView > VerticalScroll {
        height: 1fr;
    }

    SourceView #source-content {
        width: auto;
        padding: 0 1;
    }
    """

    def __init__(self, theme: str = "monokai", **kwargs) -> None:
        super().__init__(**kwargs)
        self.theme = theme
        self._current_file: Path | None = None
        self._current_line: int = 1

    def compose(self) -> ComposeResult:
        yield Static("SOURCE", id="source-header")
        with VerticalScroll(id="source-scroll"):
            yield Static(id="source-content")

    @property
    def scroll_view(self) -> VerticalScroll:
        return self.query_one("#source-scroll", VerticalScroll)

    def show_location(self, file_path: Path | None, line: int = 1) -> None:
        """Display ``file_path`` scrolled to and highlighting ``line``."""
        self._current_file = file_path
        self._current_line = line

        header = self.query_one("#source-header", Static)
        body = self.query_one("#source-content", Static)

        if file_path is None:
            header.update("SOURCE")
            body.update("")
            return

        header.update(f"SOURCE - {file_path.name}:{line}")

        content, error = load_source(file_path)
        if error:
            body.update(error)
            return

        syntax = Syntax(
            content,
            Syntax.guess_lexer(str(file_path), content),
            theme=self.theme,
            line_numbers=True,
            highlight_lines={line},
        )
        body.update(syntax)

        target = max(0, line - 1 - CONTEXT_LINES)
        self.call_after_refresh(self.scroll_view.scroll_to, y=target, animate=False)

    def get_current_file(self) -> Path | None:
        """Get the currently displayed file path."""
        return self._current_file

    def get_current_line(self) -> int:
        """Get the currently highlighted line."""
        return self._current_line
