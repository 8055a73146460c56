"""File system watcher that keeps the symbol index current."""

import logging
import threading
import time
from pathlib import Path
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .symbols import SymbolIndex

logger = logging.getLogger(__name__)


class SourceEventHandler(FileSystemEventHandler):
    """Handler for source file changes with debouncing."""

    def __init__(
        self,
        index: SymbolIndex,
        on_change: Callable[[], None],
        debounce_seconds: float = 0.5,
    ):
        super().__init__()
        self.index = index
        self.on_change = on_change
        self.debounce_seconds = debounce_seconds
        self._pending_paths: dict[str, float] = {}
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None

    def _is_supported_file(self, path: str) -> bool:
        return self.index.is_source_file(Path(path))

    def _schedule_update(self, path: str) -> None:
        """Schedule a debounced rescan for the given path."""
        logger.debug("File change detected: %s", path)
        with self._lock:
            self._pending_paths[path] = time.time()

            if self._timer:
                self._timer.cancel()

            self._timer = threading.Timer(
                self.debounce_seconds,
                self._process_pending,
            )
            self._timer.daemon = True
            self._timer.start()

    def _process_pending(self) -> None:
        """Rescan all pending files."""
        with self._lock:
            paths = list(self._pending_paths.keys())
            self._pending_paths.clear()
            self._timer = None

        if not paths:
            return

        logger.info("Processing %d file change(s)", len(paths))
        for path_str in paths:
            self.index.rescan_file(Path(path_str))

        self.on_change()

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._is_supported_file(event.src_path):
            self._schedule_update(event.src_path)

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._is_supported_file(event.src_path):
            self._schedule_update(event.src_path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._is_supported_file(event.src_path):
            self._schedule_update(event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            # Old location drops out of the index, new one is scanned
            if self._is_supported_file(event.src_path):
                self._schedule_update(event.src_path)
            if hasattr(event, "dest_path") and self._is_supported_file(event.dest_path):
                self._schedule_update(event.dest_path)


class FileWatcher:
    """Watches a directory tree for source file changes."""

    def __init__(
        self,
        directory: Path,
        index: SymbolIndex,
        on_change: Callable[[], None],
    ):
        self.directory = directory
        self.index = index
        self.on_change = on_change
        self._observer: Observer | None = None
        self._handler: SourceEventHandler | None = None

    def start(self) -> None:
        """Start watching the directory."""
        if self._observer is not None:
            return

        self._handler = SourceEventHandler(self.index, self.on_change)

        self._observer = Observer()
        self._observer.schedule(
            self._handler,
            str(self.directory),
            recursive=True,
        )
        self._observer.daemon = True
        self._observer.start()
        logger.info("File watcher started: %s", self.directory)

    def stop(self) -> None:
        """Stop watching."""
        if self._observer is not None:
            self._observer.stop()
            self._observer.join(timeout=1.0)
            self._observer = None
            self._handler = None

    def __enter__(self) -> "FileWatcher":
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.stop()
