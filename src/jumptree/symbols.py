"""Definition scanning and the in-memory symbol index."""

import logging
import re
import threading
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Definition keywords across common languages, followed by the defined name
DEFINITION_PATTERN = re.compile(
    r"^[ \t]*\(?(?:export\s+)?(?:pub(?:\([^)]*\))?\s+)?(?:async\s+)?"
    r"(?:def|class|function|fn|func|struct|enum|trait|interface|defun|defmacro|module)"
    r"[ \t]+([A-Za-z_][\w!?*-]*)",
    re.MULTILINE,
)

# Directories never worth scanning
SKIP_DIRECTORIES = {".git", ".hg", ".svn", "node_modules", "__pycache__", ".venv", "venv"}


@dataclass(frozen=True)
class Definition:
    """Where a symbol is defined."""

    name: str
    path: Path
    line: int


def extract_definitions(content: str, path: Path) -> list[Definition]:
    """Extract definitions from source text, in file order."""
    definitions = []
    for match in DEFINITION_PATTERN.finditer(content):
        line = content.count("\n", 0, match.start(1)) + 1
        definitions.append(Definition(match.group(1), path, line))
    return definitions


def scan_file(path: Path) -> list[Definition]:
    """Scan a single file for definitions."""
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []
    return extract_definitions(content, path)


def find_source_files(directory: Path, extensions: list[str]) -> list[Path]:
    """Recursively find source files with one of ``extensions``."""
    if not directory.exists():
        return []

    suffixes = {e.lower() for e in extensions}
    files = []
    try:
        for path in directory.rglob("*"):
            if any(part in SKIP_DIRECTORIES for part in path.relative_to(directory).parts):
                continue
            if path.is_file() and path.suffix.lower() in suffixes:
                files.append(path)
    except PermissionError:
        pass

    return sorted(files)


class SymbolIndex:
    """Definitions found under a directory, grouped by file.

    Safe to update from the watcher thread while the UI reads it.
    """

    def __init__(self, extensions: list[str]) -> None:
        self.extensions = extensions
        self._files: dict[Path, list[Definition]] = {}
        self._lock = threading.Lock()

    def is_source_file(self, path: Path) -> bool:
        """Check if the path has an indexed extension."""
        return path.suffix.lower() in {e.lower() for e in self.extensions}

    def scan_directory(self, directory: Path) -> int:
        """Rebuild the index from every source file under ``directory``.

        Returns:
            Number of definitions indexed
        """
        files = {path: scan_file(path) for path in find_source_files(directory, self.extensions)}
        with self._lock:
            self._files = {path: defs for path, defs in files.items() if defs}
            total = sum(len(defs) for defs in self._files.values())
        logger.info("Indexed %d definitions in %d files", total, len(files))
        return total

    def rescan_file(self, path: Path) -> bool:
        """Rescan a single file, dropping it if it is gone.

        Returns True if the file has definitions, False otherwise.
        """
        if not path.exists() or not path.is_file():
            self.remove_file(path)
            return False

        definitions = scan_file(path)
        with self._lock:
            if definitions:
                self._files[path] = definitions
            else:
                self._files.pop(path, None)
        return bool(definitions)

    def remove_file(self, path: Path) -> None:
        """Remove a file from the index."""
        with self._lock:
            self._files.pop(path, None)

    def lookup(self, name: str) -> list[Definition]:
        """Get all definitions of ``name``, ordered by path and line."""
        with self._lock:
            matches = [d for defs in self._files.values() for d in defs if d.name == name]
        return sorted(matches, key=lambda d: (str(d.path), d.line))

    def definitions_in(self, path: Path) -> list[Definition]:
        """Get the definitions found in one file."""
        with self._lock:
            return list(self._files.get(path, []))

    def all_symbols(self) -> list[Definition]:
        """Get every definition, sorted by name then location."""
        with self._lock:
            definitions = [d for defs in self._files.values() for d in defs]
        return sorted(definitions, key=lambda d: (d.name.lower(), str(d.path), d.line))

    def search(self, query: str) -> list[Definition]:
        """Search definitions by case-insensitive partial name match.

        Exact matches sort first, then prefix matches, then the rest.
        """
        if not query.strip():
            return []

        query_lower = query.lower().strip()

        def rank(definition: Definition) -> int:
            name = definition.name.lower()
            if name == query_lower:
                return 0
            if name.startswith(query_lower):
                return 1
            return 2

        results = [d for d in self.all_symbols() if query_lower in d.name.lower()]
        results.sort(key=rank)
        return results

    def __len__(self) -> int:
        with self._lock:
            return sum(len(defs) for defs in self._files.values())
