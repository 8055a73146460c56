"""Resolution of the workspace that contains a file."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Entries whose presence marks a directory as a workspace root
DEFAULT_MARKERS = [
    ".git",
    ".hg",
    ".svn",
    "pyproject.toml",
    "setup.py",
    "package.json",
    "Cargo.toml",
    "go.mod",
    ".jumptree",
]


class WorkspaceUnresolved(Exception):
    """Raised when no workspace root contains the given path."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"No workspace found for {path}")
        self.path = path


def workspace_candidates(path: Path, markers: list[str] | None = None) -> list[Path]:
    """Find every ancestor directory of ``path`` that looks like a workspace root.

    Args:
        path: A file or directory inside the workspace
        markers: File or directory names that mark a root

    Returns:
        Candidate roots, nearest first
    """
    if markers is None:
        markers = DEFAULT_MARKERS

    start = path.expanduser().resolve()
    if not start.is_dir():
        start = start.parent

    candidates = []
    for directory in (start, *start.parents):
        if any((directory / marker).exists() for marker in markers):
            candidates.append(directory)
    return candidates


def resolve_workspace(path: Path, markers: list[str] | None = None) -> str:
    """Return the identifier of the workspace containing ``path``.

    When several roots qualify the first (nearest) one is used.

    Raises:
        WorkspaceUnresolved: If no ancestor carries a marker
    """
    candidates = workspace_candidates(path, markers)
    if not candidates:
        raise WorkspaceUnresolved(path)
    if len(candidates) > 1:
        # TODO: choose between nested roots once multi-root workspaces are supported
        logger.debug(
            "Multiple workspace roots for %s, using %s (of %d)",
            path,
            candidates[0],
            len(candidates),
        )
    return str(candidates[0])
