"""Shared fixtures for jumptree tests."""

import pytest

from jumptree.history import HistoryRecord
from jumptree.recorder import EventRecorder
from jumptree.store import TreeStore
from jumptree.widgets import source_view


@pytest.fixture
def record():
    """A fresh history record holding only the root."""
    return HistoryRecord.new()


@pytest.fixture
def store():
    """An empty tree store, cleared after the test."""
    tree_store = TreeStore()
    yield tree_store
    tree_store.clear()


@pytest.fixture
def recorder(store):
    """An event recorder backed by the ``store`` fixture."""
    return EventRecorder(store)


@pytest.fixture(autouse=True)
def reset_source_cache():
    """Reset the module-level source cache between tests."""
    yield
    source_view._file_cache = source_view.FileCache(max_size=10)


@pytest.fixture
def sample_workspace(tmp_path):
    """Create a small project with source files in several languages."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "pyproject.toml").write_text('[project]\nname = "sample"\n')

    pkg = project / "pkg"
    pkg.mkdir()
    (pkg / "core.py").write_text(
        "import os\n"
        "\n"
        "class Parser:\n"
        "    def parse(self, text):\n"
        "        return tokenize(text)\n"
        "\n"
        "\n"
        "def tokenize(text):\n"
        "    return text.split()\n"
    )
    (pkg / "util.py").write_text(
        "async def fetch(url):\n"
        "    pass\n"
        "\n"
        "def parse_args():\n"
        "    pass\n"
    )
    (project / "web.js").write_text("export function render(view) {\n  return view;\n}\n")
    (project / "notes.txt").write_text("def not_code():\n")

    hidden = project / "node_modules" / "dep"
    hidden.mkdir(parents=True)
    (hidden / "index.js").write_text("function vendored() {}\n")

    return project
