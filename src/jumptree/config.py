"""Configuration loading and defaults for jumptree."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .renderer import DEFAULT_EMPTY_WIDTH, DEFAULT_MARKER
from .workspace import DEFAULT_MARKERS

DEFAULT_EXTENSIONS = [".py", ".js", ".ts", ".go", ".rs", ".rb", ".el"]


def get_config_dir() -> Path:
    """Get the jumptree config directory (XDG-style)."""
    return Path.home() / ".config" / "jumptree"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


def get_default_data_dir() -> Path:
    """Get the default data directory for logs."""
    return Path.home() / ".local" / "share" / "jumptree"


@dataclass
class TreeConfig:
    """History tree display configuration."""

    empty_width: int = DEFAULT_EMPTY_WIDTH
    marker: str = DEFAULT_MARKER
    highlight_style: str = "bold reverse"
    display_seconds: float = 5.0


@dataclass
class WorkspaceConfig:
    """Workspace root detection configuration."""

    markers: list[str] = field(default_factory=lambda: list(DEFAULT_MARKERS))


@dataclass
class IndexConfig:
    """Symbol index configuration."""

    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))


@dataclass
class LoggingConfig:
    """Log file configuration."""

    level: str = "WARNING"
    file: str = "jumptree.log"


@dataclass
class Config:
    """Application configuration."""

    editor: str = "vim"
    data_directory: Path = field(default_factory=lambda: get_default_data_dir())
    tree: TreeConfig = field(default_factory=TreeConfig)
    workspace: WorkspaceConfig = field(default_factory=WorkspaceConfig)
    index: IndexConfig = field(default_factory=IndexConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def get_log_path(self) -> Path:
        """Get the log file path inside the data directory."""
        return self.data_directory / self.logging.file

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create defaults."""
        config_path = get_config_path()

        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)

        if not config_path.exists():
            default_config = cls()
            default_config.data_directory.mkdir(parents=True, exist_ok=True)
            default_config.save()
            return default_config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        editor = data.get("editor", "vim")

        data_dir = data.get("data_directory", str(get_default_data_dir()))
        data_directory = Path(data_dir).expanduser()

        tree_data = data.get("tree", {})
        tree = TreeConfig(
            empty_width=int(tree_data.get("empty_width", DEFAULT_EMPTY_WIDTH)),
            marker=tree_data.get("marker", DEFAULT_MARKER),
            highlight_style=tree_data.get("highlight_style", "bold reverse"),
            display_seconds=float(tree_data.get("display_seconds", 5.0)),
        )

        workspace_data = data.get("workspace", {})
        workspace = WorkspaceConfig(
            markers=workspace_data.get("markers", list(DEFAULT_MARKERS)),
        )

        index_data = data.get("index", {})
        index = IndexConfig(
            extensions=index_data.get("extensions", list(DEFAULT_EXTENSIONS)),
        )

        logging_data = data.get("logging", {})
        logging_config = LoggingConfig(
            level=logging_data.get("level", "WARNING"),
            file=logging_data.get("file", "jumptree.log"),
        )

        config = cls(
            editor=editor,
            data_directory=data_directory,
            tree=tree,
            workspace=workspace,
            index=index,
            logging=logging_config,
        )

        config.data_directory.mkdir(parents=True, exist_ok=True)

        return config

    def save(self) -> None:
        """Save configuration to file."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        def toml_list(values: list[str]) -> str:
            return "[" + ", ".join(f'"{v}"' for v in values) + "]"

        # Build TOML content manually (tomllib is read-only)
        lines = [
            '# jumptree Configuration',
            '',
            '# Editor command for opening files',
            f'editor = "{self.editor}"',
            '',
            '# Directory for the log file',
            '# Default: ~/.local/share/jumptree',
            f'data_directory = "{self.data_directory}"',
            '',
            '# History tree display',
            '[tree]',
            f'empty_width = {self.tree.empty_width}  # columns per leaf',
            f'marker = "{self.tree.marker}"',
            f'highlight_style = "{self.tree.highlight_style}"',
            f'display_seconds = {self.tree.display_seconds}',
            '',
            '# Files or directories that mark a workspace root',
            '[workspace]',
            f'markers = {toml_list(self.workspace.markers)}',
            '',
            '# Source files scanned for definitions',
            '[index]',
            f'extensions = {toml_list(self.index.extensions)}',
            '',
            '[logging]',
            f'level = "{self.logging.level}"  # DEBUG, INFO, WARNING, ERROR',
            f'file = "{self.logging.file}"',
        ]

        config_path.write_text("\n".join(lines) + "\n")
