"""Entry point for jumptree."""

import argparse
import logging
import sys
from pathlib import Path

from .app import run_app
from .config import Config


def setup_logging(config: Config) -> None:
    """Send log records to the configured file (the TUI owns the terminal)."""
    log_path = config.get_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_path,
        level=getattr(logging, config.logging.level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for jumptree."""
    parser = argparse.ArgumentParser(
        prog="jumptree",
        description="Browse definitions and see your jump history as a tree.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to index (default: current directory)",
    )
    args = parser.parse_args(argv)

    try:
        config = Config.load()
        setup_logging(config)

        directory = Path(args.directory).expanduser()
        if not directory.is_dir():
            print(f"Error: not a directory: {directory}", file=sys.stderr)
            return 1

        run_app(config, directory)

        return 0
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
