"""Jump-back stack of source locations."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Location:
    """A place in a source file the user can return to."""

    path: Path
    line: int
    symbol: str | None = None


class LocationStack:
    """Stack-based history for jump to definition."""

    def __init__(self) -> None:
        self._stack: list[Location] = []

    def push(self, location: Location) -> None:
        """Push a location onto the stack."""
        self._stack.append(location)

    def pop(self) -> Location | None:
        """Pop and return the most recent location, or None if empty."""
        if self._stack:
            return self._stack.pop()
        return None

    def peek(self) -> Location | None:
        """Return the most recent location without removing it."""
        return self._stack[-1] if self._stack else None

    def clear(self) -> None:
        """Clear all locations."""
        self._stack.clear()

    def is_empty(self) -> bool:
        """Check if the stack is empty."""
        return len(self._stack) == 0

    def __len__(self) -> int:
        return len(self._stack)
