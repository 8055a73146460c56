"""Layout of a history tree as a centered ASCII diagram."""

from dataclasses import dataclass, field

from rich.text import Text

from .history import HistoryRecord, Node, iter_nodes

# Columns reserved for one leaf-unit
DEFAULT_EMPTY_WIDTH = 4
DEFAULT_MARKER = "o"


@dataclass
class Rendering:
    """Rendered diagram lines plus the (line, column) cells to highlight."""

    lines: list[str] = field(default_factory=list)
    highlights: list[tuple[int, int]] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def width(self) -> int:
        return max((len(line) for line in self.lines), default=0)


def subtree_widths(root: Node) -> dict[int, int]:
    """Compute the width in leaf-units of every subtree, keyed by ``id(node)``.

    A leaf is one unit wide; any other node is as wide as its children
    combined.
    """
    widths: dict[int, int] = {}
    # Reversed pre-order visits children before their parent
    for node in reversed(list(iter_nodes(root))):
        total = sum(widths[id(child)] for child in node.children)
        widths[id(node)] = max(1, total)
    return widths


class TreeRenderer:
    """Renders a history record top-down, one tree level per line.

    Each node's marker is centered over the columns its descendants use.
    Finished branches are kept as blank placeholder slots so deeper levels
    stay aligned under their ancestors.
    """

    def __init__(
        self,
        empty_width: int = DEFAULT_EMPTY_WIDTH,
        marker: str = DEFAULT_MARKER,
    ) -> None:
        if empty_width < 1:
            raise ValueError(f"empty_width must be at least 1, got {empty_width}")
        if len(marker) != 1:
            raise ValueError(f"marker must be a single character, got {marker!r}")
        self.empty_width = empty_width
        self.marker = marker

    def render(self, record: HistoryRecord) -> Rendering:
        """Lay out ``record`` and mark its current node."""
        widths = subtree_widths(record.root)
        rendering = Rendering()
        level: list[Node | int] = [record.root]

        while True:
            line_number = len(rendering.lines)
            parts: list[str] = []
            column = 0
            for slot in level:
                if isinstance(slot, int):
                    parts.append(" " * slot)
                    column += slot
                    continue
                span = self.empty_width * widths[id(slot)]
                middle = span // 2
                parts.append(" " * middle + self.marker + " " * (span - middle - 1))
                if slot is record.current:
                    rendering.highlights.append((line_number, column + middle))
                column += span
            rendering.lines.append("".join(parts))

            level = self._next_level(level)
            if all(isinstance(slot, int) for slot in level):
                # Also covers an empty level
                break

        return rendering

    def _next_level(self, level: list[Node | int]) -> list[Node | int]:
        next_level: list[Node | int] = []
        for slot in level:
            if isinstance(slot, int):
                next_level.append(slot)
            elif slot.children:
                next_level.extend(slot.children)
            else:
                next_level.append(self.empty_width)
        return next_level


def to_rich_text(rendering: Rendering, style: str = "bold reverse") -> Text:
    """Convert a rendering to Rich text with its highlight cells styled."""
    text = Text(rendering.text, no_wrap=True)
    offsets = []
    offset = 0
    for line in rendering.lines:
        offsets.append(offset)
        offset += len(line) + 1
    for line_number, column in rendering.highlights:
        start = offsets[line_number] + column
        text.stylize(style, start, start + 1)
    return text
