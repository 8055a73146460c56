"""Translation of host navigation events into history tree updates."""

import logging
from dataclasses import dataclass
from typing import Callable

from .history import backward, forward, intern_tag
from .renderer import Rendering, TreeRenderer
from .store import TreeStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForwardNavigation:
    """The host jumped to the definition of ``symbol``."""

    symbol: str


@dataclass(frozen=True)
class BackwardNavigation:
    """The host jumped back to where the previous jump started."""


NavigationEvent = ForwardNavigation | BackwardNavigation


class EventRecorder:
    """Applies navigation events to the history of the matching workspace."""

    def __init__(self, store: TreeStore, renderer: TreeRenderer | None = None) -> None:
        self.store = store
        self.renderer = renderer or TreeRenderer()

    def on_forward(self, workspace_id: str, symbol_name: str) -> None:
        """Record a jump to ``symbol_name``."""
        tag = intern_tag(symbol_name)
        with self.store.transaction(workspace_id) as record:
            node = forward(record, tag)
        logger.debug("Forward in %s: now at %s", workspace_id, node.tag)

    def on_backward(self, workspace_id: str) -> None:
        """Record a jump back."""
        with self.store.transaction(workspace_id) as record:
            node = backward(record)
        logger.debug("Backward in %s: now at %s", workspace_id, node.tag)

    def handle(self, workspace_id: str, event: NavigationEvent) -> None:
        """Dispatch a navigation event value to the matching handler."""
        if isinstance(event, ForwardNavigation):
            self.on_forward(workspace_id, event.symbol)
        elif isinstance(event, BackwardNavigation):
            self.on_backward(workspace_id)
        else:
            raise TypeError(f"Unknown navigation event: {event!r}")

    def render_history(self, workspace_id: str) -> Rendering:
        """Render the history tree of a workspace."""
        with self.store.transaction(workspace_id) as record:
            return self.renderer.render(record)


class NavigationHooks:
    """Callbacks the host runs when it navigates.

    The host calls ``fire_forward`` before jumping to a definition and
    ``fire_backward`` before jumping back.
    """

    def __init__(self) -> None:
        self._forward: list[Callable[[str], None]] = []
        self._backward: list[Callable[[], None]] = []

    def subscribe_forward(self, callback: Callable[[str], None]) -> None:
        self._forward.append(callback)

    def subscribe_backward(self, callback: Callable[[], None]) -> None:
        self._backward.append(callback)

    def fire_forward(self, symbol_name: str) -> None:
        for callback in list(self._forward):
            callback(symbol_name)

    def fire_backward(self) -> None:
        for callback in list(self._backward):
            callback()


def connect(
    hooks: NavigationHooks,
    recorder: EventRecorder,
    resolve_workspace: Callable[[], str],
) -> None:
    """Subscribe ``recorder`` to ``hooks``.

    ``resolve_workspace`` is asked for the current workspace on every event.
    If it raises ``WorkspaceUnresolved`` the error reaches the code that
    fired the hook and no history is touched.
    """

    def on_forward(symbol_name: str) -> None:
        recorder.on_forward(resolve_workspace(), symbol_name)

    def on_backward() -> None:
        recorder.on_backward(resolve_workspace())

    hooks.subscribe_forward(on_forward)
    hooks.subscribe_backward(on_backward)
