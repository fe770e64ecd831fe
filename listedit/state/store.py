"""Per-session State Store.

Each Flet page session builds its own Store, so two browser tabs never share
list contents. The Store bundles the session's event bus with the editor state
built from configuration.
"""

from __future__ import annotations

from typing import Optional

from listedit.core.configuration import EditorConfig
from listedit.core.event_bus import EventBus

from .editor_state import EditorSnapshot, EditorState


class Store:
    """State store for one list editor instance.

    Usage:
        # When a page session starts
        store = Store(EventBus(), config.editor)
        await store.initialize()

        # In UI code
        store.editor.set_mode("delete")
    """

    def __init__(self, event_bus: EventBus, config: Optional[EditorConfig] = None) -> None:
        """Create the editor state for this session.

        Args:
            event_bus: The session's event bus
            config: Editor settings, defaults when omitted
        """
        self.config = config or EditorConfig()
        self.bus = event_bus
        self.editor = EditorState(
            event_bus,
            modes_enabled=self.config.modes_enabled,
            max_log_entries=self.config.max_log_entries,
        )

    async def initialize(self) -> None:
        """Wire event subscriptions. Call once after the session's loop is running."""
        await self.editor.initialize()

    def snapshot(self) -> EditorSnapshot:
        return self.editor.snapshot()
