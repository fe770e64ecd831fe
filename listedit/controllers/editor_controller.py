"""Controller turning list editor gestures into state changes and events."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from listedit.core import events
from listedit.core.list_ops import in_bounds
from listedit.core.mode import Mode

if TYPE_CHECKING:
    from listedit.state.editor_state import EditorState

logger = logging.getLogger(__name__)


class EditorController:
    """Bridges UI gestures to EditorState and announces results on the bus.

    Each gesture method mutates state synchronously first, so the view has
    already re-rendered by the time the event is published.
    """

    def __init__(self, editor: EditorState):
        self.editor = editor
        self.event_bus = editor.bus

    # --- Text entry ---

    def set_pending_input(self, text: Optional[str]) -> None:
        self.editor.set_pending_input(text or "")

    def set_edit_text(self, text: Optional[str]) -> None:
        self.editor.set_edit_text(text or "")

    # --- Gestures ---

    async def add(self) -> str:
        """Commit the new item field."""
        text = self.editor.add_item()
        index = len(self.editor.items.value) - 1
        await self.event_bus.publish(
            events.TOPIC_ITEM_ADDED,
            events.create_item_added_event(index, text),
        )
        return text

    async def delete(self, index: int) -> Optional[str]:
        """Remove a row. The mode reset rides on the removal event."""
        removed = self.editor.delete_item(index)
        await self.event_bus.publish(
            events.TOPIC_ITEM_REMOVED,
            events.create_item_removed_event(index, removed, self.editor.mode.value.value),
        )
        return removed

    async def begin_edit(self, index: int) -> Optional[str]:
        text = self.editor.begin_edit(index)
        if text is not None:
            await self.event_bus.publish(
                events.TOPIC_EDIT_STARTED,
                events.create_edit_started_event(index, text),
            )
        return text

    async def save(self, index: Optional[int] = None) -> Optional[str]:
        """Save the row editor's text.

        Args:
            index: Row to replace; defaults to the row under the edit cursor
        """
        if index is None:
            index = self.editor.edit_index.value
        if index is None:
            logger.debug("Save requested with no row open for editing")
            return None

        new_text = self.editor.edit_text.value
        old_text = self.editor.update_item(index, new_text)
        await self.event_bus.publish(
            events.TOPIC_ITEM_UPDATED,
            events.create_item_updated_event(index, old_text, new_text, self.editor.mode.value.value),
        )
        return old_text

    async def select(self, index: int) -> Optional[str]:
        """Row click, dispatched by the current mode.

        Returns:
            "delete", "edit", or None when the click was inert
        """
        items = self.editor.items.value
        text = items[index] if in_bounds(items, index) else None

        action = self.editor.select_item(index)
        if action == "delete":
            await self.event_bus.publish(
                events.TOPIC_ITEM_REMOVED,
                events.create_item_removed_event(index, text, self.editor.mode.value.value),
            )
        elif action == "edit":
            await self.event_bus.publish(
                events.TOPIC_EDIT_STARTED,
                events.create_edit_started_event(index, text or ""),
            )
        return action

    async def switch_mode(self, mode: Union[Mode, str]) -> Mode:
        previous_mode = self.editor.mode.value
        current = self.editor.set_mode(mode)
        await self._announce_mode(previous_mode)
        return current

    async def _announce_mode(self, previous: Mode) -> None:
        current = self.editor.mode.value
        if current is previous:
            return
        await self.event_bus.publish(
            events.TOPIC_MODE_CHANGED,
            events.create_mode_changed_event(previous.value, current.value),
        )
