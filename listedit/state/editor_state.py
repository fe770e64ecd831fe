"""List Editor State Management.

Holds one editor's values as FletXr reactive primitives. Every write replaces
a whole value, which notifies the listeners the view registered with
``.listen()`` so the list is re-rendered from the new state.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from fletx.core import RxList, RxStr
from fletx.core.state import Reactive
from pydantic import BaseModel, ConfigDict

from listedit.core import events
from listedit.core.event_bus import EventBus, EventPayload
from listedit.core.list_ops import append_item, in_bounds, remove_at, replace_at
from listedit.core.mode import Mode

logger = logging.getLogger(__name__)


class EditorSnapshot(BaseModel):
    """Immutable view of every editor value at one instant."""
    model_config = ConfigDict(frozen=True)

    items: List[str]
    pending_input: str
    edit_index: Optional[int]
    edit_text: str
    mode: Mode
    modes_enabled: bool = True


class EditorState:
    """Reactive state for a single list editor.

    Operations are synchronous and run to completion; they return what
    changed so the caller can announce it on the event bus. The event bus
    feeds back into ``logs``, the activity panel's entries.
    """

    def __init__(
        self,
        event_bus: EventBus,
        modes_enabled: bool = True,
        max_log_entries: int = 100,
    ) -> None:
        """Initialize editor state with neutral defaults.

        Args:
            event_bus: The session's event bus
            modes_enabled: False disables View/Delete/Edit gating entirely
            max_log_entries: Cap on the activity log length
        """
        self.bus = event_bus
        self.modes_enabled = modes_enabled
        self.max_log_entries = max_log_entries

        # List contents
        self.items: RxList[str] = RxList([])
        self.pending_input: RxStr = RxStr("")

        # Row edit cursor
        self.edit_index: Reactive[Optional[int]] = Reactive(None)
        self.edit_text: RxStr = RxStr("")

        self.mode: Reactive[Mode] = Reactive(Mode.NORMAL)

        # Activity entries (each is a dict: {message, level, topic, ts})
        self.logs: RxList[Dict[str, Any]] = RxList([])

        self._started = False

    async def initialize(self) -> None:
        """Subscribe the activity log to editor events. Safe to call twice."""
        if self._started:
            return

        await self.bus.subscribe(events.TOPIC_ITEM_ADDED, self._handle_item_added)
        await self.bus.subscribe(events.TOPIC_ITEM_REMOVED, self._handle_item_removed)
        await self.bus.subscribe(events.TOPIC_ITEM_UPDATED, self._handle_item_updated)
        await self.bus.subscribe(events.TOPIC_MODE_CHANGED, self._handle_mode_changed)
        await self.bus.subscribe(events.TOPIC_EDIT_STARTED, self._handle_edit_started)
        await self.bus.subscribe(events.TOPIC_LOGS_EVENT, self._handle_log_event)

        self._started = True
        logger.info("EditorState subscribed to editor events")

    # --- Read access ---

    def snapshot(self) -> EditorSnapshot:
        return EditorSnapshot(
            items=list(self.items.value),
            pending_input=self.pending_input.value,
            edit_index=self.edit_index.value,
            edit_text=self.edit_text.value,
            mode=self.mode.value,
            modes_enabled=self.modes_enabled,
        )

    # --- Text entry ---

    def set_pending_input(self, text: str) -> None:
        self.pending_input.value = text

    def set_edit_text(self, text: str) -> None:
        self.edit_text.value = text

    # --- List mutations ---

    def add_item(self) -> str:
        """Append the pending input to the list and clear the input.

        Returns:
            The appended text (may be empty)
        """
        text = self.pending_input.value
        self.items.value = append_item(self.items.value, text)
        self.pending_input.value = ""
        logger.debug(f"Appended item #{len(self.items.value) - 1}: {text!r}")
        return text

    def delete_item(self, index: int) -> Optional[str]:
        """Remove the item at ``index`` and return to normal mode.

        Returns:
            The removed text, or None if ``index`` matched nothing
        """
        current = self.items.value
        removed = current[index] if in_bounds(current, index) else None
        self.items.value = remove_at(current, index)
        if removed is not None:
            self._shift_edit_cursor(index)
        self._reset_mode()
        logger.debug(f"Removed item at {index}: {removed!r}")
        return removed

    def update_item(self, index: int, text: str) -> Optional[str]:
        """Replace the item at ``index``, close the row editor, return to normal mode.

        Returns:
            The previous text, or None if ``index`` matched nothing
        """
        current = self.items.value
        previous = current[index] if in_bounds(current, index) else None
        self.items.value = replace_at(current, index, text)
        self.edit_index.value = None
        self.edit_text.value = ""
        self._reset_mode()
        logger.debug(f"Replaced item at {index}: {previous!r} -> {text!r}")
        return previous

    # --- Row edit sub-state ---

    def begin_edit(self, index: int) -> Optional[str]:
        """Open row ``index`` for editing, pre-filled with its current text."""
        current = self.items.value
        if not in_bounds(current, index):
            logger.debug(f"Ignoring edit request for missing row {index}")
            return None
        # Seed the text before moving the cursor so listeners render the prefill
        self.edit_text.value = current[index]
        self.edit_index.value = index
        return current[index]

    def _shift_edit_cursor(self, removed_index: int) -> None:
        """Keep the cursor on the same item after the row at ``removed_index`` is gone."""
        cursor = self.edit_index.value
        if cursor is None or removed_index > cursor:
            return
        if removed_index == cursor:
            self.edit_text.value = ""
            self.edit_index.value = None
        else:
            self.edit_index.value = cursor - 1

    def commit_edit(self) -> Optional[str]:
        """Save the pending edit text into the row under the cursor."""
        index = self.edit_index.value
        if index is None:
            return None
        return self.update_item(index, self.edit_text.value)

    # --- Mode state machine ---

    def set_mode(self, mode: Union[Mode, str]) -> Mode:
        """Switch interaction mode.

        Raises:
            ValueError: If ``mode`` is not a known mode name
        """
        target = Mode(mode)
        if not self.modes_enabled:
            logger.debug(f"Modes disabled, ignoring switch to {target.value}")
            return self.mode.value
        self.mode.value = target
        return target

    def select_item(self, index: int) -> Optional[str]:
        """Apply a row click according to the current mode.

        Returns:
            "delete", "edit", or None when the click is inert
        """
        mode = self.mode.value
        if mode is Mode.DELETE:
            self.delete_item(index)
            return "delete"
        if mode is Mode.EDIT:
            if self.begin_edit(index) is None:
                return None
            return "edit"
        return None

    def _reset_mode(self) -> None:
        if self.modes_enabled:
            self.mode.value = Mode.NORMAL

    # --- Activity log ---

    def push_log(self, message: str, level: events.LogLevel = "info", topic: Optional[str] = None) -> None:
        """Append an activity entry, dropping the oldest past the cap."""
        entry = events.create_logs_event(message, level, topic)
        self.logs.value = [*self.logs.value, entry][-self.max_log_entries:]

    # --- Event Handlers ---

    async def _handle_item_added(self, payload: EventPayload) -> None:
        self.push_log(f"Added \"{payload.get('text', '')}\"", "success", events.TOPIC_ITEM_ADDED)

    async def _handle_item_removed(self, payload: EventPayload) -> None:
        if payload.get("removed"):
            self.push_log(f"Deleted \"{payload.get('text')}\"", "warning", events.TOPIC_ITEM_REMOVED)
        else:
            self.push_log(f"Nothing to delete at row {payload.get('index')}", "info", events.TOPIC_ITEM_REMOVED)

    async def _handle_item_updated(self, payload: EventPayload) -> None:
        if payload.get("updated"):
            self.push_log(
                f"Changed \"{payload.get('old_text')}\" to \"{payload.get('new_text')}\"",
                "success",
                events.TOPIC_ITEM_UPDATED,
            )
        else:
            self.push_log(f"Nothing to update at row {payload.get('index')}", "info", events.TOPIC_ITEM_UPDATED)

    async def _handle_mode_changed(self, payload: EventPayload) -> None:
        self.push_log(f"Mode: {payload.get('current')}", "info", events.TOPIC_MODE_CHANGED)

    async def _handle_edit_started(self, payload: EventPayload) -> None:
        self.push_log(f"Editing \"{payload.get('text')}\"", "info", events.TOPIC_EDIT_STARTED)

    async def _handle_log_event(self, payload: EventPayload) -> None:
        message = payload.get("message")
        if message:
            self.push_log(str(message), payload.get("level", "info"), payload.get("topic"))
