"""Canonical event definitions for ListEdit."""

from __future__ import annotations

import time
from typing import Literal, Optional

from .event_bus import EventPayload

# Domain events, published once per completed operation
TOPIC_ITEM_ADDED = "item.added"
TOPIC_ITEM_REMOVED = "item.removed"
TOPIC_ITEM_UPDATED = "item.updated"
TOPIC_MODE_CHANGED = "mode.changed"
TOPIC_EDIT_STARTED = "edit.started"

# Free-form activity messages
TOPIC_LOGS_EVENT = "logs.event"

LogLevel = Literal["info", "success", "warning", "error"]


def create_item_added_event(index: int, text: str) -> EventPayload:
    """Create an item added event."""
    return {
        "index": index,
        "text": text,
    }


def create_item_removed_event(
    index: int,
    text: Optional[str],
    mode: Optional[str] = None,
) -> EventPayload:
    """Create an item removed event.

    Args:
        index: Requested position
        text: Removed text, or None when the index matched nothing
        mode: Mode the editor is in once the removal has settled
    """
    return {
        "index": index,
        "text": text,
        "removed": text is not None,
        "mode": mode,
    }


def create_item_updated_event(
    index: int,
    old_text: Optional[str],
    new_text: str,
    mode: Optional[str] = None,
) -> EventPayload:
    """Create an item updated event.

    Args:
        index: Position that was replaced
        old_text: Previous text, or None when the index matched nothing
        new_text: Replacement text
        mode: Mode the editor is in once the update has settled
    """
    return {
        "index": index,
        "old_text": old_text,
        "new_text": new_text,
        "updated": old_text is not None,
        "mode": mode,
    }


def create_mode_changed_event(previous: str, current: str) -> EventPayload:
    """Create a mode changed event."""
    return {
        "previous": previous,
        "current": current,
    }


def create_edit_started_event(index: int, text: str) -> EventPayload:
    """Create an edit started event."""
    return {
        "index": index,
        "text": text,
    }


def create_logs_event(
    message: str,
    level: LogLevel = "info",
    topic: str | None = None,
) -> EventPayload:
    """Create an activity log entry."""
    return {
        "message": message,
        "level": level,
        "topic": topic,
        "ts": time.time(),
    }
