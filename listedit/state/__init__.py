"""FletXr Reactive State Management for the list editor.

Architecture:
- EditorState: list contents, pending inputs, edit cursor, mode, activity log
- Store: per-session holder pairing the editor state with its event bus
"""

from .editor_state import EditorSnapshot, EditorState
from .store import Store

__all__ = ["EditorSnapshot", "EditorState", "Store"]
