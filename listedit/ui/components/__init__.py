from .activity_panel import build_activity_panel, render_activity_entries
from .rows import render_edit_row, render_row, render_rows

__all__ = [
    "build_activity_panel",
    "render_activity_entries",
    "render_edit_row",
    "render_row",
    "render_rows",
]
