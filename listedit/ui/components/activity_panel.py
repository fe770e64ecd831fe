"""Activity panel listing what the user did, newest first."""

from __future__ import annotations

import datetime
from typing import Any, Dict, Iterable, List

import flet as ft

from listedit.ui.theme import BG_PANEL, LOG_PANEL_TIME, LOG_PANEL_TITLE, get_log_color


def render_activity_entries(logs: Iterable[Dict[str, Any]]) -> List[ft.Row]:
    entries = reversed(list(logs))
    controls: List[ft.Row] = []
    for entry in entries:
        level = entry.get('level', 'info')
        ts = entry.get('ts', 0)
        time_str = datetime.datetime.fromtimestamp(ts).strftime('%H:%M:%S') if ts else ''
        color = get_log_color(level)
        controls.append(
            ft.Row([
                ft.Text(time_str, size=11, color=LOG_PANEL_TIME, width=70),
                ft.Text(entry.get('message', ''), size=12, color=color, expand=True),
            ], spacing=8)
        )
    return controls


def build_activity_panel(entries_column: ft.Column) -> ft.Container:
    """Wrap the (externally synced) entries column in the panel chrome."""
    return ft.Container(
        width=320,
        bgcolor=BG_PANEL,
        border=ft.Border.all(1, LOG_PANEL_TITLE),
        border_radius=8,
        padding=12,
        content=ft.Column([
            ft.Text("Activity", size=16, weight=ft.FontWeight.W_700, color=LOG_PANEL_TITLE),
            ft.Divider(height=1, color=LOG_PANEL_TITLE),
            ft.Container(content=entries_column, expand=True),
        ], spacing=8),
    )
