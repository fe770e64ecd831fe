from __future__ import annotations

import logging
from typing import Dict

import flet as ft

from listedit.controllers.editor_controller import EditorController
from listedit.core.mode import Mode
from listedit.state import Store
from listedit.ui.components.activity_panel import build_activity_panel, render_activity_entries
from listedit.ui.components.rows import render_rows
from listedit.ui.theme import (
    CYAN_PRIMARY,
    TEXT_TITLE, TEXT_LABEL,
    BUTTON_TEXT_ACTIVE, BUTTON_TEXT_IDLE, BUTTON_ICON_ACTIVE,
    BG_GRADIENT_START, BG_GRADIENT_MID, BG_GRADIENT_END,
    BORDER_DIVIDER,
)

logger = logging.getLogger(__name__)

MODE_BUTTONS = (
    (Mode.NORMAL, "View", ft.Icons.VISIBILITY),
    (Mode.DELETE, "Delete", ft.Icons.DELETE),
    (Mode.EDIT, "Edit", ft.Icons.EDIT),
)


def apply_editor_theme(page: ft.Page, theme_mode: str = "dark") -> None:
    """Apply the dark baseline theme."""
    page.theme = ft.Theme(
        color_scheme_seed=CYAN_PRIMARY,
        visual_density=ft.VisualDensity.COMFORTABLE,
        use_material3=True,
    )
    page.theme_mode = ft.ThemeMode.LIGHT if theme_mode == "light" else ft.ThemeMode.DARK
    page.padding = 0


def _mode_button_style(selected: bool) -> ft.ButtonStyle:
    return ft.ButtonStyle(color=BUTTON_TEXT_ACTIVE if selected else BUTTON_TEXT_IDLE)


def build_editor_view(page: ft.Page, store: Store, theme_mode: str = "dark") -> ft.View:
    """Build the list editor view and bind it to ``store``.

    Listeners on the store's reactive values re-render the affected parts of
    the view whenever an operation replaces a value.
    """
    editor = store.editor
    controller = EditorController(editor)

    def _refresh() -> None:
        try:
            page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            pass

    apply_editor_theme(page, theme_mode)

    # --- New item entry ---
    async def on_input_change(e) -> None:
        controller.set_pending_input(e.control.value)

    async def on_add(e) -> None:
        await controller.add()

    new_item_field = ft.TextField(
        value=editor.pending_input.value,
        hint_text=store.config.input_hint,
        on_change=on_input_change,
        on_submit=on_add,
        expand=True,
    )
    add_button = ft.Button(
        "Add Todo",
        icon=ft.Icons.ADD,
        on_click=on_add,
        bgcolor=ft.Colors.CYAN_700,
        color=ft.Colors.WHITE,
    )

    # --- Mode toggle ---
    mode_buttons: Dict[Mode, ft.OutlinedButton] = {}

    def _mode_handler(mode: Mode):
        async def handler(e) -> None:
            await controller.switch_mode(mode)
        return handler

    for mode, label, icon in MODE_BUTTONS:
        mode_buttons[mode] = ft.OutlinedButton(
            label,
            icon=icon,
            icon_color=BUTTON_ICON_ACTIVE,
            on_click=_mode_handler(mode),
            style=_mode_button_style(mode is editor.mode.value),
        )
    mode_row = ft.Row(
        [ft.Text("Mode", color=TEXT_LABEL, size=12), *mode_buttons.values()],
        spacing=8,
        visible=editor.modes_enabled,
    )

    # --- List and activity ---
    rows_column = ft.Column(spacing=6, scroll=ft.ScrollMode.AUTO, expand=True)
    activity_column = ft.Column(spacing=4, scroll=ft.ScrollMode.AUTO)
    activity_panel = ft.Container(
        visible=store.config.show_activity_log,
        content=build_activity_panel(activity_column),
        padding=ft.Padding.only(left=8, right=8, top=0, bottom=0),
    )

    # --- Sync functions ---

    def _sync_rows(*_) -> None:
        rows_column.controls = render_rows(editor.snapshot(), controller)
        _refresh()

    def _sync_input(*_) -> None:
        new_item_field.value = editor.pending_input.value
        _refresh()

    def _sync_mode(*_) -> None:
        current = editor.mode.value
        for mode, button in mode_buttons.items():
            button.style = _mode_button_style(mode is current)
        _sync_rows()

    def _sync_logs(*_) -> None:
        activity_column.controls = render_activity_entries(editor.logs.value)
        _refresh()

    # --- Listener Bindings ---
    editor.items.listen(_sync_rows)
    editor.edit_index.listen(_sync_rows)
    editor.mode.listen(_sync_mode)
    editor.pending_input.listen(_sync_input)
    editor.logs.listen(_sync_logs)

    # --- Main Layout ---
    chrome = ft.Container(
        expand=True,
        gradient=ft.LinearGradient(
            begin=ft.Alignment.TOP_LEFT,
            end=ft.Alignment.BOTTOM_RIGHT,
            colors=[BG_GRADIENT_START, BG_GRADIENT_MID, BG_GRADIENT_END],
        ),
        padding=20,
        content=ft.Row(
            [
                ft.Column(
                    [
                        ft.Text(store.config.title, size=24, weight=ft.FontWeight.W_700, color=TEXT_TITLE),
                        ft.Row([new_item_field, add_button], spacing=8),
                        mode_row,
                        ft.Divider(color=BORDER_DIVIDER, height=1),
                        rows_column,
                    ],
                    spacing=16,
                    expand=True,
                ),
                activity_panel,
            ],
            expand=True,
            vertical_alignment=ft.CrossAxisAlignment.START,
        ),
    )

    # Initial Sync
    rows_column.controls = render_rows(editor.snapshot(), controller)
    activity_column.controls = render_activity_entries(editor.logs.value)
    logger.info(f"List editor view built (modes {'on' if editor.modes_enabled else 'off'})")

    return ft.View(
        route="/",
        controls=[chrome],
        bgcolor=ft.Colors.BLACK,
        padding=0,
    )
