"""Row rendering for the list editor.

A row's shape depends on the snapshot: the row under the edit cursor becomes a
text field with a Save button, other rows follow the active mode. With modes
disabled every row carries its own Edit and Delete buttons.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, List

import flet as ft

from listedit.controllers.editor_controller import EditorController
from listedit.core.mode import Mode
from listedit.state.editor_state import EditorSnapshot
from listedit.ui.theme import (
    BG_CARD, BG_ROW_DELETE, BG_ROW_EDIT,
    BORDER_SUBTLE,
    BUTTON_ICON_ACTIVE, BUTTON_ICON_DELETE, BUTTON_TEXT_ACTIVE,
    TEXT_ITEM, TEXT_PLACEHOLDER,
    get_mode_color,
)

EventCallback = Callable[[Any], Awaitable[None]]


def _on_select(controller: EditorController, index: int) -> EventCallback:
    async def handler(e) -> None:
        await controller.select(index)
    return handler


def _on_begin_edit(controller: EditorController, index: int) -> EventCallback:
    async def handler(e) -> None:
        await controller.begin_edit(index)
    return handler


def _on_delete(controller: EditorController, index: int) -> EventCallback:
    async def handler(e) -> None:
        await controller.delete(index)
    return handler


def _on_save(controller: EditorController, index: int) -> EventCallback:
    async def handler(e) -> None:
        await controller.save(index)
    return handler


def _on_edit_text_change(controller: EditorController) -> EventCallback:
    async def handler(e) -> None:
        controller.set_edit_text(e.control.value)
    return handler


def _row_container(content: ft.Control, bgcolor: str = BG_CARD, on_click=None) -> ft.Container:
    return ft.Container(
        content=content,
        bgcolor=bgcolor,
        border=ft.Border.all(1, BORDER_SUBTLE),
        border_radius=6,
        padding=ft.Padding.only(left=12, right=12, top=8, bottom=8),
        on_click=on_click,
    )


def render_edit_row(index: int, snapshot: EditorSnapshot, controller: EditorController) -> ft.Row:
    """Text field pre-filled with the pending edit text, plus a Save button."""
    save = _on_save(controller, index)
    field = ft.TextField(
        value=snapshot.edit_text,
        on_change=_on_edit_text_change(controller),
        on_submit=save,
        autofocus=True,
        dense=True,
        expand=True,
    )
    return ft.Row(
        [
            field,
            ft.OutlinedButton(
                "Save",
                icon=ft.Icons.SAVE,
                icon_color=BUTTON_ICON_ACTIVE,
                on_click=save,
                style=ft.ButtonStyle(color=BUTTON_TEXT_ACTIVE),
            ),
        ],
        spacing=8,
    )


def render_row(
    index: int,
    item: str,
    snapshot: EditorSnapshot,
    controller: EditorController,
) -> ft.Control:
    """Render one list row for the given snapshot."""
    editing = snapshot.edit_index == index
    if not snapshot.modes_enabled:
        if editing:
            return render_edit_row(index, snapshot, controller)
        return _row_container(
            ft.Row(
                [
                    ft.Text(item, color=TEXT_ITEM, size=14, expand=True),
                    ft.IconButton(
                        ft.Icons.EDIT,
                        icon_color=BUTTON_ICON_ACTIVE,
                        tooltip="Edit",
                        on_click=_on_begin_edit(controller, index),
                    ),
                    ft.IconButton(
                        ft.Icons.DELETE,
                        icon_color=BUTTON_ICON_DELETE,
                        tooltip="Delete",
                        on_click=_on_delete(controller, index),
                    ),
                ],
                spacing=4,
            )
        )

    mode = snapshot.mode
    text = ft.Text(item, color=get_mode_color(mode.value), size=14)
    if mode is Mode.EDIT:
        if editing:
            return render_edit_row(index, snapshot, controller)
        return _row_container(text, BG_ROW_EDIT, _on_select(controller, index))
    if mode is Mode.DELETE:
        return _row_container(text, BG_ROW_DELETE, _on_select(controller, index))
    # Normal mode rows are display-only
    return _row_container(text)


def render_rows(snapshot: EditorSnapshot, controller: EditorController) -> List[ft.Control]:
    """Render every row, or a placeholder when the list is empty."""
    if not snapshot.items:
        return [ft.Text("Nothing here yet", color=TEXT_PLACEHOLDER, size=14, italic=True)]
    return [
        render_row(index, item, snapshot, controller)
        for index, item in enumerate(snapshot.items)
    ]
