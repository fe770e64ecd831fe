"""Wiring tests for the list editor view, driven through a mock page."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import flet as ft
import pytest

from listedit.core.configuration import EditorConfig
from listedit.core.event_bus import EventBus
from listedit.core.mode import Mode
from listedit.state import Store
from listedit.ui.layouts.editor_view import build_editor_view
from listedit.ui.theme import BUTTON_TEXT_ACTIVE, BUTTON_TEXT_IDLE


def _change_event(value):
    return SimpleNamespace(control=SimpleNamespace(value=value))


def _parts(view):
    main_column, activity_panel = view.controls[0].content.controls
    _, entry_row, mode_row, _, rows_column = main_column.controls
    field, add_button = entry_row.controls
    activity_column = activity_panel.content.content.controls[2].content
    return SimpleNamespace(
        field=field,
        add_button=add_button,
        mode_row=mode_row,
        mode_buttons=mode_row.controls[1:],
        rows_column=rows_column,
        activity_panel=activity_panel,
        activity_column=activity_column,
    )


async def _build(config=None):
    store = Store(EventBus(), config)
    await store.initialize()
    page = MagicMock()
    view = build_editor_view(page, store)
    return store, page, view


@pytest.mark.asyncio
async def test_view_starts_with_placeholder_and_theme():
    store, page, view = await _build()
    parts = _parts(view)

    assert isinstance(view, ft.View)
    assert view.route == "/"
    assert page.theme_mode == ft.ThemeMode.DARK
    assert parts.field.hint_text == store.config.input_hint
    assert parts.rows_column.controls[0].value == "Nothing here yet"
    assert parts.mode_row.visible is True
    assert parts.activity_panel.visible is True


@pytest.mark.asyncio
async def test_enter_in_field_adds_item_and_rerenders():
    store, page, view = await _build()
    parts = _parts(view)

    await parts.field.on_change(_change_event("Buy milk"))
    await parts.field.on_submit(None)
    await store.bus.wait_until_idle()

    assert store.editor.items.value == ["Buy milk"]
    assert parts.field.value == ""
    assert parts.rows_column.controls[0].content.value == "Buy milk"
    assert parts.activity_column.controls[0].controls[1].value == 'Added "Buy milk"'
    page.update.assert_called()


@pytest.mark.asyncio
async def test_add_button_commits_pending_text():
    store, _, view = await _build()
    parts = _parts(view)

    await parts.field.on_change(_change_event("Walk dog"))
    await parts.add_button.on_click(None)

    assert store.editor.items.value == ["Walk dog"]
    assert len(parts.rows_column.controls) == 1


@pytest.mark.asyncio
async def test_mode_buttons_switch_mode_and_row_clicks():
    store, _, view = await _build()
    parts = _parts(view)
    await parts.field.on_change(_change_event("a"))
    await parts.add_button.on_click(None)
    view_button, delete_button, edit_button = parts.mode_buttons

    await delete_button.on_click(None)
    assert store.editor.mode.value is Mode.DELETE
    assert delete_button.style.color == BUTTON_TEXT_ACTIVE
    assert view_button.style.color == BUTTON_TEXT_IDLE

    await parts.rows_column.controls[0].on_click(None)
    assert store.editor.items.value == []
    assert store.editor.mode.value is Mode.NORMAL
    assert view_button.style.color == BUTTON_TEXT_ACTIVE
    assert parts.rows_column.controls[0].value == "Nothing here yet"

    await parts.field.on_change(_change_event("b"))
    await parts.add_button.on_click(None)
    await edit_button.on_click(None)
    await parts.rows_column.controls[0].on_click(None)

    edit_row = parts.rows_column.controls[0]
    assert isinstance(edit_row, ft.Row)
    assert edit_row.controls[0].value == "b"


@pytest.mark.asyncio
async def test_config_hides_mode_toggle_and_activity_panel():
    store, _, view = await _build(EditorConfig(modes_enabled=False, show_activity_log=False))
    parts = _parts(view)

    assert parts.mode_row.visible is False
    assert parts.activity_panel.visible is False

    await parts.field.on_change(_change_event("a"))
    await parts.add_button.on_click(None)

    row = parts.rows_column.controls[0]
    assert isinstance(row.content.controls[1], ft.IconButton)
