"""Controller tests: state changes, published events, activity log."""

import pytest

from listedit.core import events
from listedit.core.mode import Mode


class Recorder:
    """Collects payloads published on one topic."""

    def __init__(self):
        self.payloads = []

    async def __call__(self, payload):
        self.payloads.append(payload)


async def _record(bus, *topics):
    recorders = {}
    for topic in topics:
        recorders[topic] = Recorder()
        await bus.subscribe(topic, recorders[topic])
    return recorders


@pytest.mark.asyncio
async def test_add_publishes_item_added(bus, editor, controller):
    rec = await _record(bus, events.TOPIC_ITEM_ADDED)

    controller.set_pending_input("Buy milk")
    assert await controller.add() == "Buy milk"
    await bus.wait_until_idle()

    assert editor.items.value == ["Buy milk"]
    assert editor.pending_input.value == ""
    assert rec[events.TOPIC_ITEM_ADDED].payloads == [{"index": 0, "text": "Buy milk"}]


@pytest.mark.asyncio
async def test_delete_mode_scenario_carries_mode_reset_on_removal(bus, editor, controller, add_items):
    rec = await _record(bus, events.TOPIC_ITEM_REMOVED, events.TOPIC_MODE_CHANGED)
    add_items(editor, "Buy milk", "Walk dog")

    assert await controller.switch_mode(Mode.DELETE) is Mode.DELETE
    assert await controller.select(0) == "delete"
    await bus.wait_until_idle()

    assert editor.items.value == ["Walk dog"]
    assert editor.mode.value is Mode.NORMAL
    removed = rec[events.TOPIC_ITEM_REMOVED].payloads
    assert removed == [{"index": 0, "text": "Buy milk", "removed": True, "mode": "normal"}]
    modes = [(p["previous"], p["current"]) for p in rec[events.TOPIC_MODE_CHANGED].payloads]
    assert modes == [("normal", "delete")]


@pytest.mark.asyncio
async def test_edit_mode_scenario(bus, editor, controller, add_items):
    rec = await _record(bus, events.TOPIC_EDIT_STARTED, events.TOPIC_ITEM_UPDATED)
    add_items(editor, "Buy milk", "Walk dog")

    await controller.switch_mode("edit")
    assert await controller.select(1) == "edit"
    assert editor.edit_index.value == 1
    assert editor.edit_text.value == "Walk dog"

    controller.set_edit_text("Walk the dog")
    assert await controller.save() == "Walk dog"
    await bus.wait_until_idle()

    assert editor.items.value == ["Buy milk", "Walk the dog"]
    assert editor.edit_index.value is None
    assert editor.mode.value is Mode.NORMAL
    assert rec[events.TOPIC_EDIT_STARTED].payloads == [{"index": 1, "text": "Walk dog"}]
    assert rec[events.TOPIC_ITEM_UPDATED].payloads == [
        {"index": 1, "old_text": "Walk dog", "new_text": "Walk the dog", "updated": True, "mode": "normal"}
    ]


@pytest.mark.asyncio
async def test_normal_mode_select_publishes_nothing(bus, editor, controller, add_items):
    rec = await _record(bus, events.TOPIC_ITEM_REMOVED, events.TOPIC_EDIT_STARTED)
    add_items(editor, "a")

    assert await controller.select(0) is None
    await bus.wait_until_idle()

    assert rec[events.TOPIC_ITEM_REMOVED].payloads == []
    assert rec[events.TOPIC_EDIT_STARTED].payloads == []


@pytest.mark.asyncio
async def test_save_without_open_row_is_noop(bus, editor, controller, add_items):
    rec = await _record(bus, events.TOPIC_ITEM_UPDATED)
    add_items(editor, "a")

    assert await controller.save() is None
    await bus.wait_until_idle()

    assert editor.items.value == ["a"]
    assert rec[events.TOPIC_ITEM_UPDATED].payloads == []


@pytest.mark.asyncio
async def test_activity_log_records_each_operation(bus, editor, controller, add_items):
    await editor.initialize()

    controller.set_pending_input("Buy milk")
    await controller.add()
    await controller.switch_mode(Mode.EDIT)
    await controller.select(0)
    controller.set_edit_text("Buy oat milk")
    await controller.save()
    await controller.switch_mode(Mode.DELETE)
    await controller.select(0)
    await bus.wait_until_idle()

    messages = [entry["message"] for entry in editor.logs.value]
    assert 'Added "Buy milk"' in messages
    assert 'Editing "Buy milk"' in messages
    assert 'Changed "Buy milk" to "Buy oat milk"' in messages
    assert 'Deleted "Buy oat milk"' in messages
    assert "Mode: delete" in messages
    assert editor.items.value == []


@pytest.mark.asyncio
async def test_free_form_log_events_reach_activity_log(bus, editor):
    await editor.initialize()
    await editor.initialize()  # second call must not double-subscribe

    await bus.publish(events.TOPIC_LOGS_EVENT, events.create_logs_event("Hello", "warning"))
    await bus.wait_until_idle()

    assert [(e["message"], e["level"]) for e in editor.logs.value] == [("Hello", "warning")]


@pytest.mark.asyncio
async def test_missing_row_delete_is_reported(bus, editor, controller):
    await editor.initialize()

    assert await controller.delete(3) is None
    await bus.wait_until_idle()

    assert editor.logs.value[-1]["message"] == "Nothing to delete at row 3"


@pytest.mark.asyncio
async def test_classic_editor_buttons_skip_modes(bus, classic_editor, add_items):
    from listedit.controllers.editor_controller import EditorController

    rec = await _record(bus, events.TOPIC_MODE_CHANGED)
    controller = EditorController(classic_editor)
    add_items(classic_editor, "a", "b")

    await controller.switch_mode(Mode.DELETE)
    await controller.begin_edit(1)
    controller.set_edit_text("B")
    await controller.save(1)
    await controller.delete(0)
    await bus.wait_until_idle()

    assert classic_editor.items.value == ["B"]
    assert rec[events.TOPIC_MODE_CHANGED].payloads == []


@pytest.mark.asyncio
async def test_each_row_operation_logs_one_entry(bus, editor, controller, add_items):
    await editor.initialize()
    add_items(editor, "a", "b")
    await controller.switch_mode(Mode.DELETE)
    await bus.wait_until_idle()
    before = len(editor.logs.value)

    await controller.select(0)
    await bus.wait_until_idle()
    assert [e["message"] for e in editor.logs.value[before:]] == ['Deleted "a"']

    await controller.switch_mode(Mode.EDIT)
    await controller.select(0)
    await bus.wait_until_idle()
    before = len(editor.logs.value)

    controller.set_edit_text("B")
    await controller.save()
    await bus.wait_until_idle()
    assert [e["message"] for e in editor.logs.value[before:]] == ['Changed "b" to "B"']
    assert editor.mode.value is Mode.NORMAL


@pytest.mark.asyncio
async def test_delete_above_open_row_keeps_cursor_on_its_item(bus, classic_editor, add_items):
    from listedit.controllers.editor_controller import EditorController

    controller = EditorController(classic_editor)
    add_items(classic_editor, "a", "b", "c")

    await controller.begin_edit(1)
    await controller.delete(0)
    await controller.save()
    await bus.wait_until_idle()

    assert classic_editor.items.value == ["b", "c"]
