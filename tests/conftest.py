"""Shared fixtures for the list editor tests."""

import logging

import pytest

from listedit.controllers.editor_controller import EditorController
from listedit.core.event_bus import EventBus
from listedit.state.editor_state import EditorState


@pytest.fixture(autouse=True)
def logging_enabled():
    """fletx.core switches logging off when imported; tests need records to flow."""
    logging.disable(logging.NOTSET)
    yield


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def editor(bus):
    return EditorState(bus)


@pytest.fixture
def classic_editor(bus):
    """Editor without interaction modes: rows carry their own buttons."""
    return EditorState(bus, modes_enabled=False)


@pytest.fixture
def controller(editor):
    return EditorController(editor)


@pytest.fixture
def add_items():
    """Type and commit each text through the editor's pending input."""
    def _add(state, *texts):
        for text in texts:
            state.set_pending_input(text)
            state.add_item()
    return _add
