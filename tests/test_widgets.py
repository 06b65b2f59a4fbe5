"""Tests for node widgets."""

from vectorstore_node.model import EntryStatus
from vectorstore_node.services import NodeStatus, StatusController
from vectorstore_node.widgets import (
    NodeStatusIndicator,
    RUN_BUTTON_TOOLTIP,
    get_entry_status_color,
    get_status_color,
)


def test_indicator_follows_status_controller(qapp):
    status = StatusController()
    indicator = NodeStatusIndicator(status=status)

    assert indicator.label_text == ""
    assert indicator.run_button.toolTip() == RUN_BUTTON_TOOLTIP

    status.begin_run()
    assert indicator.label_text == "Setting up..."
    assert not indicator.run_button.isEnabled()

    status.complete_run()
    assert indicator.label_text == "Ready"
    assert indicator.run_button.isEnabled()


def test_run_button_triggers_callback(qapp):
    status = StatusController()
    runs = []
    indicator = NodeStatusIndicator(status=status, on_run=lambda: runs.append(1))

    indicator.run_button.click()
    assert runs == [1]

    status.begin_run()
    indicator.run()
    assert runs == [1]


def test_indicator_without_run_button(qapp):
    indicator = NodeStatusIndicator(status=StatusController(), show_run=False)

    assert indicator.run_button is None


def test_status_colors():
    assert get_status_color(NodeStatus.READY) != get_status_color(NodeStatus.ERROR)
    assert get_entry_status_color(EntryStatus.READY) == "green"
    assert get_entry_status_color(EntryStatus.ERROR) == "red"
    assert get_entry_status_color(EntryStatus.NONE) == "gray"
    assert get_entry_status_color(None) == "gray"
