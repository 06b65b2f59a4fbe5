"""pytest configuration and fixtures for vectorstore-node tests."""

import os

import pytest
from PyQt6.QtWidgets import QApplication

from vectorstore_node.exceptions import InputUnavailableError
from vectorstore_node.protocols import set_node_config

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeHost:
    """In-memory host runtime recording every call."""

    def __init__(self, inputs=None, connected=True):
        self.inputs = inputs if inputs is not None else {}
        self.connected = connected
        self.payload = {}
        self.writes = []
        self.pulls = []
        self.notified = []

    def pull_input_data(self, channels, node_id):
        self.pulls.append((list(channels), node_id))
        if not self.connected:
            raise InputUnavailableError(f"No producer connected to {channels}")
        return {channel: self.inputs.get(channel, []) for channel in channels}

    def set_node_data(self, node_id, partial_payload):
        self.writes.append(dict(partial_payload))
        self.payload.update(partial_payload)

    def notify_downstream(self, node_id):
        self.notified.append(node_id)


class Alerts(list):
    """Advisory reporter collecting messages."""

    def __call__(self, message):
        self.append(message)


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def default_node_config():
    """Each test starts from the default configuration."""
    set_node_config(None)
    yield
    set_node_config(None)


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def alerts():
    return Alerts()
