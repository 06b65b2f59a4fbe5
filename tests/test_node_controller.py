"""Tests for the per-node controller."""

from vectorstore_node.model import StoreMode
from vectorstore_node.protocols import NodeConfig
from vectorstore_node.services import NodeStatus, SetupOutcome, VectorstoreNodeController


def make_controller(host, alerts, payload=None, **kwargs):
    return VectorstoreNodeController("vs-1", host, alerts, payload=payload, **kwargs)


def test_list_edits_are_persisted(host, alerts):
    controller = make_controller(host, alerts)

    entry = controller.model.add("faiss")

    assert host.writes[-1] == {"stores": [entry.to_dict()]}


def test_edit_after_success_marks_output_outdated(host, alerts):
    controller = make_controller(host, alerts)
    first = controller.model.add("docs")
    controller.model.toggle_mode(first.key)
    second = controller.model.add("faiss")
    controller.model.toggle_mode(second.key)
    assert controller.run_setup().outcome is SetupOutcome.READY
    before = controller.model.get(second.key)

    controller.model.update_settings(first.key, {"method": "Boolean Search"})

    assert controller.current_status is NodeStatus.WARNING
    assert controller.model.get(second.key) == before


def test_seeded_from_payload(host, alerts):
    payload = {
        "title": "My stores",
        "stores": [{"key": "a", "storeType": "faiss", "name": "FAISS", "mode": "load", "settings": {}}],
    }

    controller = make_controller(host, alerts, payload=payload)

    assert controller.model.keys() == ["a"]
    assert controller.title == "My stores"
    assert host.writes == []

    result = controller.run_setup()
    assert result.outcome is SetupOutcome.READY
    assert host.payload["vectorstores"] == [{"id": "a", "type": "faiss", "config": {}}]


def test_title_and_icon_default_from_config(host, alerts):
    controller = make_controller(host, alerts, config=NodeConfig(node_title="Stores", node_icon="S"))

    assert controller.title == "Stores"
    assert controller.icon == "S"


def test_refresh_flag_in_payload_resets_once(host, alerts):
    controller = make_controller(host, alerts, payload={"stores": [], "refresh": True})

    assert controller.current_status is NodeStatus.NONE
    assert host.writes == [{"refresh": False}]


def test_handle_refresh_resets_status(host, alerts):
    controller = make_controller(host, alerts)
    entry = controller.model.add("docs")
    controller.model.toggle_mode(entry.key)
    controller.run_setup()
    assert controller.current_status is NodeStatus.READY

    controller.handle_refresh()

    assert controller.current_status is NodeStatus.NONE
    assert host.payload["refresh"] is False


def test_create_entry_with_chunks(host, alerts):
    controller = make_controller(host, alerts)
    entry = controller.model.add("pinecone")
    assert entry.mode is StoreMode.CREATE
    host.inputs = {"chunks": [{"text": "hello"}]}

    assert controller.run_setup().outcome is SetupOutcome.READY


def test_dispose_stops_persisting_edits(host, alerts):
    controller = make_controller(host, alerts)
    controller.dispose()

    controller.model.add("faiss")

    assert host.writes == []
    assert controller.orchestrator.disposed


def test_controller_config_sets_default_mode(host, alerts):
    controller = make_controller(host, alerts, config=NodeConfig(default_mode="load"))

    assert controller.model.add("faiss").mode is StoreMode.LOAD


def test_bad_stored_rows_are_skipped(host, alerts):
    payload = {"stores": [
        {"key": "a", "storeType": "faiss", "name": "FAISS", "mode": "load"},
        {"key": "b", "storeType": "docs", "mode": "sideways"},
        {"key": "c", "storeType": "docs", "status": "exploded"},
        {"storeType": "docs"},
        "garbage",
        {"key": "a", "storeType": "pinecone", "name": "Pinecone"},
    ]}

    controller = make_controller(host, alerts, payload=payload)

    assert controller.model.keys() == ["a"]
    assert controller.model.get("a").store_type == "faiss"
