from __future__ import annotations

from types import SimpleNamespace

from storage_assistant.assistant import chat
from storage_assistant.core.config import AssistantConfig
from storage_assistant.core.credentials import set_runtime_config
from storage_assistant.core.models import ChatTurn, InventoryItem


def _config() -> AssistantConfig:
    return AssistantConfig(api_key="test-key", model="mock-model")


def test_inventory_line_in_system_instruction(transport) -> None:
    transport.reply("It's on Shelf A2.")
    inventory = [InventoryItem(name="Drill", location="Shelf A2", category="Tools")]

    reply = chat.chat_with_inventory("Where is my drill?", inventory, [], _config(), transport)

    assert reply == "It's on Shelf A2."
    (call,) = transport.calls
    assert call.model == "mock-model"
    assert call.contents == "Where is my drill?"
    assert "- Item: Drill, Location: Shelf A2, Category: Tools" in str(call.config.system_instruction)
    assert call.config.response_schema is None


def test_format_inventory_keeps_order_and_duplicates() -> None:
    inventory = [
        {"name": "Tent", "location": "Garage", "category": "Camping", "id": "1"},
        SimpleNamespace(name="Drill", location="Shelf A2", category="Tools"),
        {"name": "Tent", "location": "Garage", "category": "Camping"},
    ]
    assert chat.format_inventory(inventory) == (
        "- Item: Tent, Location: Garage, Category: Camping\n"
        "- Item: Drill, Location: Shelf A2, Category: Tools\n"
        "- Item: Tent, Location: Garage, Category: Camping"
    )


def test_system_instruction_rules() -> None:
    text = chat.build_system_instruction([])
    assert text.startswith("You are the Won-It Storage Assistant.")
    assert "Current Inventory List:" in text
    assert 'based on the "Location" field' in text
    assert "misplaced" in text


def test_offline_message_without_credential(transport) -> None:
    reply = chat.chat_with_inventory("Where is my drill?", [], [], AssistantConfig(), transport)
    assert reply == chat.OFFLINE_MESSAGE
    assert transport.configs == []
    assert transport.calls == []


def test_offline_when_environment_has_no_key(transport) -> None:
    assert chat.chat_with_inventory("hi", [], client_factory=transport) == chat.OFFLINE_MESSAGE
    assert transport.calls == []


def test_runtime_global_credential(transport) -> None:
    set_runtime_config({"API_KEY": "injected"})
    transport.reply("hello")
    assert chat.chat_with_inventory("hi", [], client_factory=transport) == "hello"
    assert transport.configs[0].api_key == "injected"


def test_fallback_when_response_has_no_text(transport) -> None:
    transport.reply(None)
    assert chat.chat_with_inventory("hi", [], None, _config(), transport) == chat.NO_TEXT_FALLBACK
    transport.reply("")
    assert chat.chat_with_inventory("hi", [], None, _config(), transport) == chat.NO_TEXT_FALLBACK


def test_history_is_not_forwarded(transport) -> None:
    transport.reply("ok")
    history = [ChatTurn(role="user", text="earlier question"), ChatTurn(role="model", text="earlier answer")]
    chat.chat_with_inventory("now", [], history, _config(), transport)
    (call,) = transport.calls
    assert call.contents == "now"
    assert "earlier" not in str(call.config.system_instruction)


def test_transport_failure_propagates(transport) -> None:
    class ServiceDown(Exception):
        pass

    transport.fail(ServiceDown("quota"))
    try:
        chat.chat_with_inventory("hi", [], None, _config(), transport)
    except ServiceDown as exc:
        assert str(exc) == "quota"
    else:
        raise AssertionError("transport error was swallowed")
