from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from google.genai import types

from storage_assistant.assistant.genai_client import ClientFactory, generate_content, response_text
from storage_assistant.core.config import AssistantConfig, load_config
from storage_assistant.core.models import ChatTurn, InventoryItem

logger = logging.getLogger(__name__)

OFFLINE_MESSAGE = "API Key is missing. Please check your deployment settings."
NO_TEXT_FALLBACK = "I'm sorry, I couldn't generate a text response."

_SYSTEM_INSTRUCTION = """
You are the Won-It Storage Assistant. You help users find items in their storage.
Current Inventory List:
{inventory}

Instructions:
1. Be concise and friendly.
2. Tell the user EXACTLY where the item is based on the "Location" field.
3. If the item isn't in the list, suggest they might have misplaced it or haven't added it yet.
""".strip()


def _as_item(item: Any) -> InventoryItem:
    if isinstance(item, InventoryItem):
        return item
    if isinstance(item, Mapping):
        return InventoryItem.model_validate(item)
    return InventoryItem.model_validate(item, from_attributes=True)


def format_inventory(inventory: Iterable[Any]) -> str:
    """One line per item, in the caller's order."""
    lines = []
    for item in inventory:
        entry = _as_item(item)
        lines.append(
            f"- Item: {entry.name}, Location: {entry.location}, Category: {entry.category}"
        )
    return "\n".join(lines)


def build_system_instruction(inventory: Iterable[Any]) -> str:
    return _SYSTEM_INSTRUCTION.format(inventory=format_inventory(inventory))


def chat_with_inventory(
    query: str,
    inventory: Iterable[Any],
    history: Sequence[ChatTurn] | None = None,
    config: AssistantConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> str:
    """
    Answer a free-text question about the inventory.

    A missing credential returns OFFLINE_MESSAGE instead of raising.
    `history` is accepted but not sent to the model: the assistant is
    single-turn until product decides how prior turns should be used.
    """
    config = load_config() if config is None else config
    if not config.has_credentials:
        return OFFLINE_MESSAGE

    request_config = types.GenerateContentConfig(
        system_instruction=build_system_instruction(inventory),
    )
    logger.debug("Inventory chat: %d prior turns not forwarded", len(history or ()))
    response = generate_content(config, query, request_config, client_factory=client_factory)
    return response_text(response) or NO_TEXT_FALLBACK
