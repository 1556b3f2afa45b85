"""Gemini-backed item classification and inventory chat."""

from .chat import NO_TEXT_FALLBACK, OFFLINE_MESSAGE, chat_with_inventory
from .classifier import analyze_item_image, analyze_item_image_outcome
from .genai_client import AssistantError, ConfigurationMissingError
from .service import InventoryAssistant

__all__ = [
    "AssistantError",
    "ConfigurationMissingError",
    "InventoryAssistant",
    "NO_TEXT_FALLBACK",
    "OFFLINE_MESSAGE",
    "analyze_item_image",
    "analyze_item_image_outcome",
    "chat_with_inventory",
]
