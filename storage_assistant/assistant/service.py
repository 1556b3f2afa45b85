from __future__ import annotations

from typing import Any, Iterable, Sequence

from storage_assistant.assistant import chat, classifier
from storage_assistant.assistant.genai_client import ClientFactory
from storage_assistant.core.config import AssistantConfig
from storage_assistant.core.models import AnalysisOutcome, AnalysisResult, ChatTurn


class InventoryAssistant:
    """Inventory assistant bound to an explicit configuration and transport."""

    def __init__(
        self, config: AssistantConfig, client_factory: ClientFactory | None = None
    ) -> None:
        self.config = config
        self.client_factory = client_factory

    def analyze_item_image_outcome(self, image_data: str) -> AnalysisOutcome:
        return classifier.analyze_item_image_outcome(
            image_data, self.config, client_factory=self.client_factory
        )

    def analyze_item_image(self, image_data: str) -> AnalysisResult:
        return self.analyze_item_image_outcome(image_data).record

    def chat_with_inventory(
        self,
        query: str,
        inventory: Iterable[Any],
        history: Sequence[ChatTurn] | None = None,
    ) -> str:
        return chat.chat_with_inventory(
            query, inventory, history, self.config, client_factory=self.client_factory
        )
