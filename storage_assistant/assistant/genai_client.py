from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from google import genai
from google.genai import types

from storage_assistant.core.config import AssistantConfig

logger = logging.getLogger(__name__)

ClientFactory = Callable[[AssistantConfig], Any]


class AssistantError(RuntimeError):
    """Base class for storage assistant failures."""


class ConfigurationMissingError(AssistantError):
    """Raised when no API credential could be resolved."""


def default_client_factory(config: AssistantConfig) -> genai.Client:
    http_options = None
    if config.timeout_ms:
        http_options = types.HttpOptions(timeout=config.timeout_ms)
    return genai.Client(api_key=config.api_key, http_options=http_options)


def generate_content(
    config: AssistantConfig,
    contents: Any,
    request_config: types.GenerateContentConfig,
    client_factory: ClientFactory | None = None,
) -> Any:
    """
    Issue a single generate_content call against the configured model.

    Transport errors from google-genai are not caught here.
    """
    if not config.has_credentials:
        raise ConfigurationMissingError("API Key not configured")
    client = (client_factory or default_client_factory)(config)
    logger.debug("Calling %s (json=%s)", config.model, request_config.response_mime_type)
    return client.models.generate_content(
        model=config.model,
        contents=contents,
        config=request_config,
    )


def response_text(response: Any) -> Optional[str]:
    text = getattr(response, "text", None)
    return text if isinstance(text, str) else None
