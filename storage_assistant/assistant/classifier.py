from __future__ import annotations

import base64
import logging
from typing import List, Optional, Tuple

from google.genai import types
from pydantic import ValidationError

from storage_assistant.assistant.genai_client import (
    ClientFactory,
    ConfigurationMissingError,
    generate_content,
    response_text,
)
from storage_assistant.core.config import AssistantConfig, load_config
from storage_assistant.core.models import AnalysisOutcome, AnalysisResult, Defaulted, Parsed

logger = logging.getLogger(__name__)

IMAGE_MIME_TYPE = "image/jpeg"

ANALYSIS_PROMPT = (
    "Identify this item from the photo. Provide a suggested name, a short category "
    "(e.g., Tools, Collectibles, Electronics), and a brief description."
)

ANALYSIS_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "name": types.Schema(type=types.Type.STRING),
        "category": types.Schema(type=types.Type.STRING),
        "description": types.Schema(type=types.Type.STRING),
    },
    required=["name", "category", "description"],
)


def strip_data_uri(image_data: str) -> str:
    """Drop a leading "data:image/...;base64," header, if any."""
    _, sep, remainder = image_data.partition(",")
    if sep and remainder:
        return remainder
    return image_data


def build_image_request(image_data: str) -> Tuple[List[types.Part], types.GenerateContentConfig]:
    # Strict decode: stray characters must not be dropped from the image.
    image_bytes = base64.b64decode(strip_data_uri(image_data), validate=True)
    contents = [
        types.Part.from_bytes(data=image_bytes, mime_type=IMAGE_MIME_TYPE),
        types.Part.from_text(text=ANALYSIS_PROMPT),
    ]
    request_config = types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=ANALYSIS_SCHEMA,
    )
    return contents, request_config


def parse_analysis(text: Optional[str]) -> AnalysisOutcome:
    """
    Validate the model's JSON against AnalysisResult.

    Never raises: empty text, invalid JSON and schema mismatches all yield
    Defaulted with a short reason.
    """
    if not text or not text.strip():
        logger.error("Failed to parse AI response: empty response text")
        return Defaulted(reason="empty response")

    try:
        record = AnalysisResult.model_validate_json(text)
    except ValidationError as exc:
        invalid_json = any(err["type"] == "json_invalid" for err in exc.errors())
        reason = "invalid JSON" if invalid_json else "schema mismatch"
        logger.error("Failed to parse AI response (%s): %s", reason, exc)
        return Defaulted(reason=reason)
    return Parsed(record=record)


def analyze_item_image_outcome(
    image_data: str,
    config: AssistantConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> AnalysisOutcome:
    """Classify a photographed item, keeping track of whether the default was used."""
    config = load_config() if config is None else config
    if not config.has_credentials:
        raise ConfigurationMissingError("API Key not configured")

    contents, request_config = build_image_request(image_data)
    response = generate_content(config, contents, request_config, client_factory=client_factory)
    outcome = parse_analysis(response_text(response))
    logger.debug("Item analysis finished: %s", outcome.kind)
    return outcome


def analyze_item_image(
    image_data: str,
    config: AssistantConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> AnalysisResult:
    return analyze_item_image_outcome(image_data, config, client_factory).record
