from __future__ import annotations

import logging
import os
from typing import Iterable, Mapping, Optional

from pydantic import BaseModel, Field

from storage_assistant.core.credentials import CredentialSource, resolve_api_key

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-3-flash-preview"


class AssistantConfig(BaseModel):
    """Explicit settings handed to the assistant at construction time."""

    api_key: Optional[str] = Field(default=None, repr=False)
    model: str = DEFAULT_MODEL
    timeout_ms: Optional[int] = None

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)


def _model_name(environ: Mapping[str, str]) -> str:
    return (environ.get("GEMINI_MODEL") or "").strip() or DEFAULT_MODEL


def _timeout_ms(environ: Mapping[str, str]) -> Optional[int]:
    raw = (environ.get("GEMINI_HTTP_TIMEOUT_MS") or "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring invalid GEMINI_HTTP_TIMEOUT_MS=%r", raw)
        return None
    return value if value > 0 else None


def load_config(
    sources: Iterable[CredentialSource] | None = None,
    environ: Mapping[str, str] | None = None,
) -> AssistantConfig:
    """Resolve the credential and transport settings from the environment."""
    environ = os.environ if environ is None else environ
    return AssistantConfig(
        api_key=resolve_api_key(sources, environ),
        model=_model_name(environ),
        timeout_ms=_timeout_ms(environ),
    )
