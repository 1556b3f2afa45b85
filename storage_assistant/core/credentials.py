"""
API credential lookup.

The credential is resolved from an ordered list of sources. Each source is a
callable taking the environment mapping and returning the key or None. The
first non-empty answer wins; a source that blows up is logged and skipped so
resolution itself never raises.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)

API_KEY_NAME = "API_KEY"

# Build tooling substitutes the literal "undefined" for unset variables.
_UNSET_VALUES = {"", "undefined"}

CredentialSource = Callable[[Mapping[str, str]], Optional[str]]

_runtime_config: Any = None


def set_runtime_config(config: Any) -> None:
    """Register a host-provided config object (mapping or attribute bag)."""
    global _runtime_config
    _runtime_config = config


def get_runtime_config() -> Any:
    return _runtime_config


def clear_runtime_config() -> None:
    set_runtime_config(None)


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    if text in _UNSET_VALUES:
        return None
    return text


@dataclass(frozen=True)
class EnvVarSource:
    """Read the key from an environment variable."""

    name: str = API_KEY_NAME

    def __call__(self, environ: Mapping[str, str]) -> Optional[str]:
        return _clean(environ.get(self.name))


@dataclass(frozen=True)
class RuntimeGlobalSource:
    """Read the key from the config object registered with set_runtime_config()."""

    field: str = API_KEY_NAME

    def __call__(self, environ: Mapping[str, str]) -> Optional[str]:
        config = get_runtime_config()
        if config is None:
            return None
        if isinstance(config, Mapping):
            return _clean(config.get(self.field))
        return _clean(getattr(config, self.field))


@dataclass(frozen=True, repr=False)
class StaticSource:
    """Always answer with a fixed value; handy for explicit wiring and tests."""

    value: Optional[str] = None

    def __repr__(self) -> str:
        return "StaticSource(<hidden>)"

    def __call__(self, environ: Mapping[str, str]) -> Optional[str]:
        return _clean(self.value)


def env_var_source(name: str = API_KEY_NAME) -> CredentialSource:
    return EnvVarSource(name)


def runtime_global_source(field: str = API_KEY_NAME) -> CredentialSource:
    return RuntimeGlobalSource(field)


def static_source(value: Optional[str]) -> CredentialSource:
    return StaticSource(value)


DEFAULT_SOURCES: tuple[CredentialSource, ...] = (env_var_source(), runtime_global_source())


def resolve_api_key(
    sources: Iterable[CredentialSource] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Optional[str]:
    environ = os.environ if environ is None else environ
    for source in DEFAULT_SOURCES if sources is None else sources:
        try:
            value = source(environ)
        except Exception as exc:
            logger.warning("Credential source %r unavailable: %s", source, exc)
            continue
        if value:
            return value

    logger.error(
        "Gemini API Key is missing. Please set %s in your deployment environment variables.",
        API_KEY_NAME,
    )
    return None
