from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Transport libraries log every request at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore", "google_genai")


def load_dotenv_if_present(path: str | Path | None = None) -> bool:
    """
    Load deployment variables (API_KEY, GEMINI_MODEL, ...) from a .env file.

    The file defaults to STORAGE_ASSISTANT_DOTENV or ./.env. Values already in
    the process environment win. Returns True when a file was loaded.
    """
    dotenv_path = Path(path or os.getenv("STORAGE_ASSISTANT_DOTENV", ".env"))
    if not dotenv_path.exists():
        return False
    load_dotenv(dotenv_path=dotenv_path, override=False)
    return True


def configure_logging(default_level: str = "INFO") -> None:
    """Configure root logging level from LOG_LEVEL env (default INFO)."""
    level_name = os.getenv("LOG_LEVEL", default_level).upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level)
    if level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
