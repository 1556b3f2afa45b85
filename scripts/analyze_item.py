#!/usr/bin/env python
"""
Send a single photo to the item classifier and print the suggested fields.

Example:
  API_KEY=... python scripts/analyze_item.py /absolute/path/to/photo.jpg --show-prompt
"""
from __future__ import annotations

import argparse
import base64
import sys
from pathlib import Path

# Ensure the repo root is on the import path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from storage_assistant.assistant import ConfigurationMissingError, analyze_item_image_outcome
from storage_assistant.assistant.classifier import ANALYSIS_PROMPT
from storage_assistant.core.config import load_config
from storage_assistant.core.env import configure_logging, load_dotenv_if_present
from storage_assistant.core.models import Defaulted


def main() -> None:
    parser = argparse.ArgumentParser(description="Classify a photographed inventory item.")
    parser.add_argument("image", type=Path, help="Path to a JPEG photo of the item.")
    parser.add_argument(
        "--show-prompt",
        action="store_true",
        help="Print the instruction sent alongside the image.",
    )
    args = parser.parse_args()

    load_dotenv_if_present()
    configure_logging("WARNING")

    image_path = args.image.expanduser()
    if not image_path.is_file():
        sys.exit(f"File not found: {image_path}")

    if args.show_prompt:
        print("=== Analysis prompt ===")
        print(ANALYSIS_PROMPT)
        print()

    config = load_config()
    encoded = base64.b64encode(image_path.read_bytes()).decode("utf-8")
    try:
        outcome = analyze_item_image_outcome(encoded, config)
    except ConfigurationMissingError as exc:
        sys.exit(f"{exc}. Set API_KEY in your environment or .env file.")

    record = outcome.record
    print(f"Image: {image_path}")
    print(f"Model: {config.model}")
    print(f"Name: {record.name}")
    print(f"Category: {record.category}")
    print(f"Description: {record.description}")
    if isinstance(outcome, Defaulted):
        print(f"(default item used: {outcome.reason})")


if __name__ == "__main__":
    main()
