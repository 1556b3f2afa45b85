#!/usr/bin/env python
"""
Ask the storage assistant a question about an inventory exported as JSON.

Usage:
  python scripts/ask_inventory.py inventory.json "Where is the drill?"

The JSON file holds a list of objects with name, location and category keys.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure the repo root is on the import path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pydantic import TypeAdapter, ValidationError

from storage_assistant.assistant import chat_with_inventory
from storage_assistant.core.env import configure_logging, load_dotenv_if_present
from storage_assistant.core.models import InventoryItem


def main() -> None:
    parser = argparse.ArgumentParser(description="Chat with an inventory list.")
    parser.add_argument("inventory", type=Path, help="JSON file with the inventory list")
    parser.add_argument("query", help="Question to ask, e.g. 'Where is the drill?'")
    args = parser.parse_args()

    load_dotenv_if_present()
    configure_logging("WARNING")

    inventory_path = args.inventory.expanduser()
    if not inventory_path.is_file():
        sys.exit(f"Inventory file not found: {inventory_path}")
    try:
        items = TypeAdapter(list[InventoryItem]).validate_json(inventory_path.read_bytes())
    except ValidationError as exc:
        sys.exit(f"Inventory file is not a valid item list:\n{exc}")

    print(chat_with_inventory(args.query, items))


if __name__ == "__main__":
    main()
