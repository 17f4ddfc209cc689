"""Store factory functions for creating ledger store instances."""

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from retailpilot.domain.errors import ValidationError
from retailpilot.store.mappers import state_from_dataset
from retailpilot.store.memory import InMemoryLedgerStore
from retailpilot.store.seed import seed_state


def load_dataset(path: str | Path) -> dict:
    """Read a JSON dataset file.

    Raises:
        ValidationError: If the file is missing or is not a JSON object
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError:
        raise ValidationError(f"Dataset file '{path}' not found")
    except json.JSONDecodeError as e:
        raise ValidationError(f"Dataset file '{path}' is not valid JSON: {e}")

    if not isinstance(data, dict):
        raise ValidationError(f"Dataset file '{path}' must contain a JSON object")
    return data


def create_memory_store(
    data_path: Optional[str] = None, now: Optional[datetime] = None
) -> InMemoryLedgerStore:
    """Create an in-memory ledger store.

    Args:
        data_path: Path to a JSON dataset. If None, checks RETAILPILOT_DATA_PATH
            environment variable, then falls back to the built-in demo data
        now: Reference time for the demo data's relative dates

    Returns:
        InMemoryLedgerStore holding the loaded state
    """
    if data_path is None:
        data_path = os.environ.get("RETAILPILOT_DATA_PATH")

    if data_path is None:
        return InMemoryLedgerStore(seed_state(now))

    return InMemoryLedgerStore(state_from_dataset(load_dataset(data_path)))
