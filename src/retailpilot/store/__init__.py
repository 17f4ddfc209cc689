"""Ledger store layer for retailpilot."""

from retailpilot.store.base import LedgerStore
from retailpilot.store.memory import InMemoryLedgerStore
from retailpilot.store.state import LedgerState

__all__ = ["LedgerStore", "InMemoryLedgerStore", "LedgerState"]
