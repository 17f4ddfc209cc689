"""In-memory implementation of the ledger store."""

import logging
from typing import Optional

from retailpilot.store.base import LedgerStore
from retailpilot.store.operations import Operation
from retailpilot.store.state import LedgerState

logger = logging.getLogger(__name__)


class InMemoryLedgerStore(LedgerStore):
    """LedgerStore that keeps its state for the lifetime of the process."""

    def __init__(self, initial_state: Optional[LedgerState] = None):
        """Initialize the store.

        Args:
            initial_state: Starting snapshot (empty when omitted)
        """
        self._state = initial_state if initial_state is not None else LedgerState()

    @property
    def state(self) -> LedgerState:
        return self._state

    def apply(self, operation: Operation) -> LedgerState:
        new_state = operation.apply(self._state)
        logger.debug("Applied %s", type(operation).__name__)
        self._state = new_state
        return new_state
