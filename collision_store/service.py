# ==================================================
# collision_store/service.py
# ==================================================
from __future__ import annotations
import logging, threading

from .const     import DEFAULT_STRATEGY, STRATEGIES, TableConfig
from .placement import Placement, place
from .results   import ErrorKind, Failure, Ok, Result
from .table     import BucketTable, NodeDetail, NodeSummary

logger = logging.getLogger(__name__)

RESET_MESSAGE = "All storage nodes have been reset"


class HashingService:
    """Owns one bucket table; every operation runs under a single table lock."""
    def __init__(self, config: TableConfig | None = None):
        self.table = BucketTable(config)
        self._lock = threading.Lock()

    @property
    def config(self) -> TableConfig:
        return self.table.config

    # ------------------------------------------------------------------
    def insert(self, value, strategy: str | None = None) -> Result[Placement]:
        """Validate, then place `value` with `strategy` (chaining by default)."""
        if not value:                             # None, "", b"", 0, False, [], {}
            return Failure.of(ErrorKind.MISSING_INPUT)
        strategy = strategy or DEFAULT_STRATEGY
        if strategy not in STRATEGIES:
            return Failure.of(ErrorKind.UNKNOWN_STRATEGY, str(strategy))
        with self._lock:
            return place(self.table, value, strategy)

    def reset(self) -> Ok[str]:
        with self._lock:
            self.table.reset()
        logger.info("reset %d storage nodes", len(self.table))
        return Ok(RESET_MESSAGE)

    # ------------------------------------------------------------------
    def list_nodes(self) -> list[NodeSummary]:
        with self._lock:
            return [NodeSummary.of(n) for n in self.table]

    def get_node(self, node_id: int) -> Result[NodeDetail]:
        with self._lock:
            node = self.table.find(node_id)
            if node is None:
                return Failure.of(ErrorKind.NODE_NOT_FOUND)
            return Ok(NodeDetail.of(node))
