# ==================================================
# collision_store/table.py
# ==================================================
from __future__ import annotations
import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterator, Optional

from .const import ITEM_SIZE, TableConfig, node_name


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class StorageItem:
    id:                str                 # digest, not unique across items
    content:           object
    original_location: str
    timestamp:         str = field(default_factory=utc_now)
    size:              int = ITEM_SIZE
    step_size:         Optional[int] = None
    probe_sequence:    Optional[int] = None

    def to_dict(self) -> dict:
        out = {
            "id"              : self.id,
            "content"         : self.content,
            "timestamp"       : self.timestamp,
            "size"            : self.size,
            "originalLocation": self.original_location,
        }
        if self.step_size is not None:
            out["stepSize"]      = self.step_size
            out["probeSequence"] = self.probe_sequence
        return out


@dataclass
class StorageNode:
    """One bucket. `stored_items` is used by probing, `chain` by chaining."""
    id:            int
    name:          str
    capacity:      int
    used_capacity: int = 0
    stored_items:  list = field(default_factory=list)
    chain:         list = field(default_factory=list)
    collisions:    int = 0

    @property
    def has_room(self) -> bool:
        return self.used_capacity < self.capacity

    def clear(self):
        self.used_capacity = 0
        self.stored_items.clear()
        self.chain.clear()
        self.collisions = 0


# ───────────────────────── read‑only projections ──────────────
@dataclass(frozen=True)
class NodeSummary:
    id:            int
    name:          str
    capacity:      int
    used_capacity: int
    collisions:    int

    @classmethod
    def of(cls, node: StorageNode) -> "NodeSummary":
        return cls(node.id, node.name, node.capacity, node.used_capacity, node.collisions)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "capacity": self.capacity,
                "usedCapacity": self.used_capacity, "collisions": self.collisions}


@dataclass(frozen=True)
class NodeDetail(NodeSummary):
    stored_items: tuple = ()
    chain:        tuple = ()

    @classmethod
    def of(cls, node: StorageNode) -> "NodeDetail":
        # content may be a mutable JSON value; hand out deep copies only
        return cls(node.id, node.name, node.capacity, node.used_capacity, node.collisions,
                   copy.deepcopy(tuple(node.stored_items)),
                   copy.deepcopy(tuple(node.chain)))

    def to_dict(self) -> dict:
        out = super().to_dict()
        out["storedItems"] = [i.to_dict() for i in self.stored_items]
        out["chain"]       = [i.to_dict() for i in self.chain]
        return out


# ───────────────────────── the table ──────────────────────────
class BucketTable:
    """Fixed‑size ordered set of storage nodes, built once per config."""
    def __init__(self, config: TableConfig | None = None):
        self.config = config or TableConfig.from_env()
        self.nodes  = [StorageNode(id=i + 1, name=node_name(i), capacity=self.config.capacity)
                       for i in range(self.config.node_count)]

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> StorageNode:
        return self.nodes[index]

    def __iter__(self) -> Iterator[StorageNode]:
        return iter(self.nodes)

    def find(self, node_id: int) -> Optional[StorageNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def reset(self):
        for node in self.nodes:
            node.clear()
