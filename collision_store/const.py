# ==================================================
# collision_store/const.py
# ==================================================
from __future__ import annotations
import os
from dataclasses import dataclass

# ───────────────────────── configuration ──────────────────────
NODE_COUNT    = int(os.getenv("HASH_NODE_COUNT",    "4"))
NODE_CAPACITY = int(os.getenv("HASH_NODE_CAPACITY", "1000"))
DIGEST_CHARS  = int(os.getenv("HASH_DIGEST_CHARS",  "8"))    # hex prefix kept from sha256

HOST          = os.getenv("HOST", "0.0.0.0")
PORT          = int(os.getenv("PORT", "3001"))

# ───────────────────────── fixed values ───────────────────────
ITEM_SIZE       = 1                  # every item costs one unit of capacity
NODE_NAME_FMT   = "Storage Node {}"
MIN_NODE_COUNT  = 3                  # step range [2, n-1] must not be empty

CHAINING        = "chaining"
LINEAR_PROBING  = "linear-probing"
DOUBLE_HASHING  = "double-hashing"
STRATEGIES      = (CHAINING, LINEAR_PROBING, DOUBLE_HASHING)
DEFAULT_STRATEGY = CHAINING


def node_name(index: int) -> str:
    """A, B, ... Z, then AA, AB, ... for larger tables."""
    label = ""
    n = index + 1
    while n:
        n, rem = divmod(n - 1, 26)
        label = chr(ord("A") + rem) + label
    return NODE_NAME_FMT.format(label)


@dataclass(frozen=True)
class TableConfig:
    node_count:   int = NODE_COUNT
    capacity:     int = NODE_CAPACITY
    digest_chars: int = DIGEST_CHARS

    def __post_init__(self):
        if self.node_count < MIN_NODE_COUNT:
            raise ValueError(f"node_count must be >= {MIN_NODE_COUNT}, got {self.node_count}")
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
        if not 1 <= self.digest_chars <= 64:
            raise ValueError(f"digest_chars must be in [1, 64], got {self.digest_chars}")

    @classmethod
    def from_env(cls) -> "TableConfig":
        return cls(NODE_COUNT, NODE_CAPACITY, DIGEST_CHARS)
