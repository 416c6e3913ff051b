# ==================================================
# collision_store/placement.py
# ==================================================
"""
Placement engine: digest → initial bucket → collision resolution.

Every strategy either fully inserts one item or leaves the table untouched.
Callers are expected to hold the table's lock for the whole call so a probe
sequence sees one consistent occupancy snapshot.
"""
from __future__ import annotations
import copy, logging, math
from dataclasses import dataclass
from typing import Optional

from .const   import CHAINING, LINEAR_PROBING, DOUBLE_HASHING
from .digest  import compute_digest, compute_initial_index, compute_step_size
from .results import ErrorKind, Failure, Ok, Result
from .table   import BucketTable, NodeSummary, StorageItem, StorageNode, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    hash:              str
    location:          str
    original_location: str
    is_collision:      bool
    strategy:          str
    item:              StorageItem
    node:              NodeSummary
    step_size:         Optional[int] = None
    probe_sequence:    Optional[int] = None
    timestamp:         str = ""

    def to_dict(self) -> dict:
        out = {
            "hash"            : self.hash,
            "location"        : self.location,
            "originalLocation": self.original_location,
            "isCollision"     : self.is_collision,
            "strategy"        : self.strategy,
            "details": {
                "hashLength" : len(self.hash),
                "storageNode": self.node.to_dict(),
                "timestamp"  : self.timestamp,
            },
        }
        if self.step_size is not None:
            out["stepSize"]      = self.step_size
            out["probeSequence"] = self.probe_sequence
        return out


def _outcome(strategy: str, digest: str, origin: StorageNode, node: StorageNode,
             item: StorageItem, collision: bool) -> Placement:
    return Placement(hash=digest, location=node.name, original_location=origin.name,
                     is_collision=collision, strategy=strategy, item=copy.deepcopy(item),
                     node=NodeSummary.of(node), step_size=item.step_size,
                     probe_sequence=item.probe_sequence, timestamp=utc_now())


# ───────────────────────── strategies ─────────────────────────
def place_chaining(table: BucketTable, data) -> Result[Placement]:
    digest = compute_digest(data, table.config.digest_chars)
    node   = table[compute_initial_index(digest, len(table))]
    collision = bool(node.chain)
    item   = StorageItem(id=digest, content=copy.deepcopy(data), original_location=node.name)
    node.chain.append(item)
    node.used_capacity += item.size               # advisory only, chains are unbounded
    logger.info("chaining: %s → %s (collision=%s)", digest, node.name, collision)
    return Ok(_outcome(CHAINING, digest, node, node, item, collision))


def _probe(table: BucketTable, data, strategy: str, step: int) -> Result[Placement]:
    digest = compute_digest(data, table.config.digest_chars)
    n      = len(table)
    start  = compute_initial_index(digest, n)
    origin = table[start]
    for attempt in range(n):
        node = table[(start + attempt * step) % n]
        logger.debug("%s: %s probe %d → %s (%d/%d)", strategy, digest, attempt + 1,
                     node.name, node.used_capacity, node.capacity)
        if not node.has_room:
            continue
        item = StorageItem(id=digest, content=copy.deepcopy(data), original_location=origin.name,
                           step_size=step if strategy == DOUBLE_HASHING else None,
                           probe_sequence=attempt + 1 if strategy == DOUBLE_HASHING else None)
        node.stored_items.append(item)
        node.used_capacity += item.size
        collision = node is not origin
        if collision:
            node.collisions += 1
        logger.info("%s: %s → %s (collision=%s)", strategy, digest, node.name, collision)
        return Ok(_outcome(strategy, digest, origin, node, item, collision))
    logger.warning("%s: no free node for %s after %d probes", strategy, digest, n)
    if math.gcd(step, n) != 1:                   # stride never reaches every node
        return Failure(ErrorKind.TABLE_FULL, f"No free storage node on probe cycle (step {step})")
    return Failure.of(ErrorKind.TABLE_FULL)


def place_linear_probing(table: BucketTable, data) -> Result[Placement]:
    return _probe(table, data, LINEAR_PROBING, 1)


def place_double_hashing(table: BucketTable, data) -> Result[Placement]:
    step = compute_step_size(data, len(table))       # fixed for this insertion
    return _probe(table, data, DOUBLE_HASHING, step)


STRATEGY_FUNCS = {
    CHAINING      : place_chaining,
    LINEAR_PROBING: place_linear_probing,
    DOUBLE_HASHING: place_double_hashing,
}


def place(table: BucketTable, data, strategy: str = CHAINING) -> Result[Placement]:
    try:
        fn = STRATEGY_FUNCS[strategy]
    except KeyError:
        raise ValueError(f"Unknown strategy {strategy!r}") from None
    return fn(table, data)
