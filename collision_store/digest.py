# ==================================================
# collision_store/digest.py
# ==================================================
from __future__ import annotations
import hashlib, struct
import xxhash                                   # pip install xxhash

from .const import DIGEST_CHARS

# ── small utils ──────────────────────────────────────────────
def to_bytes(value) -> bytes:
    """bytes pass through, str → utf‑8, anything else via str()."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str):
        value = str(value)
    return value.encode("utf-8")

# ── primary digest ───────────────────────────────────────────
def compute_digest(data, chars: int = DIGEST_CHARS) -> str:
    """Truncated sha256 hex of `data`; doubles as item id and index source."""
    return hashlib.sha256(to_bytes(data)).hexdigest()[:chars]

def compute_initial_index(hash_hex: str, node_count: int) -> int:
    return int(hash_hex, 16) % node_count

# ── secondary hash for double hashing ────────────────────────
def compute_step_size(data, node_count: int) -> int:
    """
    Probe stride in [2, node_count‑1].
    md5 and xxh64 are unrelated to the sha256 used for the primary index;
    their leading 32 bits are xor‑mixed before the range reduction.
    """
    if node_count < 3:
        raise ValueError("double hashing needs at least 3 nodes")
    raw = to_bytes(data)
    (a,) = struct.unpack(">I", hashlib.md5(raw).digest()[:4])
    (b,) = struct.unpack(">I", xxhash.xxh64(raw).digest()[:4])
    return 2 + (a ^ b) % (node_count - 2)
