from __future__ import annotations

from collision_store import HashingService
from collision_store.digest import compute_digest, compute_initial_index, compute_step_size


def inputs_for_index(index: int, node_count: int = 4, count: int = 1,
                     prefix: str = "k", step: int | None = None) -> list[str]:
    """Distinct inputs whose initial bucket is `index` (and stride is `step`, if given)."""
    found = []
    i = 0
    while len(found) < count:
        value = f"{prefix}{i}"
        i += 1
        if compute_initial_index(compute_digest(value), node_count) != index:
            continue
        if step is not None and compute_step_size(value, node_count) != step:
            continue
        found.append(value)
    return found


def snapshot(svc: HashingService) -> list[dict]:
    return [svc.get_node(n.id).value.to_dict() for n in svc.list_nodes()]
