# ==================================================
# examples/fill_table.py
# ==================================================
import argparse, random, sys
from collision_store import HashingService, TableConfig, STRATEGIES, CHAINING

def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("count", type=int, help="number of inputs to insert")
    p.add_argument("--strategy", choices=STRATEGIES, default=CHAINING)
    p.add_argument("--nodes", type=int, default=4)
    p.add_argument("--capacity", type=int, default=3)
    p.add_argument("--seed", type=int, default=0)
    args = p.parse_args(argv)

    svc = HashingService(TableConfig(args.nodes, args.capacity))
    rnd = random.Random(args.seed)
    status = 0
    for i in range(args.count):
        res = svc.insert(f"value_{i}_{rnd.getrandbits(32):08x}", args.strategy)
        if not res.ok:
            print(f"insert #{i} failed: {res.message}")
            status = 1
            break
    for n in svc.list_nodes():
        print(f"{n.name}: {n.used_capacity}/{n.capacity}  collisions={n.collisions}")
    return status

if __name__ == "__main__":
    sys.exit(main())
