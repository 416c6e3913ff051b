#!/usr/bin/env python3
"""
Hash placement backend  (Flask + CORS)
─────────────────────────────────────────────────────────────
* POST /api/hash                 insert with chaining / linear / double hashing
* POST /api/reset                empty every storage node
* GET  /api/storage-nodes        occupancy summary
* GET  /api/storage-nodes/<id>   one node with its items
"""
from __future__ import annotations
import logging

from flask import Flask, request, jsonify
from flask_cors import CORS

from collision_store import HashingService, ErrorKind
from collision_store.const import HOST, PORT

STATUS = {
    ErrorKind.MISSING_INPUT   : 400,
    ErrorKind.UNKNOWN_STRATEGY: 400,
    ErrorKind.TABLE_FULL      : 400,
    ErrorKind.NODE_NOT_FOUND  : 404,
}

def error(failure):
    return jsonify({"error": failure.message, "kind": failure.kind.value}), STATUS[failure.kind]

# ───────────────────────── app factory ────────────────────────
def create_app(service: HashingService | None = None) -> Flask:
    app = Flask(__name__)
    CORS(app, origins="*")
    svc = service or HashingService()
    app.config["HASHING_SERVICE"] = svc

    @app.post("/api/hash")
    def hash_input():
        body = request.get_json(force=True, silent=True)
        if not isinstance(body, dict):
            body = {}
        res  = svc.insert(body.get("input"), body.get("strategy"))
        if not res.ok: return error(res)
        return jsonify(res.value.to_dict())

    @app.post("/api/reset")
    def reset():
        return {"message": svc.reset().value}

    @app.get("/api/storage-nodes")
    def storage_nodes():
        return jsonify([n.to_dict() for n in svc.list_nodes()])

    @app.get("/api/storage-nodes/<node_id>")
    def storage_node(node_id):
        try:
            res = svc.get_node(int(node_id))
        except ValueError:
            return jsonify({"error": "Storage node not found",
                            "kind": ErrorKind.NODE_NOT_FOUND.value}), 404
        if not res.ok: return error(res)
        return jsonify(res.value.to_dict())

    return app

app = create_app()

# ───────────────────────── launch ─────────────────────────────
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cfg = app.config["HASHING_SERVICE"].config
    print(f"✓ nodes    → {cfg.node_count} × capacity {cfg.capacity}")
    print(f"✓ digest   → sha256[:{cfg.digest_chars}]")
    print(f"✓ backend  → http://{HOST}:{PORT}")
    app.run(host=HOST, port=PORT)
