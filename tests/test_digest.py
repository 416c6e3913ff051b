import hashlib

import pytest

from collision_store.digest import (compute_digest, compute_initial_index,
                                    compute_step_size, to_bytes)


def test_digest_is_sha256_prefix():
    assert compute_digest("hello") == hashlib.sha256(b"hello").hexdigest()[:8]
    assert compute_digest("hello", chars=16) == hashlib.sha256(b"hello").hexdigest()[:16]


def test_digest_is_deterministic():
    assert compute_digest("abc") == compute_digest("abc")
    assert compute_digest("abc") == compute_digest(b"abc")
    assert compute_digest("abc") != compute_digest("abd")


def test_to_bytes_accepts_text_bytes_and_other_values():
    assert to_bytes("é") == "é".encode("utf-8")
    assert to_bytes(b"\x00\x01") == b"\x00\x01"
    assert to_bytes(bytearray(b"xy")) == b"xy"
    assert to_bytes(42) == b"42"


@pytest.mark.parametrize("node_count", [3, 4, 7, 16])
def test_initial_index_in_range(node_count):
    for i in range(200):
        idx = compute_initial_index(compute_digest(f"v{i}"), node_count)
        assert 0 <= idx < node_count


def test_initial_index_interprets_hex():
    assert compute_initial_index("0000000a", 4) == 10 % 4
    assert compute_initial_index("ffffffff", 7) == 0xFFFFFFFF % 7


@pytest.mark.parametrize("node_count", [3, 4, 5, 11, 64])
def test_step_size_in_range_and_stable(node_count):
    for i in range(200):
        step = compute_step_size(f"v{i}", node_count)
        assert 2 <= step <= node_count - 1
        assert step == compute_step_size(f"v{i}", node_count)


def test_step_size_with_three_nodes_is_always_two():
    assert {compute_step_size(f"v{i}", 3) for i in range(50)} == {2}


def test_step_size_rejects_tiny_tables():
    with pytest.raises(ValueError):
        compute_step_size("x", 2)
