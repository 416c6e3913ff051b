from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from collision_store import HashingService, TableConfig


@pytest.fixture
def small_config() -> TableConfig:
    return TableConfig(node_count=4, capacity=3)


@pytest.fixture
def service(small_config: TableConfig) -> HashingService:
    return HashingService(small_config)
