from __future__ import annotations

import pytest

from src.classroom_manager.classroom_manager.container import build_container
from src.classroom_manager.classroom_manager.kv.store import InMemoryKeyValueStore


@pytest.fixture()
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture()
def container(kv_store):
    return build_container(backend="kv", kv_store=kv_store)
